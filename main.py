from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from secret_stress.config import get_settings
from secret_stress.schemas import (
    CrisisAssessment,
    CrisisKeyword,
    CrisisResource,
    DeleteResponse,
    KeywordCheckResponse,
    SeverityResponse,
    StatsResponse,
    Submission,
    SubmissionCreateRequest,
    SubmissionResponse,
    TextRequest,
)
from secret_stress.services import CrisisDetector, KeywordRegistry
from secret_stress.store import SubmissionNotFoundError, SubmissionStore

settings = get_settings()
logging.getLogger("secret_stress").setLevel(settings.log_level)

app = FastAPI(
    title="Secret Stress",
    version="0.1.0",
    description="Anonymous student stress log with crisis-language detection.",
)

logger = logging.getLogger("uvicorn.error")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

keyword_registry = KeywordRegistry()
crisis_detector = CrisisDetector(registry=keyword_registry)
submission_store = SubmissionStore(
    retention_days=settings.data_retention_days,
    min_length=settings.min_submission_length,
    max_length=settings.max_submission_length,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/crisis/assess", response_model=CrisisAssessment)
async def assess_text(payload: TextRequest) -> CrisisAssessment:
    assessment = crisis_detector.detect(payload.text)
    _log_assessment(assessment, source="assess")
    return assessment


@app.post("/crisis/check", response_model=KeywordCheckResponse)
async def check_text(payload: TextRequest) -> KeywordCheckResponse:
    return KeywordCheckResponse(
        contains_keywords=crisis_detector.contains_keywords(payload.text)
    )


@app.post("/crisis/severity", response_model=SeverityResponse)
async def text_severity(payload: TextRequest) -> SeverityResponse:
    return SeverityResponse(severity=crisis_detector.highest_severity(payload.text))


@app.get("/crisis/resources", response_model=List[CrisisResource])
async def list_resources() -> List[CrisisResource]:
    return crisis_detector.resources()


@app.post("/crisis/resources/relevant", response_model=List[CrisisResource])
async def relevant_resources(assessment: CrisisAssessment) -> List[CrisisResource]:
    return crisis_detector.relevant_resources(assessment)


@app.get("/crisis/keywords", response_model=List[CrisisKeyword])
async def list_keywords() -> List[CrisisKeyword]:
    return crisis_detector.keywords()


@app.post("/crisis/keywords", response_model=CrisisKeyword, status_code=201)
async def add_keyword(keyword: CrisisKeyword) -> CrisisKeyword:
    if not settings.allow_keyword_extension:
        raise HTTPException(status_code=403, detail="Keyword extension is disabled")
    crisis_detector.add_keyword(keyword)
    return keyword


@app.post("/submissions", response_model=SubmissionResponse, status_code=201)
async def create_submission(payload: SubmissionCreateRequest) -> SubmissionResponse:
    assessment = crisis_detector.detect(payload.content)
    try:
        submission = await submission_store.save(
            content=payload.content,
            mood=payload.mood,
            tags=payload.tags,
            crisis_assessment=assessment,
        )
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err))
    _log_assessment(assessment, source=f"submission={submission.id}")
    return SubmissionResponse(
        submission=submission,
        resources=crisis_detector.relevant_resources(assessment),
    )


@app.get("/submissions", response_model=List[Submission])
async def list_submissions() -> List[Submission]:
    return await submission_store.list_submissions()


@app.get("/submissions/{submission_id}", response_model=Submission)
async def get_submission(submission_id: str) -> Submission:
    try:
        return await submission_store.get(submission_id)
    except SubmissionNotFoundError:
        raise HTTPException(status_code=404, detail="Submission not found")


@app.delete("/submissions/{submission_id}", status_code=204)
async def delete_submission(submission_id: str) -> Response:
    try:
        await submission_store.delete(submission_id)
    except SubmissionNotFoundError:
        raise HTTPException(status_code=404, detail="Submission not found")
    return Response(status_code=204)


@app.delete("/submissions", response_model=DeleteResponse)
async def clear_submissions() -> DeleteResponse:
    deleted = await submission_store.clear()
    logger.info("Emergency wipe removed %d submission(s)", deleted)
    return DeleteResponse(deleted=deleted)


@app.post("/submissions/purge", response_model=DeleteResponse)
async def purge_expired() -> DeleteResponse:
    return DeleteResponse(deleted=await submission_store.delete_expired())


@app.get("/stats", response_model=StatsResponse)
async def stats() -> StatsResponse:
    return await submission_store.stats()


def _log_assessment(assessment: CrisisAssessment, source: str) -> None:
    # Only severity and counts are logged; user text never is.
    if assessment.show_resources:
        logger.warning(
            "Crisis language detected (%s): severity=%s matches=%d",
            source,
            assessment.severity.value,
            len(assessment.matched_keywords),
        )
    elif assessment.matched_keywords:
        logger.info(
            "Concerning language detected (%s): severity=%s matches=%d",
            source,
            assessment.severity.value,
            len(assessment.matched_keywords),
        )
