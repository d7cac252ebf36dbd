from __future__ import annotations

from typing import Dict, List

from ..schemas import Category, CrisisKeyword, CrisisResource, Severity

_HURT_MYSELF_MESSAGE = (
    "It sounds like you're in a lot of pain right now. There are healthier ways "
    "to cope, and people who can help you find them."
)

# Table order is the tie-break when several matches share the top severity.
DEFAULT_KEYWORDS: List[CrisisKeyword] = [
    CrisisKeyword(
        keyword="kill myself",
        severity=Severity.critical,
        message="It sounds like you're going through something really painful. You don't have to face this alone.",
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="suicide",
        severity=Severity.critical,
        message="I'm really concerned about you. Your life matters, and there are people who want to help.",
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="suicidal",
        severity=Severity.critical,
        message="It sounds like you're in a really dark place right now. Please reach out for support - you deserve help.",
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="end it all",
        severity=Severity.critical,
        message="I'm hearing that you're in tremendous pain. There are people who care and want to support you through this.",
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="don't want to live",
        severity=Severity.critical,
        message="It sounds like you're struggling with some really heavy feelings. You don't have to carry this burden alone.",
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="better off dead",
        severity=Severity.critical,
        message="I'm really worried about what you're going through. Your life has value, even when it doesn't feel that way.",
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="hurt myself",
        severity=Severity.high,
        message=_HURT_MYSELF_MESSAGE,
        category=Category.self_harm,
    ),
    CrisisKeyword(
        keyword="hurting myself",
        severity=Severity.high,
        message=_HURT_MYSELF_MESSAGE,
        category=Category.self_harm,
    ),
    CrisisKeyword(
        keyword="self harm",
        severity=Severity.high,
        message="I hear that you're struggling with some intense emotions. You deserve support in finding safer ways to cope.",
        category=Category.self_harm,
    ),
    CrisisKeyword(
        keyword="cutting myself",
        severity=Severity.high,
        message="It sounds like you're dealing with overwhelming feelings. There are people who understand and want to help.",
        category=Category.self_harm,
    ),
    CrisisKeyword(
        keyword="want to die",
        severity=Severity.critical,
        message=(
            "I'm deeply concerned about you. These feelings are serious, but they don't have to be "
            "permanent. Please reach out for help."
        ),
        category=Category.suicide,
    ),
    CrisisKeyword(
        keyword="no reason to live",
        severity=Severity.critical,
        message="It sounds like you're feeling hopeless right now. These feelings are real, but they can change with support.",
        category=Category.suicide,
    ),
    # Severe distress
    CrisisKeyword(
        keyword="can't go on",
        severity=Severity.high,
        message=(
            "It sounds like you're feeling overwhelmed. Taking things one moment at a time is okay - "
            "you don't have to figure everything out right now."
        ),
        category=Category.severe_distress,
    ),
    CrisisKeyword(
        keyword="breaking down",
        severity=Severity.medium,
        message="It sounds like you're under a lot of pressure. Remember that it's okay to not be okay sometimes.",
        category=Category.severe_distress,
    ),
    CrisisKeyword(
        keyword="losing my mind",
        severity=Severity.medium,
        message=(
            "I hear that you're feeling overwhelmed. What you're experiencing is a response to stress - "
            "it doesn't mean you're losing anything."
        ),
        category=Category.severe_distress,
    ),
    CrisisKeyword(
        keyword="can't take it anymore",
        severity=Severity.high,
        message=(
            "It sounds like you're at your limit. It's okay to step back and ask for help - "
            "you don't have to handle everything alone."
        ),
        category=Category.severe_distress,
    ),
    CrisisKeyword(
        keyword="giving up",
        severity=Severity.high,
        message=(
            "I hear that you're feeling exhausted and discouraged. It's okay to rest - giving up on "
            "everything and taking a break are different things."
        ),
        category=Category.severe_distress,
    ),
    # Abuse
    CrisisKeyword(
        keyword="abuse",
        severity=Severity.high,
        message=(
            "It sounds like you might be experiencing something really difficult. You don't deserve "
            "to be treated this way, and support is available."
        ),
        category=Category.abuse,
    ),
    CrisisKeyword(
        keyword="abusive",
        severity=Severity.high,
        message="I hear that you're dealing with a harmful situation. You deserve to be treated with respect and kindness.",
        category=Category.abuse,
    ),
    CrisisKeyword(
        keyword="being hurt",
        severity=Severity.high,
        message="It sounds like you might be in a concerning situation. Your safety matters, and there are people who can help.",
        category=Category.abuse,
    ),
    # Violence
    CrisisKeyword(
        keyword="hurt someone",
        severity=Severity.high,
        message=(
            "It sounds like you're experiencing some intense anger or frustration. These feelings are "
            "valid, and there are ways to work through them safely."
        ),
        category=Category.violence,
    ),
    CrisisKeyword(
        keyword="kill someone",
        severity=Severity.critical,
        message=(
            "I'm hearing that you're experiencing very intense feelings. It's important to talk to "
            "someone who can help you process these emotions safely."
        ),
        category=Category.violence,
    ),
    # Eating disorders
    CrisisKeyword(
        keyword="starving myself",
        severity=Severity.high,
        message=(
            "It sounds like you might be struggling with your relationship with food. You deserve to "
            "nourish yourself, and support is available."
        ),
        category=Category.eating_disorder,
    ),
    CrisisKeyword(
        keyword="make myself throw up",
        severity=Severity.high,
        message=(
            "I hear that you're dealing with difficult feelings about your body or food. There are "
            "healthier ways to cope, and people who can help."
        ),
        category=Category.eating_disorder,
    ),
    CrisisKeyword(
        keyword="eating disorder",
        severity=Severity.high,
        message=(
            "It sounds like you're struggling with food or body image. These challenges are real, "
            "and recovery is possible with support."
        ),
        category=Category.eating_disorder,
    ),
    # Substances
    CrisisKeyword(
        keyword="overdose",
        severity=Severity.critical,
        message=(
            "I'm very concerned about what you're sharing. If you've taken something or are "
            "considering it, please seek immediate medical help."
        ),
        category=Category.substance,
    ),
    CrisisKeyword(
        keyword="pills to end it",
        severity=Severity.critical,
        message="I'm deeply worried about you. Please reach out for immediate help - your life matters.",
        category=Category.substance,
    ),
]

SEVERITY_RESPONSES: Dict[Severity, str] = {
    Severity.none: "",
    Severity.low: (
        "Thanks for sharing. It sounds like things are a bit challenging right now. "
        "Remember, it's okay to take things one step at a time."
    ),
    Severity.medium: (
        "I can hear that you're going through something difficult. Your feelings are valid, "
        "and it's brave of you to express them. Consider talking to someone you trust."
    ),
    Severity.high: (
        "It sounds like you're dealing with something really heavy right now. You don't have to "
        "carry this alone - reaching out to a counselor, trusted friend, or crisis line could help."
    ),
    Severity.critical: (
        "I'm really concerned about you. What you're experiencing sounds incredibly painful, but "
        "please know that help is available and these feelings can change. Please reach out to a "
        "crisis line or emergency services right now."
    ),
}

CRISIS_RESOURCES: List[CrisisResource] = [
    CrisisResource(
        name="988 Suicide & Crisis Lifeline",
        contact="988",
        description="Free, confidential support for people in distress",
        available_24x7=True,
        website="https://988lifeline.org",
    ),
    CrisisResource(
        name="Crisis Text Line",
        contact="Text HOME to 741741",
        description="Text-based crisis support with trained counselors",
        available_24x7=True,
        website="https://www.crisistextline.org",
    ),
    CrisisResource(
        name="National Sexual Assault Hotline",
        contact="1-800-656-4673",
        description="Support for survivors of sexual assault",
        available_24x7=True,
        website="https://www.rainn.org",
    ),
    CrisisResource(
        name="National Domestic Violence Hotline",
        contact="1-800-799-7233",
        description="Support for those experiencing domestic violence",
        available_24x7=True,
        website="https://www.thehotline.org",
    ),
    CrisisResource(
        name="National Eating Disorders Association",
        contact="1-800-931-2237",
        description="Support for eating disorders and body image issues",
        available_24x7=False,
        website="https://www.nationaleatingdisorders.org",
    ),
]

# Medium severity discloses a fixed prefix of the list, not a category match.
MEDIUM_RESOURCE_COUNT = 3
