"""
Per-dimension match functions.

Every scorer returns a value in [0, 1] and degrades to a fixed neutral or
floor value instead of raising when optional data is missing.
"""
import operator
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .embeddings import SKILL_EMBEDDINGS
from .models import Availability, BudgetRange, MatchBreakdown, UserPreferences
from .similarity import cosine_similarity, jaccard_similarity


EXPERIENCE_LEVELS = {"entry": 1, "mid": 2, "senior": 3, "executive": 4}
DEFAULT_IDEAL_GAP = 1.5

TIMEZONE_GROUPS = {
    "UTC": ("UTC", "GMT"),
    "US_EAST": ("EST", "EDT", "America/New_York"),
    "US_WEST": ("PST", "PDT", "America/Los_Angeles"),
    "EU": ("CET", "CEST", "Europe/London", "Europe/Berlin"),
    "ASIA": ("JST", "Asia/Tokyo", "Asia/Shanghai", "IST", "Asia/Kolkata"),
}

PERSONALITY_SCALE = {
    "extroverted": 1, "introverted": -1,
    "analytical": 1, "creative": 0.5,
    "detail-oriented": 1, "big-picture": 0.5,
    "patient": 1, "energetic": 0.7,
    "structured": 1, "flexible": 0.8,
    "direct": 0.8, "supportive": 1,
    "challenging": 0.7, "encouraging": 1,
}

NEUTRAL_SCORE = 0.5


def _distinct(values: Sequence[str]) -> List[str]:
    # Lower-cased, first occurrence kept
    return list(dict.fromkeys(v.lower() for v in values))


def skills_match(
    mentor_skills: Sequence[str],
    mentee_skills: Sequence[str],
    embeddings: Mapping[str, np.ndarray] = SKILL_EMBEDDINGS,
) -> float:
    """
    Average, over the mentee's known skills, of the best embedding match
    among the mentor's known skills.

    Rewards a mentor covering each mentee skill rather than raw overlap.
    Falls back to Jaccard on the names when none of the mentee's skills
    are in the embedding table.
    """
    if not mentor_skills or not mentee_skills:
        return 0.0

    mentor_vectors = [v for v in (embeddings.get(s) for s in _distinct(mentor_skills)) if v is not None]

    total = 0.0
    known = 0
    for skill in _distinct(mentee_skills):
        mentee_vector = embeddings.get(skill)
        if mentee_vector is None:
            continue
        best = 0.0
        for mentor_vector in mentor_vectors:
            best = max(best, cosine_similarity(mentee_vector, mentor_vector))
        total += best
        known += 1

    if known == 0:
        return jaccard_similarity(mentor_skills, mentee_skills)
    return total / known


def experience_match(mentor_level: str, mentee_level: str, preferred_level: Optional[str] = None) -> float:
    mentor_rank = EXPERIENCE_LEVELS.get(mentor_level, 0)
    mentee_rank = EXPERIENCE_LEVELS.get(mentee_level, 0)
    gap = mentor_rank - mentee_rank

    if gap <= 0:
        return 0.1
    if gap > 3:
        return 0.3
    if 1 <= gap <= 2:
        return 1.0

    if preferred_level in EXPERIENCE_LEVELS:
        ideal_gap = EXPERIENCE_LEVELS[preferred_level] - mentee_rank
    else:
        ideal_gap = DEFAULT_IDEAL_GAP
    return max(0.5, 1 - abs(gap - ideal_gap) * 0.3)


def availability_match(mentor: Availability, mentee: Availability) -> float:
    day_overlap = jaccard_similarity(mentor.days, mentee.days)
    hour_overlap = jaccard_similarity(mentor.hours, mentee.hours)
    return (day_overlap + hour_overlap) / 2


def timezone_group(tz: str) -> Optional[str]:
    for group, zones in TIMEZONE_GROUPS.items():
        if tz in zones:
            return group
    return None


def location_match(
    mentor_location: Optional[str],
    mentee_location: Optional[str],
    mentor_tz: str,
    mentee_tz: str,
) -> float:
    """Same place or same timezone group scores 1.0; anything else 0.3"""
    if mentor_location and mentor_location == mentee_location:
        return 1.0
    group = timezone_group(mentor_tz)
    if group is not None and group == timezone_group(mentee_tz):
        return 1.0
    return 0.3


def budget_match(mentor_rate: Optional[float], mentee_budget: Optional[BudgetRange]) -> float:
    if not mentor_rate or mentee_budget is None:
        return NEUTRAL_SCORE

    if mentee_budget.min <= mentor_rate <= mentee_budget.max:
        return 1.0

    if mentor_rate < mentee_budget.min:
        distance = (mentee_budget.min - mentor_rate) / mentee_budget.min
    elif mentee_budget.max == 0:
        return 0.0
    else:
        distance = (mentor_rate - mentee_budget.max) / mentee_budget.max
    return max(0.0, 1 - distance)


def personality_match(mentor_traits: Sequence[str], mentee_traits: Sequence[str]) -> float:
    """Share of trait pairs whose scale values lie within 0.5 (others count half)"""
    if not mentor_traits or not mentee_traits:
        return NEUTRAL_SCORE

    mentor_traits = _distinct(mentor_traits)
    mentee_traits = _distinct(mentee_traits)

    compatibility = 0.0
    for mentee_trait in mentee_traits:
        mentee_value = PERSONALITY_SCALE.get(mentee_trait, 0)
        for mentor_trait in mentor_traits:
            mentor_value = PERSONALITY_SCALE.get(mentor_trait, 0)
            compatibility += 1.0 if abs(mentor_value - mentee_value) < 0.5 else 0.5
    return compatibility / (len(mentee_traits) * len(mentor_traits))


def communication_match(mentor_style: str, mentee_style: str) -> float:
    return 1.0 if mentor_style == mentee_style else 0.5


def data_completeness(mentor: UserPreferences, mentee: UserPreferences) -> float:
    """Mean share of the six presence checks passed by each side"""
    mentor_checks = (
        bool(mentor.skills),
        bool(mentor.interests),
        bool(mentor.experience_level),
        bool(mentor.availability.days),
        bool(mentor.personality_traits),
        bool(mentor.languages),
    )
    mentee_checks = (
        bool(mentee.skills),
        bool(mentee.interests),
        bool(mentee.goals),
        bool(mentee.availability.days),
        bool(mentee.personality_traits),
        bool(mentee.languages),
    )
    return (sum(mentor_checks) / len(mentor_checks) + sum(mentee_checks) / len(mentee_checks)) / 2


Rule = Tuple[Callable[[float, float], bool], float, str]

# Evaluated in this order; the first matching rule per dimension wins.
REASONING_RULES: Tuple[Tuple[str, Tuple[Rule, ...]], ...] = (
    ("skills_match", (
        (operator.gt, 0.8, "Excellent skills alignment - mentor has strong expertise in mentee's areas of interest"),
        (operator.gt, 0.6, "Good skills overlap with opportunities for growth"),
        (operator.lt, 0.3, "Limited skills overlap - may require broader mentorship approach"),
    )),
    ("experience_compatibility", (
        (operator.gt, 0.8, "Optimal experience gap for effective mentorship"),
        (operator.lt, 0.4, "Experience levels may not be ideally matched"),
    )),
    ("availability_match", (
        (operator.gt, 0.7, "Strong availability overlap for regular sessions"),
        (operator.lt, 0.3, "Limited availability overlap - may require flexible scheduling"),
    )),
    ("goals_alignment", (
        (operator.gt, 0.6, "Well-aligned career goals and objectives"),
    )),
    ("personality_fit", (
        (operator.gt, 0.7, "Compatible personality traits for effective mentoring relationship"),
    )),
    ("location_compatibility", (
        (operator.gt, 0.8, "Same location/timezone for easy coordination"),
        (operator.lt, 0.4, "Different timezones - remote mentorship recommended"),
    )),
)


def generate_reasoning(breakdown: MatchBreakdown) -> List[str]:
    reasoning = []
    for dimension, rules in REASONING_RULES:
        score = getattr(breakdown, dimension)
        for compare, threshold, message in rules:
            if compare(score, threshold):
                reasoning.append(message)
                break
    return reasoning
