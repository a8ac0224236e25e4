"""Matching models"""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


Role = Literal["mentor", "mentee"]
ExperienceLevel = Literal["entry", "mid", "senior", "executive"]


class Availability(BaseModel):
    """Weekly availability windows"""
    model_config = ConfigDict(frozen=True)

    days: List[str] = Field(..., description="Weekday names, e.g. 'Monday'")
    hours: List[str] = Field(..., description="Time-of-day slots, e.g. '18:00'")


class BudgetRange(BaseModel):
    """Hourly budget a mentee is willing to pay"""
    model_config = ConfigDict(frozen=True)

    min: float = Field(..., ge=0.0)
    max: float = Field(..., ge=0.0)
    currency: str = "USD"

    @model_validator(mode="after")
    def check_bounds(self) -> "BudgetRange":
        if self.min > self.max:
            raise ValueError(f"Budget min ({self.min}) exceeds max ({self.max})")
        return self


class UserPreferences(BaseModel):
    """
    One mentor or mentee candidate.

    Profiles are immutable: the engine only reads them. Use ``with_updates``
    to derive a changed copy.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
    skills: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    experience_level: ExperienceLevel
    preferred_mentor_experience: Optional[Literal["mid", "senior", "executive"]] = None
    industry: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    timezone: str
    availability: Availability
    communication_style: Literal["formal", "casual", "mixed"]
    personality_traits: List[str] = Field(default_factory=list)
    budget_range: Optional[BudgetRange] = Field(None, description="Mentee-side hourly budget")
    hourly_rate: Optional[float] = Field(None, ge=0.0, description="Mentor-side hourly rate")
    languages: List[str] = Field(default_factory=list)

    # Carried through, not scored
    session_frequency: Optional[Literal["weekly", "biweekly", "monthly", "flexible"]] = None
    session_duration: Optional[Literal["30min", "60min", "90min", "flexible"]] = None
    mentorship_type: Optional[Literal[
        "career_guidance", "skill_development", "leadership",
        "entrepreneurship", "technical", "mixed",
    ]] = None
    learning_style: Optional[Literal["visual", "auditory", "kinesthetic", "reading", "mixed"]] = None
    company_size_preference: Optional[Literal["startup", "small", "medium", "large", "enterprise"]] = None
    remote_preference: Optional[Literal["remote_only", "in_person", "hybrid", "no_preference"]] = None

    def with_updates(self, **changes: Any) -> "UserPreferences":
        """Return a validated copy with ``changes`` merged in"""
        return type(self).model_validate({**self.model_dump(), **changes})


class Interaction(BaseModel):
    """A recorded user action against another profile"""
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    target_id: str = Field(..., alias="targetId")
    type: str = "view"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class MatchingWeights(BaseModel):
    """Per-dimension weights; the defaults sum to 1.0"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    skills: float = 0.25
    interests: float = 0.15
    goals: float = 0.20
    experience: float = 0.15
    availability: float = 0.10
    personality: float = 0.05
    communication: float = 0.03
    location: float = 0.03
    budget: float = 0.02
    language: float = 0.02

    def merged(self, overrides: Optional[Union["MatchingWeights", Mapping[str, float]]] = None) -> "MatchingWeights":
        """
        Shallow-merge partial overrides onto these weights.

        The result is not re-normalised: overrides that do not sum to 1.0
        change the scale of ``overall_score``.
        """
        if not overrides:
            return self
        if isinstance(overrides, MatchingWeights):
            return overrides
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown matching weights: {sorted(unknown)}")
        return type(self)(**{**self.model_dump(), **overrides})

    def total(self) -> float:
        return sum(self.model_dump().values())


class MatchBreakdown(BaseModel):
    """Normalised per-dimension scores"""
    skills_match: float = Field(..., ge=0.0, le=1.0)
    interests_match: float = Field(..., ge=0.0, le=1.0)
    goals_alignment: float = Field(..., ge=0.0, le=1.0)
    experience_compatibility: float = Field(..., ge=0.0, le=1.0)
    availability_match: float = Field(..., ge=0.0, le=1.0)
    personality_fit: float = Field(..., ge=0.0, le=1.0)
    communication_style: float = Field(..., ge=0.0, le=1.0)
    location_compatibility: float = Field(..., ge=0.0, le=1.0)
    budget_compatibility: float = Field(..., ge=0.0, le=1.0)
    language_match: float = Field(..., ge=0.0, le=1.0)


SCORE_LABELS = (
    (0.9, "Perfect Match"),
    (0.8, "Excellent Match"),
    (0.7, "Great Match"),
    (0.6, "Good Match"),
)


class MatchScore(BaseModel):
    """Scored (mentor, mentee) pair"""
    mentor_id: str
    mentee_id: str
    overall_score: float = Field(..., description="Weighted sum of the breakdown")
    breakdown: MatchBreakdown
    confidence: float = Field(..., description="overall_score scaled by data completeness, capped at 0.95")
    reasoning: List[str] = Field(default_factory=list)

    @property
    def label(self) -> str:
        for threshold, label in SCORE_LABELS:
            if self.overall_score >= threshold:
                return label
        return "Potential Match"


_profile_list = TypeAdapter(List[UserPreferences])


def load_profiles(path: Union[str, Path]) -> List[UserPreferences]:
    """Load a JSON array of profiles"""
    with open(path, 'r') as f:
        return _profile_list.validate_python(json.load(f))
