"""
Pytest configuration and fixtures.

Profiles are built through ``make_profile`` so each test only spells out
the fields it cares about.
"""
from pathlib import Path

import pytest

from mentormatch.matching import MatchingEngine, UserPreferences, load_profiles

SAMPLE_PROFILES = Path(__file__).resolve().parents[1] / "data" / "sample_profiles.json"


def build_profile(**overrides) -> UserPreferences:
    base = {
        "id": "user",
        "role": "mentee",
        "skills": [],
        "interests": [],
        "goals": [],
        "experience_level": "entry",
        "timezone": "UTC",
        "availability": {"days": [], "hours": []},
        "communication_style": "formal",
        "personality_traits": [],
        "languages": [],
    }
    base.update(overrides)
    return UserPreferences.model_validate(base)


@pytest.fixture
def make_profile():
    return build_profile


@pytest.fixture
def engine():
    """Fresh engine per test so interaction history never leaks"""
    return MatchingEngine()


@pytest.fixture
def scenario_mentor():
    return build_profile(
        id="mentor-a",
        role="mentor",
        skills=["React", "TypeScript"],
        experience_level="senior",
        availability={"days": ["Monday"], "hours": ["18:00"]},
        timezone="America/New_York",
        communication_style="formal",
        personality_traits=["Patient"],
        languages=["English"],
    )


@pytest.fixture
def scenario_mentee():
    return build_profile(
        id="mentee-a",
        role="mentee",
        skills=["React"],
        experience_level="entry",
        goals=["Career Transition"],
        availability={"days": ["Monday"], "hours": ["18:00"]},
        timezone="America/New_York",
        communication_style="formal",
        personality_traits=["Encouraging"],
        languages=["English"],
    )


@pytest.fixture(scope="session")
def sample_profiles():
    return load_profiles(SAMPLE_PROFILES)


def perfect_pair(mentor_id: str = "mentor-perfect", mentee_id: str = "mentee-perfect"):
    """A pair that scores 1.0 on every dimension"""
    shared = dict(
        skills=["React"],
        interests=["Web Development"],
        goals=["Career Transition"],
        availability={"days": ["Monday"], "hours": ["18:00"]},
        timezone="UTC",
        communication_style="casual",
        personality_traits=["Patient"],
        languages=["English"],
    )
    mentor = build_profile(id=mentor_id, role="mentor", experience_level="senior", hourly_rate=50, **shared)
    mentee = build_profile(
        id=mentee_id,
        role="mentee",
        experience_level="entry",
        budget_range={"min": 40, "max": 60, "currency": "USD"},
        **shared,
    )
    return mentor, mentee
