import json

import pytest
from pydantic import ValidationError

from mentormatch.matching.models import (
    BudgetRange,
    Interaction,
    MatchBreakdown,
    MatchingWeights,
    MatchScore,
    UserPreferences,
    load_profiles,
)


class TestUserPreferences:

    def test_missing_availability_subfield_is_rejected(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(availability={"days": ["Monday"]})

    def test_missing_availability_is_rejected(self):
        with pytest.raises(ValidationError):
            UserPreferences(
                id="x", role="mentee", experience_level="entry",
                timezone="UTC", communication_style="formal",
            )

    def test_unknown_role_is_rejected(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(role="admin")

    def test_profiles_are_immutable(self, make_profile):
        profile = make_profile(skills=["React"])
        with pytest.raises(ValidationError):
            profile.skills = ["Vue"]

    def test_with_updates_returns_new_profile(self, make_profile):
        profile = make_profile(skills=["React"])
        updated = profile.with_updates(skills=["Vue"], experience_level="mid")
        assert updated.skills == ["Vue"]
        assert updated.experience_level == "mid"
        assert profile.skills == ["React"]
        assert profile.experience_level == "entry"

    def test_with_updates_validates(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile().with_updates(communication_style="supportive")

    def test_passthrough_fields_accepted(self, make_profile):
        profile = make_profile(session_frequency="weekly", remote_preference="hybrid", learning_style="visual")
        assert profile.session_frequency == "weekly"
        assert profile.company_size_preference is None

    def test_negative_rate_is_rejected(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(role="mentor", hourly_rate=-5)


class TestBudgetRange:

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            BudgetRange(min=80, max=40)

    def test_default_currency(self):
        assert BudgetRange(min=10, max=20).currency == "USD"


class TestMatchingWeights:

    def test_defaults_sum_to_one(self):
        assert MatchingWeights().total() == pytest.approx(1.0)

    def test_partial_override_is_not_renormalised(self):
        weights = MatchingWeights().merged({"skills": 0.5})
        assert weights.skills == 0.5
        assert weights.goals == 0.20
        assert weights.total() == pytest.approx(1.25)

    def test_no_override_returns_same_weights(self):
        defaults = MatchingWeights()
        assert defaults.merged(None) is defaults
        assert defaults.merged({}) is defaults

    def test_full_weights_replace(self):
        custom = MatchingWeights(skills=1.0, interests=0, goals=0, experience=0, availability=0,
                                 personality=0, communication=0, location=0, budget=0, language=0)
        assert MatchingWeights().merged(custom) is custom

    def test_unknown_weight_rejected(self):
        with pytest.raises(ValueError, match="Unknown matching weights"):
            MatchingWeights().merged({"salary": 0.1})


class TestInteraction:

    def test_accepts_camel_case_target(self):
        interaction = Interaction.model_validate({"targetId": "mentor-1", "type": "like"})
        assert interaction.target_id == "mentor-1"

    def test_keeps_extra_fields(self):
        interaction = Interaction.model_validate({"target_id": "m", "source": "feed"})
        assert interaction.model_extra == {"source": "feed"}

    def test_timestamp_defaults_to_now(self):
        assert Interaction(target_id="m").timestamp.tzinfo is not None


class TestMatchScore:

    @pytest.mark.parametrize("score,label", [
        (0.95, "Perfect Match"),
        (0.9, "Perfect Match"),
        (0.85, "Excellent Match"),
        (0.7, "Great Match"),
        (0.65, "Good Match"),
        (0.2, "Potential Match"),
    ])
    def test_label(self, score, label):
        breakdown = MatchBreakdown(**{name: 0.0 for name in MatchBreakdown.model_fields})
        match = MatchScore(mentor_id="a", mentee_id="b", overall_score=score, breakdown=breakdown, confidence=0.0)
        assert match.label == label

    def test_breakdown_bounds_enforced(self):
        values = {name: 0.0 for name in MatchBreakdown.model_fields}
        values["skills_match"] = 1.5
        with pytest.raises(ValidationError):
            MatchBreakdown(**values)


def test_load_profiles(sample_profiles):
    assert {p.role for p in sample_profiles} == {"mentor", "mentee"}
    assert len({p.id for p in sample_profiles}) == len(sample_profiles)


def test_load_profiles_rejects_bad_shape(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps([{"id": "x", "role": "mentor"}]))
    with pytest.raises(ValidationError):
        load_profiles(path)
