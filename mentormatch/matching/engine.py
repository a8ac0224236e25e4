"""Mentor/mentee matching engine"""
from datetime import datetime, timezone
from typing import Iterable, List, Mapping, Optional, Union

import numpy as np

from . import scorers
from .embeddings import SKILL_EMBEDDINGS
from .interactions import InteractionLike, InteractionStore
from .models import Interaction, MatchBreakdown, MatchingWeights, MatchScore, UserPreferences
from .similarity import jaccard_similarity, set_overlap
from ..utils import Config, config, logger


COLLABORATIVE_REASON = "Recommended by users with similar preferences"
INSTANT_REASON = "Quick match based on skills and interests"

WeightOverrides = Optional[Union[MatchingWeights, Mapping[str, float]]]


def _check_limit(limit: int):
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")


def _rank(matches: Iterable[MatchScore], limit: int) -> List[MatchScore]:
    # sorted() is stable: equal scores keep pool order
    return sorted(matches, key=lambda m: m.overall_score, reverse=True)[:limit]


class MatchingEngine:
    """
    Rule-based compatibility scorer.

    Scoring is pure and synchronous. The only mutable state is the
    interaction history used for collaborative boosting, which is
    thread-safe. Build one engine per application and share it.
    """

    def __init__(
        self,
        default_weights: Optional[MatchingWeights] = None,
        interactions: Optional[InteractionStore] = None,
        embeddings: Mapping[str, np.ndarray] = SKILL_EMBEDDINGS,
        collaborative_boost: float = 0.1,
        similarity_threshold: float = 0.3,
        max_similar_users: int = 10,
        instant_match_limit: int = 5,
    ):
        self.default_weights = default_weights or MatchingWeights()
        self.interactions = interactions if interactions is not None else InteractionStore()
        self.embeddings = embeddings
        self.collaborative_boost = collaborative_boost
        self.similarity_threshold = similarity_threshold
        self.max_similar_users = max_similar_users
        self.instant_match_limit = instant_match_limit

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None) -> "MatchingEngine":
        cfg = cfg or config
        return cls(
            default_weights=MatchingWeights().merged(cfg.matching_weights),
            collaborative_boost=cfg.collaborative_boost,
            similarity_threshold=cfg.similarity_threshold,
            max_similar_users=cfg.max_similar_users,
            instant_match_limit=cfg.instant_match_limit,
        )

    # --- Content-based scoring ---

    def calculate_match(
        self,
        mentor: UserPreferences,
        mentee: UserPreferences,
        weights: WeightOverrides = None,
    ) -> MatchScore:
        """
        Score one (mentor, mentee) pair.

        Args:
            mentor: Mentor-side profile
            mentee: Mentee-side profile
            weights: Partial overrides merged onto the engine defaults.
                Not re-normalised, so callers own the total.

        Returns:
            MatchScore with breakdown, confidence and reasoning
        """
        w = self.default_weights.merged(weights)

        breakdown = MatchBreakdown(
            skills_match=scorers.skills_match(mentor.skills, mentee.skills, self.embeddings),
            interests_match=jaccard_similarity(mentor.interests, mentee.interests),
            goals_alignment=jaccard_similarity(mentor.goals, mentee.goals),
            experience_compatibility=scorers.experience_match(
                mentor.experience_level,
                mentee.experience_level,
                mentee.preferred_mentor_experience,
            ),
            availability_match=scorers.availability_match(mentor.availability, mentee.availability),
            personality_fit=scorers.personality_match(mentor.personality_traits, mentee.personality_traits),
            communication_style=scorers.communication_match(mentor.communication_style, mentee.communication_style),
            location_compatibility=scorers.location_match(
                mentor.location, mentee.location, mentor.timezone, mentee.timezone
            ),
            budget_compatibility=scorers.budget_match(mentor.hourly_rate, mentee.budget_range),
            language_match=jaccard_similarity(mentor.languages, mentee.languages),
        )

        overall_score = (
            breakdown.skills_match * w.skills +
            breakdown.interests_match * w.interests +
            breakdown.goals_alignment * w.goals +
            breakdown.experience_compatibility * w.experience +
            breakdown.availability_match * w.availability +
            breakdown.personality_fit * w.personality +
            breakdown.communication_style * w.communication +
            breakdown.location_compatibility * w.location +
            breakdown.budget_compatibility * w.budget +
            breakdown.language_match * w.language
        )

        confidence = min(0.95, overall_score * scorers.data_completeness(mentor, mentee))

        logger.debug(
            f"Scored {mentor.id} -> {mentee.id}: "
            f"overall={overall_score:.3f}, confidence={confidence:.3f}"
        )

        return MatchScore(
            mentor_id=mentor.id,
            mentee_id=mentee.id,
            overall_score=overall_score,
            breakdown=breakdown,
            confidence=confidence,
            reasoning=scorers.generate_reasoning(breakdown),
        )

    def find_best_matches(
        self,
        mentee: UserPreferences,
        mentors: Iterable[UserPreferences],
        limit: int = 10,
    ) -> List[MatchScore]:
        """Rank mentors for a mentee; non-mentors in the pool are skipped"""
        _check_limit(limit)
        matches = [self.calculate_match(m, mentee) for m in mentors if m.role == "mentor"]
        ranked = _rank(matches, limit)
        logger.info(f"Ranked {len(matches)} mentors for {mentee.id}, returning {len(ranked)}")
        return ranked

    def find_best_mentees(
        self,
        mentor: UserPreferences,
        mentees: Iterable[UserPreferences],
        limit: int = 10,
    ) -> List[MatchScore]:
        """Rank mentees for a mentor; non-mentees in the pool are skipped"""
        _check_limit(limit)
        matches = [self.calculate_match(mentor, m) for m in mentees if m.role == "mentee"]
        ranked = _rank(matches, limit)
        logger.info(f"Ranked {len(matches)} mentees for {mentor.id}, returning {len(ranked)}")
        return ranked

    # --- Collaborative filtering ---

    def update_user_interactions(self, user_id: str, interactions: Iterable[InteractionLike]):
        """Replace the stored interaction list for ``user_id``"""
        self.interactions.replace(user_id, interactions)

    def record_interaction(self, user_id: str, target_id: str, interaction_type: str = "view") -> Interaction:
        """Append a single interaction stamped with the current UTC time"""
        interaction = Interaction(
            target_id=target_id,
            type=interaction_type,
            timestamp=datetime.now(timezone.utc),
        )
        self.interactions.append(user_id, interaction)
        return interaction

    def get_user_interactions(self, user_id: str) -> List[Interaction]:
        return self.interactions.get(user_id)

    def find_similar_users(self, user_id: str, candidates: Iterable[UserPreferences]) -> List[str]:
        """
        Candidates whose interaction targets overlap the user's by more than
        the similarity threshold, most similar first.
        """
        own_targets = self.interactions.target_ids(user_id)
        similarities = []
        for candidate in candidates:
            if candidate.id == user_id:
                continue
            similarity = set_overlap(own_targets, self.interactions.target_ids(candidate.id))
            if similarity > self.similarity_threshold:
                similarities.append((candidate.id, similarity))

        similarities.sort(key=lambda s: s[1], reverse=True)
        return [uid for uid, _ in similarities[:self.max_similar_users]]

    def find_enhanced_matches(
        self,
        user: UserPreferences,
        candidates: List[UserPreferences],
        limit: int = 10,
    ) -> List[MatchScore]:
        """
        Content-based ranking boosted by collaborative filtering.

        Candidates that are themselves similar users get a flat boost.
        Every returned score is clamped to 1.0.
        """
        _check_limit(limit)
        if user.role == "mentee":
            content_matches = self.find_best_matches(user, candidates, limit * 2)
        else:
            content_matches = self.find_best_mentees(user, candidates, limit * 2)

        similar_users = set(self.find_similar_users(user.id, candidates))

        enhanced = []
        for match in content_matches:
            target_id = match.mentor_id if user.role == "mentee" else match.mentee_id
            boost = self.collaborative_boost if target_id in similar_users else 0.0
            enhanced.append(match.model_copy(update={
                "overall_score": min(1.0, match.overall_score + boost),
                "reasoning": match.reasoning + [COLLABORATIVE_REASON] if boost > 0 else match.reasoning,
            }))

        if similar_users:
            logger.info(f"Collaborative boost applied from {len(similar_users)} similar users for {user.id}")
        return _rank(enhanced, limit)

    # --- Instant suggestions ---

    def get_instant_matches(
        self,
        preferences: UserPreferences,
        candidate_pool: Iterable[UserPreferences],
    ) -> List[MatchScore]:
        """
        Cheap skills/interests-only ranking for a partially filled profile.

        All other breakdown dimensions are reported as 0.
        """
        matches = []
        for candidate in candidate_pool:
            if candidate.role == preferences.role:
                continue
            skills = jaccard_similarity(candidate.skills, preferences.skills)
            interests = jaccard_similarity(candidate.interests, preferences.interests)
            quick_score = skills * 0.6 + interests * 0.4

            matches.append(MatchScore(
                mentor_id=candidate.id if candidate.role == "mentor" else preferences.id,
                mentee_id=candidate.id if candidate.role == "mentee" else preferences.id,
                overall_score=quick_score,
                breakdown=MatchBreakdown(
                    skills_match=skills,
                    interests_match=interests,
                    goals_alignment=0.0,
                    experience_compatibility=0.0,
                    availability_match=0.0,
                    personality_fit=0.0,
                    communication_style=0.0,
                    location_compatibility=0.0,
                    budget_compatibility=0.0,
                    language_match=0.0,
                ),
                confidence=quick_score * 0.7,
                reasoning=[INSTANT_REASON],
            ))

        return _rank(matches, self.instant_match_limit)
