"""Matching package"""
from .engine import MatchingEngine
from .interactions import InteractionStore
from .models import (
    Availability,
    BudgetRange,
    Interaction,
    MatchBreakdown,
    MatchingWeights,
    MatchScore,
    UserPreferences,
    load_profiles,
)
from .similarity import cosine_similarity, jaccard_similarity

__all__ = [
    "MatchingEngine",
    "InteractionStore",
    "Availability",
    "BudgetRange",
    "Interaction",
    "MatchBreakdown",
    "MatchingWeights",
    "MatchScore",
    "UserPreferences",
    "load_profiles",
    "cosine_similarity",
    "jaccard_similarity",
]
