"""Rule-based mentor/mentee matching"""
from .matching import MatchingEngine, MatchScore, UserPreferences

__all__ = ["MatchingEngine", "MatchScore", "UserPreferences"]
