"""Static skill embedding table.

Hand-authored, not learned. Each skill gets a 1.0 in its category's
dimension and its relative position within the category ten dimensions
further on, so skills sharing a category are always closer than skills
in different categories.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Optional

import numpy as np

EMBEDDING_DIM = 50

SKILL_CATEGORIES: Dict[str, tuple] = {
    "frontend": ("react", "vue", "angular", "javascript", "typescript", "html", "css", "tailwind"),
    "backend": ("node.js", "python", "java", "go", "rust", "php", "ruby", "c#"),
    "database": ("postgresql", "mongodb", "mysql", "redis", "elasticsearch", "cassandra"),
    "cloud": ("aws", "azure", "gcp", "docker", "kubernetes", "terraform"),
    "mobile": ("react-native", "flutter", "ios", "android", "swift", "kotlin"),
    "data": ("machine-learning", "data-science", "python", "r", "sql", "tableau", "powerbi"),
    "design": ("ui/ux", "figma", "sketch", "adobe-creative", "prototyping", "user-research"),
    "management": ("project-management", "agile", "scrum", "leadership", "team-building"),
    "business": ("strategy", "marketing", "sales", "finance", "operations", "consulting"),
}


def build_skill_embeddings(categories: Mapping[str, tuple] = SKILL_CATEGORIES) -> Mapping[str, np.ndarray]:
    """
    Build the read-only skill -> vector table.

    A skill listed under several categories keeps its last listing
    ("python" resolves to data, not backend).
    """
    table = {}
    for category_index, skills in enumerate(categories.values()):
        for skill_index, skill in enumerate(skills):
            vector = np.zeros(EMBEDDING_DIM)
            vector[category_index] = 1.0
            vector[category_index + 10] = skill_index / len(skills)
            vector.setflags(write=False)
            table[skill.lower()] = vector
    return MappingProxyType(table)


SKILL_EMBEDDINGS = build_skill_embeddings()


def skill_vector(skill: str, embeddings: Mapping[str, np.ndarray] = SKILL_EMBEDDINGS) -> Optional[np.ndarray]:
    return embeddings.get(skill.lower())
