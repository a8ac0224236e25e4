"""In-memory interaction history for collaborative filtering"""
import threading
from typing import Any, Dict, Iterable, List, Mapping, Set, Union

from .models import Interaction

InteractionLike = Union[Interaction, Mapping[str, Any]]


class InteractionStore:
    """
    Process-lifetime map of user id -> interaction list.

    Updates replace a user's whole list under a lock; readers get copies.
    Nothing is persisted.
    """

    def __init__(self):
        self._history: Dict[str, List[Interaction]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _coerce(interaction: InteractionLike) -> Interaction:
        if isinstance(interaction, Interaction):
            return interaction
        return Interaction.model_validate(interaction)

    def replace(self, user_id: str, interactions: Iterable[InteractionLike]):
        records = [self._coerce(i) for i in interactions]
        with self._lock:
            self._history[user_id] = records

    def append(self, user_id: str, interaction: InteractionLike):
        record = self._coerce(interaction)
        with self._lock:
            self._history[user_id] = self._history.get(user_id, []) + [record]

    def get(self, user_id: str) -> List[Interaction]:
        with self._lock:
            return list(self._history.get(user_id, []))

    def target_ids(self, user_id: str) -> Set[str]:
        return {i.target_id for i in self.get(user_id)}

    def clear(self):
        with self._lock:
            self._history.clear()

    def __contains__(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._history

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)
