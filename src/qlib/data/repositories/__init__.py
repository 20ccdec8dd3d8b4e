"""Repository exports."""

from .quests_repo import QuestsRepository

__all__ = [
    "QuestsRepository",
]
