"""Domain definition exports."""

from .quest_def import QuestDef, QuestRequest, RequestType, quest_key

__all__ = [
    "QuestDef",
    "QuestRequest",
    "RequestType",
    "quest_key",
]
