"""Quest catalog loading for game engines."""

from qlib.data.loaders import JsonQuestLoader
from qlib.data.repositories import QuestsRepository
from qlib.domain.defs import QuestDef, QuestRequest, RequestType
from qlib.domain.quest import Quest

__all__ = [
    "JsonQuestLoader",
    "Quest",
    "QuestDef",
    "QuestRequest",
    "QuestsRepository",
    "RequestType",
]
