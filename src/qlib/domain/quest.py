"""Runtime quest handle created from a quest definition."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from qlib.domain.defs.quest_def import QuestDef, QuestRequest


@dataclass(slots=True)
class Quest:
    """A live quest bound to its shared definition."""

    definition: QuestDef
    progress: Dict[QuestRequest, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for request in self.definition.quest_requests:
            self.progress.setdefault(request, 0)

    @property
    def quest_id(self) -> int:
        return self.definition.id
