"""Quest definition data structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Tuple

from qlib.domain.errors import DecodeError
from qlib.domain.quest import Quest


class RequestType(Enum):
    """Kinds of completion requirement.

    The wire format stores the ordinal of the member, so members must only
    ever be appended.
    """

    KILL = 0
    GATHER = 1
    DELIVER = 2
    TALK = 3
    VISIT = 4

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: object) -> "RequestType":
        """Resolve a wire code, raising DecodeError for anything out of range."""
        if isinstance(code, bool) or not isinstance(code, int):
            raise DecodeError(f"Request type code must be an integer (found {code!r}).")
        try:
            return cls(code)
        except ValueError as exc:
            raise DecodeError(f"Unknown request type code {code}.") from exc


@dataclass(frozen=True, slots=True)
class QuestRequest:
    subject_id: int
    request_type: RequestType
    count: int


@dataclass(frozen=True, slots=True)
class QuestDef:
    """Shared prototype for a quest; live quests are made with create_quest()."""

    id: int
    description: str | None
    ongoing: str | None
    onfinished: str | None
    quest_givers: Tuple[int, ...]
    quest_requests: FrozenSet[QuestRequest]
    prerequisites: Tuple[int, ...]
    pre_dialogue_lines: Tuple[str, ...]
    # Ids of quests that list this one as a prerequisite.
    touch: List[int] = field(default_factory=list, compare=False, repr=False)

    def add_touch(self, quest_id: int) -> None:
        self.touch.append(quest_id)

    def create_quest(self) -> Quest:
        return Quest(definition=self)


def quest_key(definition: QuestDef) -> int:
    """Return the catalog key for a definition.

    Catalogs treat two definitions with the same id as the same slot, even
    when their content differs.
    """
    return definition.id
