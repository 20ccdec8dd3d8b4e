"""Quest catalog loaders."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, List, MutableMapping, Protocol

from qlib.data.errors import DataError, DataLoadError, DataValidationError, MissingRequirementsError
from qlib.data.issues import LoadReport
from qlib.data.json_loader import load_json
from qlib.domain.defs import QuestDef, QuestRequest, RequestType, quest_key
from qlib.domain.errors import DecodeError

logger = logging.getLogger(__name__)


class QuestLoader(Protocol):
    """Anything that can fill a catalog with quest definitions."""

    def load(self, quests: MutableMapping[int, QuestDef]) -> LoadReport:
        ...


class JsonQuestLoader:
    """Loads quest definitions from a JSON array file.

    Records are validated one at a time. A bad record is logged, noted in the
    returned report and skipped; it never aborts the rest of the batch. When
    two records share an id the one already in ``quests`` is kept.

    An empty or missing ``required`` list makes a record invalid: every quest
    has to be completable.
    """

    def __init__(self, file_path: Path | str) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self, quests: MutableMapping[int, QuestDef]) -> LoadReport:
        """Add every valid definition in the file to ``quests``.

        ``quests`` is never cleared, so several loaders can fill the same
        catalog. Nothing is raised for bad input; inspect ``quests`` or the
        returned report instead.
        """
        report = LoadReport(source=str(self._file_path))
        try:
            records = self._read_records()
        except DataLoadError as exc:
            logger.error("Failed to load quest definitions from %s: %s", self._file_path, exc)
            report.add("ERROR", exc.code, str(exc), source=self._file_path)
            return report

        logger.info("Loaded %d quest definitions from %s", len(records), self._file_path)

        for index, record in enumerate(records):
            record_id = record.get("id") if isinstance(record, dict) else None
            try:
                definition = self._parse_record(record, index)
            except MissingRequirementsError as exc:
                logger.warning("No requirements for quest: %s", record_id)
                self._skip(report, exc.code, str(exc), index, record_id)
                continue
            except (DataError, DecodeError) as exc:
                logger.error("Error processing quest %s: %s", record_id, exc)
                self._skip(report, exc.code, str(exc), index, record_id)
                continue
            except Exception as exc:
                logger.exception("Unexpected error processing quest %s", record_id)
                self._skip(report, DataValidationError.code, repr(exc), index, record_id)
                continue

            key = quest_key(definition)
            if key in quests:
                existing = quests[key]
                logger.error("Quest ID collision! Quest %s collides with %s", definition, existing)
                report.skipped += 1
                report.add(
                    "ERROR",
                    "ID_COLLISION",
                    "Quest id already present in catalog; keeping the existing definition.",
                    quest_id=key,
                    incoming=definition,
                    existing=existing,
                )
                continue
            quests[key] = definition
            report.loaded_ids.append(key)
        return report

    def _read_records(self) -> list[object]:
        raw = load_json(self._file_path)
        if not isinstance(raw, list):
            raise DataLoadError(f"Expected top-level array in {self._file_path}")
        return raw

    @staticmethod
    def _skip(report: LoadReport, code: str, message: str, index: int, record_id: object) -> None:
        report.skipped += 1
        if record_id is None:
            report.add("ERROR", code, message, index=index)
        else:
            report.add("ERROR", code, message, index=index, quest_id=record_id)

    def _parse_record(self, record: object, index: int) -> QuestDef:
        mapping = self._require_mapping(record, f"quest record [{index}]")
        quest_id = self._require_int(mapping.get("id"), f"quest record [{index}] id")
        ctx = f"quest '{quest_id}'"
        requests = self._parse_requirements(mapping.get("required"), ctx)
        return QuestDef(
            id=quest_id,
            description=self._optional_str(mapping.get("description"), f"{ctx} description"),
            ongoing=self._optional_str(mapping.get("ongoing"), f"{ctx} ongoing"),
            onfinished=self._optional_str(mapping.get("onfinished"), f"{ctx} onfinished"),
            quest_givers=tuple(
                self._require_int_list(mapping.get("questgivers"), f"{ctx} questgivers")
            ),
            quest_requests=requests,
            prerequisites=tuple(
                self._require_int_list(mapping.get("prerequisites"), f"{ctx} prerequisites")
            ),
            pre_dialogue_lines=tuple(
                self._require_str_list(mapping.get("pre_dialog_lines"), f"{ctx} pre_dialog_lines")
            ),
        )

    def _parse_requirements(self, value: object, ctx: str) -> FrozenSet[QuestRequest]:
        if value is None or value == []:
            raise MissingRequirementsError(f"{ctx} must define at least one requirement.")
        entries = self._require_list(value, f"{ctx} required")
        requests = set()
        for index, entry in enumerate(entries):
            entry_ctx = f"{ctx} required[{index}]"
            mapping = self._require_mapping(entry, entry_ctx)
            requests.add(
                QuestRequest(
                    subject_id=self._require_int(mapping.get("id"), f"{entry_ctx}.id"),
                    request_type=RequestType.from_code(mapping.get("type")),
                    count=self._require_int(mapping.get("count"), f"{entry_ctx}.count"),
                )
            )
        return frozenset(requests)

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_list(value: object, context: str) -> list[object]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _optional_str(value: object, context: str) -> str | None:
        if value is not None and not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @classmethod
    def _require_int_list(cls, value: object, context: str) -> List[int]:
        if value is None:
            return []
        entries = cls._require_list(value, context)
        return [cls._require_int(entry, f"{context} entries") for entry in entries]

    @classmethod
    def _require_str_list(cls, value: object, context: str) -> List[str]:
        if value is None:
            return []
        result: List[str] = []
        for entry in cls._require_list(value, context):
            if not isinstance(entry, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(entry)
        return result
