"""Repository for quest definitions."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Sequence

from qlib.data.errors import DataValidationError
from qlib.data.issues import LoadReport, format_issue
from qlib.data.loaders import JsonQuestLoader, QuestLoader
from qlib.data.repositories.base import RepositoryBase
from qlib.domain.defs import QuestDef

logger = logging.getLogger(__name__)

LoaderFactory = Callable[[Path], QuestLoader]


class QuestsRepository(RepositoryBase[QuestDef]):
    """Loads quest definitions from one or more files into a single catalog.

    Files are read in the given order and the first definition seen for an id
    wins. In strict mode any error reported while loading is raised as a
    DataValidationError instead of being left in ``report``.
    """

    def __init__(
        self,
        filenames: Sequence[str] = ("quests.json",),
        base_path: Path | str | None = None,
        *,
        strict: bool = False,
        loader_factory: LoaderFactory = JsonQuestLoader,
    ) -> None:
        super().__init__(base_path)
        self._filenames = tuple(filenames)
        self._strict = strict
        self._loader_factory = loader_factory
        self._report: LoadReport | None = None

    @property
    def report(self) -> LoadReport:
        self._ensure_loaded()
        assert self._report is not None
        return self._report

    def reload(self) -> None:
        super().reload()
        self._report = None

    def _build(self) -> Dict[int, QuestDef]:
        quests: Dict[int, QuestDef] = {}
        report = LoadReport(source=", ".join(self._filenames))
        for filename in self._filenames:
            loader = self._loader_factory(self._get_file_path(filename))
            report.merge(loader.load(quests))
        logger.info(
            "Quest catalog ready: %d definitions, %d skipped, %d issues",
            len(quests),
            report.skipped,
            len(report.issues),
        )
        if self._strict and report.has_errors:
            details = "\n".join(format_issue(issue) for issue in report.errors)
            raise DataValidationError(f"Quest catalog failed validation:\n{details}")
        self._report = report
        return quests
