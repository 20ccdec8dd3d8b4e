"""Data layer utilities for loading quest definitions."""

from .errors import DataError, DataLoadError, DataValidationError, MissingRequirementsError
from .issues import Issue, LoadReport, format_issue
from .loaders import JsonQuestLoader, QuestLoader
from .paths import get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "Issue",
    "JsonQuestLoader",
    "LoadReport",
    "MissingRequirementsError",
    "QuestLoader",
    "format_issue",
    "get_definitions_path",
    "get_repo_root",
]
