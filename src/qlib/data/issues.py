"""Issue records and per-load reports."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

Severity = str


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


@dataclass(slots=True)
class LoadReport:
    """Outcome of one or more loader calls."""

    source: str
    loaded_ids: List[int] = field(default_factory=list)
    skipped: int = 0
    issues: List[Issue] = field(default_factory=list)

    @property
    def errors(self) -> List[Issue]:
        return [issue for issue in self.issues if issue.severity == "ERROR"]

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == "ERROR" for issue in self.issues)

    def add(self, severity: Severity, code: str, message: str, **context: object) -> Issue:
        issue = Issue(
            severity=severity,
            code=code,
            message=message,
            context={key: str(value) for key, value in context.items()},
        )
        self.issues.append(issue)
        return issue

    def merge(self, other: "LoadReport") -> None:
        self.loaded_ids.extend(other.loaded_ids)
        self.skipped += other.skipped
        self.issues.extend(other.issues)
