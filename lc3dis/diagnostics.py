from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class SourceSpan:
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    @classmethod
    def for_line(cls, line: int, text: str) -> SourceSpan:
        # columns are 1-based and cover the stripped text of the line
        return cls(line, 1, line, max(len(text), 1))

    def __str__(self) -> str:
        if self.start_line == self.end_line:
            return f"{self.start_line}:{self.start_col}-{self.end_col}"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    code: str
    message: str
    severity: Severity
    span: SourceSpan

    def __str__(self) -> str:
        return f"[{self.code}] {self.severity.value}: {self.message} at {self.span}"

    def format(self, label: str | None = None) -> str:
        if label is None:
            return str(self)
        return f"[{self.code}] {self.severity.value}: {self.message} at {label}:{self.span}"


class DiagnosticCollector:
    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self._diagnostics)

    def error_count(self) -> int:
        return sum(1 for d in self._diagnostics if d.severity == Severity.ERROR)

    def add(
        self,
        code: str,
        message: str,
        severity: Severity,
        span: SourceSpan,
    ) -> Diagnostic:
        diag = Diagnostic(
            code=code,
            message=message,
            severity=severity,
            span=span,
        )
        self._diagnostics.append(diag)
        return diag

    def add_error(self, code: str, message: str, span: SourceSpan) -> Diagnostic:
        return self.add(code, message, Severity.ERROR, span)
