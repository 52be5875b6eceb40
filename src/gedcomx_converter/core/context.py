from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One warning raised while converting, tagged with where it happened."""

    context: str
    message: str

    def __str__(self) -> str:
        return f"[{self.context}] {self.message}" if self.context else self.message


@dataclass
class ConversionContext:
    """
    Diagnostic channel threaded through the mappers.

    Labels form a stack (``@I1@ INDI`` > ``NAME.1`` > ``TYPE``) that prefixes
    every warning. Warnings never change control flow; they are logged and
    collected in ``diagnostics``.
    """

    logger: Any = None
    labels: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def label(self) -> str:
        return " / ".join(self.labels)

    def push(self, label: str) -> None:
        self.labels.append(label)

    def pop(self) -> Optional[str]:
        return self.labels.pop() if self.labels else None

    @contextmanager
    def scope(self, label: str) -> Iterator["ConversionContext"]:
        self.push(label)
        try:
            yield self
        finally:
            self.pop()

    def warn(self, message: str, *args: Any) -> Diagnostic:
        text = message % args if args else message
        diag = Diagnostic(context=self.label, message=text)
        self.diagnostics.append(diag)
        if self.logger is not None:
            self.logger.warning("%s", diag)
        return diag

    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]
