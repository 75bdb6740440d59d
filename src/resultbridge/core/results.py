"""Outcome data attached to a ResultNode once it has been executed."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .models import ResultNode


class ResultState(enum.Enum):
    """Verdict vocabulary of the older result format."""

    NotRunnable = -4
    Skipped = -3
    Ignored = -2
    Inconclusive = 0
    Success = 1
    Failure = 2
    Error = 3
    Cancelled = 4


class FailureSite(enum.Enum):
    """Phase of execution that produced a failure."""

    Test = 0
    SetUp = 1
    TearDown = 2
    Parent = 3
    Child = 4


@dataclass(frozen=True)
class ResultOutcome:
    """Outcome of executing a single node, with child outcomes for suites."""

    node: ResultNode
    state: ResultState
    failure_site: FailureSite = FailureSite.Test
    elapsed_seconds: float = 0.0
    assert_count: int = 0
    message: Optional[str] = None
    stack_trace: Optional[str] = None
    children: Sequence["ResultOutcome"] = field(default_factory=tuple)

    @property
    def has_results(self) -> bool:
        return bool(self.children)
