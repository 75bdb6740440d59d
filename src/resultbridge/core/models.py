"""Definition-side tree structures handed over by the execution engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence


CATEGORIES_KEY = "_CATEGORIES"  # the only multi-valued property


class RunState(enum.Enum):
    """Whether a test is eligible to run at all."""

    NotRunnable = 1
    Runnable = 2
    Explicit = 3
    Skipped = 4
    Ignored = 5


@dataclass(frozen=True)
class ResultNode:
    """A suite (has children) or a case (leaf) in the test definition tree."""

    id: int
    name: str
    full_name: str
    is_suite: bool = False
    test_type: Optional[str] = None
    run_state: RunState = RunState.Runnable
    properties: Mapping[str, Any] = field(default_factory=dict)
    children: Sequence["ResultNode"] = field(default_factory=tuple)

    @property
    def test_count(self) -> int:
        if not self.is_suite:
            return 1
        return sum(child.test_count for child in self.children)
