"""Mapping from the older ResultState/FailureSite pair to newer result attributes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from .results import FailureSite, ResultState


@dataclass(frozen=True)
class MappedState:
    """The ``result`` attribute and optional ``label`` for one old state."""

    result: str
    label: Optional[str] = None


RESULT_STATE_TABLE: Mapping[ResultState, MappedState] = {
    ResultState.Inconclusive: MappedState("Inconclusive"),
    ResultState.NotRunnable: MappedState("Failed", "Invalid"),
    ResultState.Skipped: MappedState("Skipped"),
    ResultState.Ignored: MappedState("Skipped", "Ignored"),
    ResultState.Success: MappedState("Passed"),
    ResultState.Failure: MappedState("Failed"),
    ResultState.Error: MappedState("Failed", "Error"),
    ResultState.Cancelled: MappedState("Failed", "Cancelled"),
}

# States reported with a <failure> element and with a <reason> element respectively.
FAILURE_STATES = frozenset(
    {ResultState.Failure, ResultState.Error, ResultState.Cancelled, ResultState.NotRunnable}
)
REASON_STATES = frozenset({ResultState.Skipped, ResultState.Ignored})

_unmapped = set(ResultState) - set(RESULT_STATE_TABLE)
if _unmapped:  # pragma: no cover
    raise ImportError(f"ResultState members missing from mapping table: {sorted(s.name for s in _unmapped)}")


def map_result_state(state: ResultState) -> MappedState:
    return RESULT_STATE_TABLE[state]


def result_state_attributes(state: ResultState, site: FailureSite) -> List[Tuple[str, str]]:
    """Return the ``result``, ``label`` and ``site`` attributes in emission order.

    ``label`` is left out when the table has none for ``state``; ``site`` is left
    out when it is the default ``Test`` site, whatever the state.
    """
    mapped = map_result_state(state)
    attributes = [("result", mapped.result)]
    if mapped.label is not None:
        attributes.append(("label", mapped.label))
    if site is not FailureSite.Test:
        attributes.append(("site", site.name))
    return attributes
