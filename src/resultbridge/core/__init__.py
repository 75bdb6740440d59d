"""Core models and helpers exposed at the package level."""
from .errors import ContractViolationError, ResultBridgeError, TreeShapeError, WriterStateError
from .models import CATEGORIES_KEY, ResultNode, RunState
from .results import FailureSite, ResultOutcome, ResultState
from .states import MappedState, map_result_state, result_state_attributes

__all__ = [
    "CATEGORIES_KEY",
    "ContractViolationError",
    "FailureSite",
    "MappedState",
    "ResultBridgeError",
    "ResultNode",
    "ResultOutcome",
    "ResultState",
    "RunState",
    "TreeShapeError",
    "WriterStateError",
    "map_result_state",
    "result_state_attributes",
]
