"""Exception types raised while translating result trees."""
from __future__ import annotations


class ResultBridgeError(Exception):
    """Base class for every error raised by resultbridge."""


class ContractViolationError(ResultBridgeError, ValueError):
    """Input data breaks an assumption the upstream engine is expected to uphold."""


class TreeShapeError(ContractViolationError):
    """A result tree does not mirror the definition tree it describes."""


class WriterStateError(ResultBridgeError, RuntimeError):
    """Markup was written out of order (e.g. an attribute after content)."""
