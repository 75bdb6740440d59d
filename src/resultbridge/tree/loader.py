"""YAML/JSON loader turning result tree documents into core models."""
from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Mapping, Sequence, Tuple, Type, TypeVar, Union

import yaml
from jsonschema import Draft7Validator

from resultbridge.core.models import ResultNode, RunState
from resultbridge.core.results import FailureSite, ResultOutcome, ResultState

from .schema import TREE_SCHEMA

Tree = Union[ResultNode, ResultOutcome]

_E = TypeVar("_E", bound=enum.Enum)


def load_tree(path: str) -> Tree:
    """Load and validate a tree file (YAML, or JSON as a YAML subset)."""
    tree_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(tree_path.read_text(encoding="utf-8"))
    if not isinstance(raw, Mapping):
        raise ValueError("Tree file must contain a mapping at the top level")
    return load_tree_document(raw)


def load_tree_document(raw: Mapping[str, Any]) -> Tree:
    """Build a definition tree, or a result tree when nodes carry ``result``."""
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Tree schema validation failed: {messages}")
    with_result, total = _count_results(raw)
    if with_result == 0:
        return _build_node(raw)
    if with_result != total:
        raise ValueError(
            f"Either every node or no node may carry a 'result' mapping ({with_result} of {total} do)"
        )
    return _build_outcome(raw)


def _count_results(raw: Mapping[str, Any]) -> Tuple[int, int]:
    with_result = 1 if "result" in raw else 0
    total = 1
    for child in raw.get("children", ()):
        child_with, child_total = _count_results(child)
        with_result += child_with
        total += child_total
    return with_result, total


def _build_node(raw: Mapping[str, Any]) -> ResultNode:
    children = tuple(_build_node(child) for child in raw.get("children", ()))
    return _node_from(raw, children)


def _build_outcome(raw: Mapping[str, Any]) -> ResultOutcome:
    children = tuple(_build_outcome(child) for child in raw.get("children", ()))
    node = _node_from(raw, tuple(child.node for child in children))
    result = raw["result"]
    return ResultOutcome(
        node=node,
        state=_parse_enum(ResultState, result["state"], "result.state"),
        failure_site=_parse_enum(FailureSite, result.get("site", "Test"), "result.site"),
        elapsed_seconds=float(result.get("duration", 0.0)),
        assert_count=int(result.get("asserts", 0)),
        message=result.get("message"),
        stack_trace=result.get("stack_trace"),
        children=children,
    )


def _node_from(raw: Mapping[str, Any], children: Sequence[ResultNode]) -> ResultNode:
    is_suite = bool(raw.get("suite", "children" in raw or "type" in raw))
    if children and not is_suite:
        raise ValueError(f"Test case '{raw['fullname']}' cannot have children")
    properties = dict(raw.get("properties") or {})
    return ResultNode(
        id=int(raw["id"]),
        name=raw["name"],
        full_name=raw["fullname"],
        is_suite=is_suite,
        test_type=raw.get("type", "TestSuite") if is_suite else None,
        run_state=_parse_enum(RunState, raw.get("runstate", "Runnable"), "runstate"),
        properties=properties,
        children=children,
    )


def _parse_enum(enum_cls: Type[_E], value: str, field_name: str) -> _E:
    try:
        return enum_cls[value]
    except KeyError as exc:
        choices = ", ".join(member.name for member in enum_cls)
        raise ValueError(f"Unknown {field_name} '{value}'; expected one of: {choices}") from exc


_validator = Draft7Validator(TREE_SCHEMA)
