"""Serializes result trees into test-suite/test-case markup of the newer schema."""
from __future__ import annotations

import logging
from typing import Any, Tuple, Union

from resultbridge.core.errors import ContractViolationError, TreeShapeError
from resultbridge.core.models import CATEGORIES_KEY, ResultNode
from resultbridge.core.results import ResultOutcome
from resultbridge.core.states import FAILURE_STATES, REASON_STATES, result_state_attributes

from .writer import ElementWriter, MarkupWriter, format_duration

logger = logging.getLogger(__name__)

_Parent = Union[MarkupWriter, ElementWriter]


def serialize_definition(node: ResultNode, recursive: bool) -> str:
    """Return markup describing ``node`` without any result data."""
    if logger.isEnabledFor(logging.DEBUG):
        suites, cases = _count_kinds(node)
        logger.debug(
            "Serializing definition of %s (recursive=%s, %d suite(s), %d case(s))",
            node.full_name,
            recursive,
            suites,
            cases,
        )
    writer = MarkupWriter()
    _write_test_element(writer, node, recursive)
    return writer.getvalue()


def serialize_result(outcome: ResultOutcome, recursive: bool = True) -> str:
    """Return markup describing ``outcome`` and every child result.

    The ``recursive`` flag is accepted for symmetry with
    :func:`serialize_definition` but result trees are always emitted in full.
    """
    if not recursive:
        logger.debug("recursive=False ignored for result of %s", outcome.node.full_name)
    if logger.isEnabledFor(logging.DEBUG):
        suites, cases = _count_kinds(outcome.node)
        logger.debug("Serializing result of %s (%d suite(s), %d case(s))", outcome.node.full_name, suites, cases)
    writer = MarkupWriter()
    _write_result_element(writer, outcome, True)
    return writer.getvalue()


def _count_kinds(node: ResultNode) -> Tuple[int, int]:
    """Return the number of suites and cases in the tree rooted at ``node``."""
    if not node.is_suite:
        return 0, 1
    suites, cases = 1, 0
    for child in node.children:
        child_suites, child_cases = _count_kinds(child)
        suites += child_suites
        cases += child_cases
    return suites, cases


def _element_name(node: ResultNode) -> str:
    return "test-suite" if node.is_suite else "test-case"


# Definition elements


def _write_test_element(parent: _Parent, node: ResultNode, recursive: bool) -> None:
    with parent.element(_element_name(node)) as element:
        _write_test_attributes(element, node)
        _write_properties_element(element, node)
        if recursive and node.is_suite:
            for child in node.children:
                _write_test_element(element, child, recursive)


def _write_test_attributes(element: ElementWriter, node: ResultNode) -> None:
    if node.is_suite:
        element.attribute("type", node.test_type or "")
    element.attribute("id", node.id)
    element.attribute("name", node.name)
    element.attribute("fullname", node.full_name)
    element.attribute("runstate", node.run_state.name)
    if node.is_suite:
        element.attribute("testcasecount", node.test_count)


def _write_properties_element(element: ElementWriter, node: ResultNode) -> None:
    if not node.properties:
        return
    with element.element("properties") as properties:
        for key, value in node.properties.items():
            if key == CATEGORIES_KEY:
                if not isinstance(value, (list, tuple)):
                    raise ContractViolationError(
                        f"{node.full_name}: {CATEGORIES_KEY} must be a list, got {type(value).__name__}"
                    )
                for category in value:
                    _write_property_element(properties, key, category)
            else:
                _write_property_element(properties, key, value)


def _write_property_element(properties: ElementWriter, key: str, value: Any) -> None:
    with properties.element("property") as prop:
        prop.attribute("name", key).attribute("value", value)


# Result elements


def _write_result_element(parent: _Parent, outcome: ResultOutcome, recursive: bool) -> None:
    node = outcome.node
    _check_shape(outcome)
    with parent.element(_element_name(node)) as element:
        _write_result_attributes(element, outcome)
        _write_properties_element(element, node)
        if outcome.state in FAILURE_STATES:
            _write_failure_element(element, outcome)
        elif outcome.state in REASON_STATES:
            _write_reason_element(element, outcome)
        if recursive and outcome.has_results:
            for child in outcome.children:
                _write_result_element(element, child, recursive)


def _write_result_attributes(element: ElementWriter, outcome: ResultOutcome) -> None:
    node = outcome.node
    _write_test_attributes(element, node)
    for name, value in result_state_attributes(outcome.state, outcome.failure_site):
        element.attribute(name, value)
    element.attribute("duration", format_duration(outcome.elapsed_seconds))
    if node.is_suite:
        # TODO: aggregate passed/failed/inconclusive/skipped from child results
        element.attribute("total", node.test_count)
        element.attribute("passed", "0")
        element.attribute("failed", "0")
        element.attribute("inconclusive", "0")
        element.attribute("skipped", "0")
    element.attribute("asserts", outcome.assert_count)


def _write_failure_element(element: ElementWriter, outcome: ResultOutcome) -> None:
    with element.element("failure") as failure:
        if outcome.message is not None:
            failure.cdata_element("message", outcome.message)
        if outcome.stack_trace is not None:
            failure.cdata_element("stack-trace", outcome.stack_trace)


def _write_reason_element(element: ElementWriter, outcome: ResultOutcome) -> None:
    if outcome.message is None:
        raise ContractViolationError(
            f"{outcome.node.full_name}: {outcome.state.name} result has no reason message"
        )
    with element.element("reason") as reason:
        reason.cdata_element("message", outcome.message)


def _check_shape(outcome: ResultOutcome) -> None:
    if not outcome.has_results:
        return
    node = outcome.node
    if not node.is_suite:
        raise TreeShapeError(f"{node.full_name}: test case carries {len(outcome.children)} child result(s)")
    if len(outcome.children) != len(node.children):
        raise TreeShapeError(
            f"{node.full_name}: {len(outcome.children)} child result(s) for {len(node.children)} child test(s)"
        )
