from __future__ import annotations

import pytest

from resultbridge.core import CATEGORIES_KEY, ResultNode, ResultOutcome, ResultState, RunState


@pytest.fixture
def passing_case() -> ResultNode:
    return ResultNode(id=1002, name="Passes", full_name="Demo.Fixture.Passes")


@pytest.fixture
def failing_case() -> ResultNode:
    return ResultNode(
        id=1003,
        name="Fails",
        full_name="Demo.Fixture.Fails",
        properties={"Description": "always fails"},
    )


@pytest.fixture
def fixture_suite(passing_case: ResultNode, failing_case: ResultNode) -> ResultNode:
    return ResultNode(
        id=1001,
        name="Fixture",
        full_name="Demo.Fixture",
        is_suite=True,
        test_type="TestFixture",
        properties={
            "Description": "sample fixture",
            CATEGORIES_KEY: ["A", "B"],
            "Priority": 2,
        },
        children=(passing_case, failing_case),
    )


@pytest.fixture
def assembly_suite(fixture_suite: ResultNode) -> ResultNode:
    ignored = ResultNode(
        id=1005,
        name="Later",
        full_name="Demo.Other.Later",
        run_state=RunState.Ignored,
    )
    other = ResultNode(
        id=1004,
        name="Other",
        full_name="Demo.Other",
        is_suite=True,
        test_type="TestFixture",
        children=(ignored,),
    )
    return ResultNode(
        id=1000,
        name="Demo.dll",
        full_name="/build/Demo.dll",
        is_suite=True,
        test_type="Assembly",
        children=(fixture_suite, other),
    )


@pytest.fixture
def fixture_outcome(fixture_suite: ResultNode) -> ResultOutcome:
    passing, failing = fixture_suite.children
    return ResultOutcome(
        node=fixture_suite,
        state=ResultState.Failure,
        elapsed_seconds=0.25,
        assert_count=3,
        children=(
            ResultOutcome(node=passing, state=ResultState.Success, elapsed_seconds=0.01, assert_count=1),
            ResultOutcome(
                node=failing,
                state=ResultState.Failure,
                elapsed_seconds=0.2,
                assert_count=2,
                message="boom",
                stack_trace="at Demo.Fixture.Fails()",
            ),
        ),
    )
