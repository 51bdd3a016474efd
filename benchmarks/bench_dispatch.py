# ruff: noqa: D102
"""Benchmarks for statebox store operations."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

import pytest
from immutable import Immutable

from statebox import BaseAction, Store, apply_middleware, create_store

if TYPE_CHECKING:
    from collections.abc import Callable

    from statebox import Dispatch, MiddlewareAPI


# --------------------------------------------------------------------------
# State and Actions
# --------------------------------------------------------------------------


class BenchState(Immutable):
    """Simple state for benchmarking."""

    value: int


class IncrementAction(BaseAction):
    """Increment the counter."""

    type: str = 'INCREMENT'


class IncrementByAction(BaseAction):
    """Increment by a specific amount."""

    type: str = 'INCREMENT_BY'
    amount: int


Action = IncrementAction | IncrementByAction


# --------------------------------------------------------------------------
# Reducer
# --------------------------------------------------------------------------


def reducer(state: BenchState | None, action: Action) -> BenchState:
    if state is None:
        return BenchState(value=0)

    if isinstance(action, IncrementAction):
        return replace(state, value=state.value + 1)

    if isinstance(action, IncrementByAction):
        return replace(state, value=state.value + action.amount)

    return state


def passthrough(api: MiddlewareAPI) -> Callable[[Dispatch], Dispatch]:
    _ = api

    def wrap(next_dispatch: Dispatch) -> Dispatch:
        def dispatch(action: Any) -> Any:  # noqa: ANN401
            return next_dispatch(action)

        return dispatch

    return wrap


# --------------------------------------------------------------------------
# Store Fixture
# --------------------------------------------------------------------------


@pytest.fixture
def store() -> Store[BenchState, Action]:
    """Create a store for benchmarking."""
    return create_store(reducer)


# --------------------------------------------------------------------------
# Benchmarks
# --------------------------------------------------------------------------


def test_dispatch_simple(benchmark, store: Store[BenchState, Action]) -> None:  # noqa: ANN001
    """Benchmark simple dispatch throughput."""

    def run() -> None:
        for _ in range(1000):
            store.dispatch(IncrementAction())

    benchmark(run)
    assert store.get_state().value > 0


def test_dispatch_with_payload(benchmark, store: Store[BenchState, Action]) -> None:  # noqa: ANN001
    """Benchmark dispatch with action payload."""

    def run() -> None:
        for _ in range(1000):
            store.dispatch(IncrementByAction(amount=5))

    benchmark(run)
    assert store.get_state().value > 0


def test_dispatch_with_subscribers(
    benchmark,  # noqa: ANN001
    store: Store[BenchState, Action],
) -> None:
    """Benchmark dispatch with many subscribers."""
    for _ in range(100):
        store.subscribe(lambda: None)

    def run() -> None:
        for _ in range(100):
            store.dispatch(IncrementAction())

    benchmark(run)
    assert store.get_state().value > 0


def test_dispatch_with_middlewares(benchmark) -> None:  # noqa: ANN001
    """Benchmark dispatch through a chain of middlewares."""
    store = create_store(reducer, apply_middleware(*[passthrough] * 10))

    def run() -> None:
        for _ in range(1000):
            store.dispatch(IncrementAction())

    benchmark(run)
    assert store.get_state().value > 0
