# ruff: noqa: D100, D103, ANN001
from __future__ import annotations

from typing import Any

import pytest
from immutable import Immutable

from statebox import BaseAction, InitAction, combine_reducers


class State(Immutable):
    value: int


class IncrementAction(BaseAction):
    type: str = 'INCREMENT'


class NoopAction(BaseAction):
    type: str = 'NOOP'


def counter_reducer(state: State | None, action: Any) -> State:  # noqa: ANN401
    if state is None:
        return State(value=0)
    if isinstance(action, IncrementAction):
        return State(value=state.value + 1)
    return state


def create_reducers(count: int) -> dict:
    return {f'r{i}': counter_reducer for i in range(count)}


@pytest.mark.benchmark(group='combine_reducers_creation')
def test_creation(benchmark) -> None:
    reducers = create_reducers(10)

    def run() -> None:
        combine_reducers(**reducers)

    benchmark(run)


@pytest.mark.parametrize('count', [10, 50, 100])
@pytest.mark.benchmark(group='combine_reducers_dispatch')
def test_dispatch(benchmark, count: int) -> None:
    reducer = combine_reducers(**create_reducers(count))
    state = reducer(None, InitAction())
    action = IncrementAction()

    def run() -> None:
        reducer(state, action)

    benchmark(run)


@pytest.mark.benchmark(group='combine_reducers_dispatch')
def test_unchanged_dispatch(benchmark) -> None:
    reducer = combine_reducers(**create_reducers(100))
    state = reducer(None, InitAction())
    action = NoopAction()

    def run() -> None:
        assert reducer(state, action) is state

    benchmark(run)
