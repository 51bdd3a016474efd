# ruff: noqa: D100, D101, D102, D103, D107
from __future__ import annotations

import pytest

from statebox import (
    BaseAction,
    InvalidArgumentError,
    InvalidObserverError,
    Store,
    StoreObservable,
    create_store,
)


class IncrementAction(BaseAction):
    type: str = 'INCREMENT'


def reducer(state: int | None, action: BaseAction) -> int:
    if state is None:
        return 0
    if isinstance(action, IncrementAction):
        return state + 1
    return state


class Observer:
    def __init__(self) -> None:
        self.states: list[int] = []

    def next(self, state: int) -> None:
        self.states.append(state)


@pytest.fixture
def store() -> Store[int, BaseAction]:
    return create_store(reducer)


def test_observer_receives_current_and_following_states(
    store: Store[int, BaseAction],
) -> None:
    store.dispatch(IncrementAction())
    observer = Observer()

    store.observable().subscribe(observer)

    assert observer.states == [1]

    store.dispatch(IncrementAction())
    store.dispatch(IncrementAction())

    assert observer.states == [1, 2, 3]


def test_unsubscribe_stops_notifications(store: Store[int, BaseAction]) -> None:
    observer = Observer()
    subscription = store.observable().subscribe(observer)
    store.dispatch(IncrementAction())

    subscription.unsubscribe()
    store.dispatch(IncrementAction())

    assert observer.states == [0, 1]


def test_subscription_is_callable(store: Store[int, BaseAction]) -> None:
    observer = Observer()
    subscription = store.observable().subscribe(observer)

    subscription()
    store.dispatch(IncrementAction())

    assert observer.states == [0]


def test_observer_without_next_is_accepted(store: Store[int, BaseAction]) -> None:
    subscription = store.observable().subscribe(object())
    store.dispatch(IncrementAction())
    subscription.unsubscribe()

    assert store.get_state() == 1


def test_rejects_missing_observer(store: Store[int, BaseAction]) -> None:
    with pytest.raises(InvalidObserverError, match='^Expected the observer'):
        store.observable().subscribe(None)  # pyright: ignore [reportArgumentType]

    with pytest.raises(InvalidArgumentError):
        store.observable().subscribe(None)  # pyright: ignore [reportArgumentType]


def test_observable_returns_itself(store: Store[int, BaseAction]) -> None:
    observable = store.observable()

    assert isinstance(observable, StoreObservable)
    assert observable.observable() is observable
