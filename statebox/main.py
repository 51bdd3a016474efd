"""Statebox store holding the state tree and notifying its listeners."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic

from statebox.basic_types import (
    Action,
    IllegalReentrancyError,
    InitAction,
    InvalidActionError,
    InvalidArgumentError,
    InvalidObserverError,
    MissingActionTypeError,
    ReplaceAction,
    State,
    Store,
    Subscription,
)
from statebox.utils import get_action_type, is_plain_object

if TYPE_CHECKING:
    from statebox.basic_types import (
        Listener,
        Observer,
        ReducerType,
        StoreEnhancer,
        Unsubscribe,
    )

logger = logging.getLogger(__name__)


class _ListenerEntry:
    """A single subscription, compared by identity."""

    __slots__ = ('callback',)

    def __init__(self: _ListenerEntry, callback: Listener) -> None:
        self.callback = callback


class StoreCore(Generic[State, Action]):
    """Hold the current state, the current reducer and the listeners of a store.

    The store is either idle or dispatching. Dispatching lasts exactly as long as
    the reducer runs; `get_state`, `subscribe`, unsubscribing and `dispatch` are
    only allowed while idle.

    Listeners are kept in two lists. `dispatch` promotes the next list to the
    current one and iterates over that snapshot, `subscribe` and unsubscribing
    only touch the next list, copying it first if it is still shared with the
    snapshot.
    """

    def __init__(
        self: StoreCore[State, Action],
        reducer: ReducerType[State, Action],
        preloaded_state: State | None = None,
    ) -> None:
        """Create a new store core, call `initialize` to populate the state."""
        self._reducer = reducer
        self._state = preloaded_state
        self._current_listeners: list[_ListenerEntry] = []
        self._next_listeners = self._current_listeners
        self._is_dispatching = False

    def _ensure_can_mutate_next_listeners(self: StoreCore[State, Action]) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = self._current_listeners.copy()

    @property
    def is_dispatching(self: StoreCore[State, Action]) -> bool:
        """Whether the reducer is running."""
        return self._is_dispatching

    def get_state(self: StoreCore[State, Action]) -> State:
        """Return the current state tree."""
        if self._is_dispatching:
            raise IllegalReentrancyError('get_state')

        return self._state  # pyright: ignore [reportReturnType]

    def subscribe(self: StoreCore[State, Action], listener: Listener) -> Unsubscribe:
        """Add a change listener, called with no arguments after every dispatch.

        Subscriptions are snapshotted when a dispatch starts: subscribing or
        unsubscribing while listeners are called does not affect the dispatch in
        progress, only the following ones.
        """
        if not callable(listener):
            raise InvalidArgumentError('listener', listener)

        if self._is_dispatching:
            raise IllegalReentrancyError('subscribe')

        entry = _ListenerEntry(listener)
        is_subscribed = True

        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(entry)

        def unsubscribe() -> None:
            nonlocal is_subscribed
            if not is_subscribed:
                return

            if self._is_dispatching:
                raise IllegalReentrancyError('unsubscribe')

            is_subscribed = False

            self._ensure_can_mutate_next_listeners()
            self._next_listeners.remove(entry)

        return unsubscribe

    def dispatch(self: StoreCore[State, Action], action: Action) -> Action:
        """Dispatch an action, the only way to change the state tree."""
        if not is_plain_object(action):
            raise InvalidActionError(action)

        if get_action_type(action) is None:
            raise MissingActionTypeError(action)

        if self._is_dispatching:
            raise IllegalReentrancyError('dispatch')

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        listeners = self._current_listeners = self._next_listeners
        for listener in listeners:
            listener.callback()

        return action

    def replace_reducer(
        self: StoreCore[State, Action],
        next_reducer: ReducerType[State, Action],
    ) -> None:
        """Replace the reducer and let it recompute the state tree."""
        if not callable(next_reducer):
            raise InvalidArgumentError('next reducer', next_reducer)

        logger.debug('Replacing reducer with %r', next_reducer)
        self._reducer = next_reducer
        self.dispatch(ReplaceAction())

    def observable(self: StoreCore[State, Action]) -> StoreObservable[State]:
        """Return a minimal observable of the state changes."""
        return StoreObservable(self)

    def initialize(self: StoreCore[State, Action]) -> None:
        """Let every reducer populate its initial state."""
        self.dispatch(InitAction())

    def as_store(self: StoreCore[State, Action]) -> Store[State, Action]:
        """Expose the capabilities of this core as a `Store` record."""
        return Store(
            dispatch=self.dispatch,
            subscribe=self.subscribe,
            get_state=self.get_state,
            replace_reducer=self.replace_reducer,
            observable=self.observable,
        )


class StoreObservable(Generic[State]):
    """Interoperability point for observable/reactive libraries."""

    def __init__(self: StoreObservable[State], core: StoreCore[State, Any]) -> None:
        """Wrap a store core."""
        self._core = core

    def subscribe(self: StoreObservable[State], observer: Observer[State]) -> Subscription:
        """Push the current state to `observer.next`, then push it on every change."""
        if observer is None:
            raise InvalidObserverError

        def observe_state() -> None:
            next_ = getattr(observer, 'next', None)
            if next_ is not None:
                next_(self._core.get_state())

        observe_state()
        return Subscription(unsubscribe=self._core.subscribe(observe_state))

    def observable(self: StoreObservable[State]) -> StoreObservable[State]:
        """Return this observable."""
        return self


def create_store(
    reducer: ReducerType[State, Action],
    preloaded_state: State | StoreEnhancer | None = None,
    enhancer: StoreEnhancer | None = None,
) -> Store[State, Action]:
    """Create a store holding the state tree.

    If `preloaded_state` is callable and no `enhancer` is given, it is used as the
    enhancer. An enhancer receives `create_store` and returns a function with the
    same signature, which builds the store instead.
    """
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise InvalidArgumentError('enhancer', enhancer)

        logger.debug('Delegating store creation to enhancer %r', enhancer)
        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise InvalidArgumentError('reducer', reducer)

    core = StoreCore(reducer, preloaded_state)
    core.initialize()
    logger.debug('Created store with reducer %r', reducer)

    return core.as_store()
