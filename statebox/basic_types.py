# ruff: noqa: D100, D101, D102, D103, D107
from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import field
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Protocol,
    TypeAlias,
)

from immutable import Immutable
from typing_extensions import TypeVar

if TYPE_CHECKING:
    from statebox.main import StoreObservable


def _random_string() -> str:
    return '.'.join(uuid.uuid4().hex[:6])


class ActionTypes:
    """Action types reserved by the store.

    Reducers must not handle these directly. For an unknown action (INIT and
    REPLACE included) a reducer returns its current state, and a default state
    when the current state is `None`.
    """

    INIT = f'@@statebox/INIT{_random_string()}'
    REPLACE = f'@@statebox/REPLACE{_random_string()}'

    @staticmethod
    def probe_unknown_action() -> str:
        return f'@@statebox/PROBE_UNKNOWN_ACTION{_random_string()}'


class BaseAction(Immutable):
    type: Any


class InitAction(BaseAction):
    type: str = ActionTypes.INIT


class ReplaceAction(BaseAction):
    type: str = ActionTypes.REPLACE


class ProbeUnknownAction(BaseAction):
    type: str = field(default_factory=ActionTypes.probe_unknown_action)


# Type variables
State = TypeVar('State', infer_variance=True)
Action = TypeVar('Action', bound=BaseAction | dict, infer_variance=True)

ReducerType: TypeAlias = Callable[[State | None, Action], State]
Listener: TypeAlias = Callable[[], Any]
Unsubscribe: TypeAlias = Callable[[], None]


class Dispatch(Protocol, Generic[Action]):
    def __call__(self: Dispatch, action: Action) -> Any: ...  # noqa: ANN401


class Observer(Protocol, Generic[State]):
    def next(self: Observer, state: State) -> Any: ...  # noqa: ANN401


class Subscription(Immutable):
    unsubscribe: Unsubscribe

    def __call__(self: Subscription) -> None:
        self.unsubscribe()


class Store(Immutable, Generic[State, Action]):
    """Capabilities of a store, handed to the application and to enhancers."""

    dispatch: Dispatch[Action]
    subscribe: Callable[[Listener], Unsubscribe]
    get_state: Callable[[], State]
    replace_reducer: Callable[[ReducerType[State, Action]], None]
    observable: Callable[[], StoreObservable[State]]


class MiddlewareAPI(Immutable, Generic[State, Action]):
    get_state: Callable[[], State]
    dispatch: Dispatch[Action]


class Middleware(Protocol, Generic[State, Action]):
    def __call__(
        self: Middleware,
        api: MiddlewareAPI[State, Action],
    ) -> Callable[[Dispatch[Action]], Dispatch[Action]]: ...


class StoreCreator(Protocol, Generic[State, Action]):
    def __call__(
        self: StoreCreator,
        reducer: ReducerType[State, Action],
        preloaded_state: State | StoreEnhancer | None = None,
        enhancer: StoreEnhancer | None = None,
    ) -> Store[State, Action]: ...


class StoreEnhancer(Protocol):
    def __call__(self: StoreEnhancer, create_store: StoreCreator) -> StoreCreator: ...


# Errors


class StoreError(Exception):
    """Base class of every error raised by the store and its helpers."""


class InvalidArgumentError(StoreError, TypeError):
    def __init__(self: InvalidArgumentError, name: str, value: object) -> None:
        super().__init__(
            f'Expected the {name} to be a function, got `{type(value).__name__}`.',
        )


class InvalidObserverError(InvalidArgumentError):
    def __init__(self: InvalidObserverError) -> None:
        StoreError.__init__(self, 'Expected the observer to be an object.')


class InvalidActionError(StoreError, TypeError):
    def __init__(self: InvalidActionError, action: object) -> None:
        super().__init__(
            f"""Actions must be plain records, got `{type(action).__name__}`. \
Use custom middleware for other kinds of actions.""",
        )


class MissingActionTypeError(InvalidActionError):
    def __init__(self: MissingActionTypeError, action: object) -> None:
        StoreError.__init__(
            self,
            f"""Actions may not have an undefined "type" property, action "{action}" \
has none. Have you misspelled a constant?""",
        )


class IllegalReentrancyError(StoreError, RuntimeError):
    def __init__(self: IllegalReentrancyError, operation: str) -> None:
        super().__init__(
            f"""You may not call `{operation}` while the reducer is executing. \
The reducer has already received the state as an argument, pass it down from \
the top reducer instead of reading it from the store.""",
        )


class ReducerShapeError(StoreError, ValueError):
    def __init__(self: ReducerShapeError, key: str, *, probe: bool) -> None:
        if probe:
            message = f"""Reducer "{key}" returned None when probed with a random \
type. Don't try to handle {ActionTypes.INIT} or other actions in the "@@statebox/*" \
namespace, they are private. For any unknown action return the current state, \
or a default state if the current state is None."""
        else:
            message = f"""Reducer "{key}" returned None during initialization. \
If the state passed to the reducer is None, you must explicitly return the \
initial state."""
        super().__init__(message)
        self.key = key


class UndefinedSubstateError(StoreError, ValueError):
    def __init__(self: UndefinedSubstateError, key: str, action_type: object) -> None:
        description = (
            f'action "{action_type}"' if action_type is not None else 'an action'
        )
        super().__init__(
            f"""Given {description}, reducer "{key}" returned None. To ignore an \
action, you must explicitly return the previous state.""",
        )
        self.key = key


class PrematureDispatchError(StoreError, RuntimeError):
    def __init__(self: PrematureDispatchError) -> None:
        super().__init__(
            """Dispatching while constructing your middleware is not allowed. Other \
middleware would not be applied to this dispatch.""",
        )


class StateShapeWarning(UserWarning):
    """Non-fatal diagnostic about the shape of the state or of the reducers."""
