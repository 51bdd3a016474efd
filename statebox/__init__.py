"""Statebox: a single-writer state container with reducers and middlewares."""

from .basic_types import (
    ActionTypes,
    BaseAction,
    Dispatch,
    IllegalReentrancyError,
    InitAction,
    InvalidActionError,
    InvalidArgumentError,
    InvalidObserverError,
    Listener,
    Middleware,
    MiddlewareAPI,
    MissingActionTypeError,
    Observer,
    PrematureDispatchError,
    ProbeUnknownAction,
    ReducerShapeError,
    ReducerType,
    ReplaceAction,
    StateShapeWarning,
    Store,
    StoreCreator,
    StoreEnhancer,
    StoreError,
    Subscription,
    UndefinedSubstateError,
    Unsubscribe,
)
from .combine_reducers import combine_reducers, combine_reducers_from_mapping
from .main import StoreCore, StoreObservable, create_store
from .middleware import apply_middleware
from .utils import compose, is_plain_object, is_production

__all__ = (
    'ActionTypes',
    'BaseAction',
    'Dispatch',
    'IllegalReentrancyError',
    'InitAction',
    'InvalidActionError',
    'InvalidArgumentError',
    'InvalidObserverError',
    'Listener',
    'Middleware',
    'MiddlewareAPI',
    'MissingActionTypeError',
    'Observer',
    'PrematureDispatchError',
    'ProbeUnknownAction',
    'ReducerShapeError',
    'ReducerType',
    'ReplaceAction',
    'StateShapeWarning',
    'Store',
    'StoreCore',
    'StoreCreator',
    'StoreEnhancer',
    'StoreError',
    'StoreObservable',
    'Subscription',
    'UndefinedSubstateError',
    'Unsubscribe',
    'apply_middleware',
    'combine_reducers',
    'combine_reducers_from_mapping',
    'compose',
    'create_store',
    'is_plain_object',
    'is_production',
)
