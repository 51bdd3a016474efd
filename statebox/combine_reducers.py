"""Combine several reducers into one reducer over a shared state record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from statebox.basic_types import (
    ActionTypes,
    InitAction,
    ProbeUnknownAction,
    ReducerShapeError,
    UndefinedSubstateError,
)
from statebox.utils import (
    get_action_type,
    is_plain_object,
    is_production,
    record_get,
    record_keys,
    type_name,
    warning,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from immutable import Immutable

    from statebox.basic_types import ReducerType

logger = logging.getLogger(__name__)


def _unexpected_state_shape_message(
    state: object,
    reducers: Mapping[str, ReducerType],
    action: object,
    unexpected_key_cache: set[str],
) -> str | None:
    reducer_keys = list(reducers)
    argument_name = (
        'preloaded_state argument passed to create_store'
        if get_action_type(action) == ActionTypes.INIT
        else 'previous state received by the reducer'
    )

    if len(reducer_keys) == 0:
        return (
            'Store does not have a valid reducer. Make sure the argument passed to '
            'combine_reducers contains values that are reducers.'
        )

    if not is_plain_object(state):
        expected_keys = '", "'.join(reducer_keys)
        return (
            f'The {argument_name} has unexpected type of "{type_name(state)}". '
            f'Expected argument to be a plain record with the following keys: '
            f'"{expected_keys}"'
        )

    unexpected_keys = [
        key
        for key in record_keys(state)
        if key not in reducers and key not in unexpected_key_cache
    ]
    unexpected_key_cache.update(unexpected_keys)

    if get_action_type(action) == ActionTypes.REPLACE:
        return None

    if unexpected_keys:
        found_keys = '", "'.join(unexpected_keys)
        expected_keys = '", "'.join(reducer_keys)
        return (
            f'Unexpected keys "{found_keys}" found in {argument_name}. '
            f'Expected to find one of the known reducer keys instead: '
            f'"{expected_keys}". Unexpected keys will be ignored.'
        )

    return None


def _assert_reducer_shape(reducers: Mapping[str, ReducerType]) -> None:
    for key, reducer in reducers.items():
        if reducer(None, InitAction()) is None:
            raise ReducerShapeError(key, probe=False)

        if reducer(None, ProbeUnknownAction()) is None:
            raise ReducerShapeError(key, probe=True)


def combine_reducers_from_mapping(
    reducers: Mapping[str, Any],
    state_type: type[Immutable] | None = None,
) -> ReducerType:
    """Turn a mapping of reducers into a single reducer.

    Each reducer manages the value stored under its own key. Entries that are not
    callable are dropped. Every reducer is probed once with `None` state, first
    with the init action and then with a random unknown action; if one of them
    returns `None` the combined reducer raises `ReducerShapeError` on each call.

    The combined state is a `dict`, or an instance of `state_type` when it is
    given. When no substate changes, the previous state object is returned as is.
    """
    final_reducers: dict[str, ReducerType] = {}
    for key, reducer in reducers.items():
        if callable(reducer):
            final_reducers[key] = reducer
        elif not is_production():
            warning(f'No reducer provided for key "{key}", got {type_name(reducer)}.')

    unexpected_key_cache: set[str] = set()

    shape_assertion_error: ReducerShapeError | None = None
    try:
        _assert_reducer_shape(final_reducers)
    except ReducerShapeError as exception:
        logger.debug('Reducer shape assertion failed: %s', exception)
        shape_assertion_error = exception

    def combination(state: Any, action: Any) -> Any:  # noqa: ANN401
        if shape_assertion_error is not None:
            raise shape_assertion_error

        if state is None:
            state = {}

        if not is_production():
            warning_message = _unexpected_state_shape_message(
                state,
                final_reducers,
                action,
                unexpected_key_cache,
            )
            if warning_message:
                warning(warning_message)

        has_changed = False
        next_state: dict[str, Any] = {}
        for key, reducer in final_reducers.items():
            previous_state_for_key = record_get(state, key)
            next_state_for_key = reducer(previous_state_for_key, action)
            if next_state_for_key is None:
                raise UndefinedSubstateError(key, get_action_type(action))
            next_state[key] = next_state_for_key
            has_changed = has_changed or next_state_for_key is not previous_state_for_key

        if not has_changed:
            return state
        if state_type is None:
            return next_state
        return state_type(**next_state)

    return combination


def combine_reducers(
    state_type: type[Immutable] | None = None,
    /,
    **reducers: Callable | None,
) -> ReducerType:
    """Combine reducers passed as keyword arguments, see `combine_reducers_from_mapping`."""
    return combine_reducers_from_mapping(reducers, state_type)
