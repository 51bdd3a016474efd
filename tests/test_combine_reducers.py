# ruff: noqa: D100, D101, D103
from __future__ import annotations

import warnings

import pytest
from immutable import Immutable

from statebox import (
    BaseAction,
    InitAction,
    ProbeUnknownAction,
    ReducerShapeError,
    ReplaceAction,
    StateShapeWarning,
    UndefinedSubstateError,
    combine_reducers,
    combine_reducers_from_mapping,
    create_store,
)


class IncrementAction(BaseAction):
    type: str = 'INC'


class NoopAction(BaseAction):
    type: str = 'NOOP'


class BreakAction(BaseAction):
    type: str = 'BREAK'


def count(state: int | None, action: BaseAction) -> int:
    if state is None:
        state = 0
    return state + 1 if action.type == 'INC' else state


def flag(state: bool | None, action: BaseAction) -> bool:
    _ = action
    if state is None:
        return False
    return state


def test_merges_sub_states() -> None:
    reducer = combine_reducers(count=count)

    assert reducer({'count': 0}, IncrementAction()) == {'count': 1}


def test_returns_same_state_when_nothing_changes() -> None:
    reducer = combine_reducers(count=count, flag=flag)
    state = {'count': 0, 'flag': False}

    assert reducer(state, NoopAction()) is state


def test_returns_new_state_when_one_key_changes() -> None:
    reducer = combine_reducers(count=count, flag=flag)
    state = {'count': 0, 'flag': False}

    next_state = reducer(state, IncrementAction())

    assert next_state is not state
    assert next_state == {'count': 1, 'flag': False}
    assert state == {'count': 0, 'flag': False}


def test_none_state_is_populated_with_defaults() -> None:
    reducer = combine_reducers(count=count, flag=flag)

    assert reducer(None, InitAction()) == {'count': 0, 'flag': False}


def test_no_op_dispatch_keeps_store_state() -> None:
    store = create_store(combine_reducers(count=count, flag=flag))
    state = store.get_state()

    store.dispatch(NoopAction())

    assert store.get_state() is state


def test_keys_that_are_not_identifiers() -> None:
    reducer = combine_reducers_from_mapping({'item-count': count})

    assert reducer(None, IncrementAction()) == {'item-count': 1}


def test_shape_error_for_reducer_returning_none_on_init() -> None:
    def broken(state: int | None, action: BaseAction) -> int | None:
        _ = action
        return state

    reducer = combine_reducers(
        a=lambda state, _: 0 if state is None else state,
        b=broken,
    )

    with pytest.raises(ReducerShapeError, match='^Reducer "b" returned None during') as first:
        reducer({}, NoopAction())

    with pytest.raises(ReducerShapeError) as second:
        reducer({'a': 0, 'b': 0}, IncrementAction())

    assert first.value is second.value
    assert first.value.key == 'b'


def test_shape_error_for_reducer_handling_private_actions() -> None:
    def init_only(state: int | None, action: BaseAction) -> int | None:
        if state is None:
            return 0 if isinstance(action, InitAction) else None
        return state

    reducer = combine_reducers(init_only=init_only)

    with pytest.raises(ReducerShapeError, match='when probed with a random type'):
        reducer(None, InitAction())


def test_shape_error_surfaces_on_store_creation() -> None:
    reducer = combine_reducers(broken=lambda state, _: state)

    with pytest.raises(ReducerShapeError):
        create_store(reducer)


def test_probe_action_types_are_random() -> None:
    assert ProbeUnknownAction().type != ProbeUnknownAction().type
    assert ProbeUnknownAction().type.startswith('@@statebox/PROBE_UNKNOWN_ACTION')


def test_undefined_substate_error() -> None:
    def fragile(state: int | None, action: BaseAction) -> int | None:
        if isinstance(action, BreakAction):
            return None
        return 0 if state is None else state

    reducer = combine_reducers(count=count, fragile=fragile)
    state = reducer(None, InitAction())

    with pytest.raises(
        UndefinedSubstateError,
        match='^Given action "BREAK", reducer "fragile" returned None',
    ) as excinfo:
        reducer(state, BreakAction())

    assert excinfo.value.key == 'fragile'


def test_non_callable_reducers_are_dropped_with_a_warning() -> None:
    with pytest.warns(StateShapeWarning, match='No reducer provided for key "broken"'):
        reducer = combine_reducers(count=count, broken=None)

    assert reducer(None, InitAction()) == {'count': 0}


def test_warns_about_unexpected_keys_once() -> None:
    reducer = combine_reducers(count=count)
    state = {'count': 0, 'extra': 1}

    with pytest.warns(
        StateShapeWarning,
        match='Unexpected keys "extra" found in previous state received by the reducer',
    ):
        reducer(state, NoopAction())

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert reducer(state, NoopAction()) is state


def test_warns_about_unexpected_keys_in_preloaded_state() -> None:
    with pytest.warns(
        StateShapeWarning,
        match='found in preloaded_state argument passed to create_store',
    ):
        store = create_store(combine_reducers(count=count), {'count': 3, 'extra': 1})

    assert store.get_state() == {'count': 3, 'extra': 1}


def test_does_not_warn_about_unexpected_keys_on_replace() -> None:
    store = create_store(combine_reducers(count=count, flag=flag))

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        store.replace_reducer(combine_reducers(count=count))

        assert store.get_state() == {'count': 0, 'flag': False}

        store.dispatch(IncrementAction())

    assert store.get_state() == {'count': 1}


def test_replace_action_records_unexpected_keys() -> None:
    reducer = combine_reducers(count=count)
    state = {'count': 0, 'extra': 1}

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        reducer(state, ReplaceAction())
        reducer(state, NoopAction())


def test_warns_about_non_record_state() -> None:
    reducer = combine_reducers(count=count)

    with pytest.warns(StateShapeWarning, match='unexpected type of "int"'):
        next_state = reducer(5, NoopAction())

    assert next_state == {'count': 0}


def test_warns_about_missing_reducers() -> None:
    reducer = combine_reducers()
    state: dict = {}

    with pytest.warns(StateShapeWarning, match='does not have a valid reducer'):
        assert reducer(state, NoopAction()) is state


@pytest.mark.usefixtures('production')
def test_no_warnings_in_production() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        reducer = combine_reducers(count=count, broken=None)
        reducer({'count': 0, 'extra': 1}, NoopAction())
        reducer(5, NoopAction())


class CounterState(Immutable):
    count: int
    flag: bool


def test_state_type() -> None:
    reducer = combine_reducers(CounterState, count=count, flag=flag)

    state = reducer(None, InitAction())

    assert state == CounterState(count=0, flag=False)
    assert reducer(state, NoopAction()) is state
    assert reducer(state, IncrementAction()) == CounterState(count=1, flag=False)


def test_state_type_with_store() -> None:
    store = create_store(combine_reducers(CounterState, count=count, flag=flag))

    store.dispatch(IncrementAction())
    store.dispatch(IncrementAction())

    assert store.get_state() == CounterState(count=2, flag=False)


def test_immutable_state_with_unexpected_fields_warns() -> None:
    class WideState(Immutable):
        count: int
        extra: str

    reducer = combine_reducers(count=count)

    with pytest.warns(StateShapeWarning, match='Unexpected keys "extra"'):
        assert reducer(WideState(count=1, extra=''), IncrementAction()) == {
            'count': 2,
        }
