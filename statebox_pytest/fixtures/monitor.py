"""Monitor behavior of store for testing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

    from pytest_mock import MockerFixture

    from statebox.basic_types import Dispatch, MiddlewareAPI


class StoreMonitor:
    """Monitor the actions reaching a store for testing.

    Pass `monitor.middleware` to `apply_middleware`, every action going through
    it is recorded by the `dispatched_actions` spy.
    """

    def __init__(self: StoreMonitor, mocker: MockerFixture) -> None:
        """Initialize the store monitor."""
        self.api: MiddlewareAPI | None = None
        self.dispatched_actions = mocker.spy(self, '_action_middleware')

    def _action_middleware(self: StoreMonitor, action: Any) -> Any:  # noqa: ANN401
        return action

    def middleware(
        self: StoreMonitor,
        api: MiddlewareAPI,
    ) -> Callable[[Dispatch], Dispatch]:
        """Record actions before passing them to the next dispatch."""
        self.api = api

        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:  # noqa: ANN401
                return next_dispatch(self.dispatched_actions(action))

            return dispatch

        return wrap

    @property
    def actions(self: StoreMonitor) -> list[Any]:
        """Return the recorded actions in dispatch order."""
        return [call.args[0] for call in self.dispatched_actions.call_args_list]


@pytest.fixture
def store_monitor(mocker: MockerFixture) -> StoreMonitor:
    """Fixture to check which actions were dispatched."""
    return StoreMonitor(mocker)
