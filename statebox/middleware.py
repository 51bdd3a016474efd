"""Store enhancer applying middlewares to the dispatch of a store."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from statebox.basic_types import (
    InvalidArgumentError,
    MiddlewareAPI,
    PrematureDispatchError,
)
from statebox.utils import compose

if TYPE_CHECKING:
    from statebox.basic_types import (
        Middleware,
        ReducerType,
        Store,
        StoreCreator,
        StoreEnhancer,
    )

logger = logging.getLogger(__name__)


def apply_middleware(*middlewares: Middleware) -> StoreEnhancer:
    """Create a store enhancer that applies `middlewares` to the dispatch method.

    Each middleware receives a `MiddlewareAPI` with `get_state` and `dispatch`,
    and returns a function taking the next dispatch in the chain and returning a
    new dispatch. The first middleware is the outermost one, so an asynchronous
    middleware should come first in the list.
    """
    for middleware in middlewares:
        if not callable(middleware):
            raise InvalidArgumentError('middleware', middleware)

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create_enhanced_store(
            reducer: ReducerType,
            preloaded_state: Any = None,  # noqa: ANN401
            enhancer: StoreEnhancer | None = None,
        ) -> Store:
            store = create_store(reducer, preloaded_state, enhancer)

            def premature_dispatch(*_: Any, **__: Any) -> Any:  # noqa: ANN401
                raise PrematureDispatchError

            dispatch = premature_dispatch

            def dispatch_proxy(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
                return dispatch(*args, **kwargs)

            api = MiddlewareAPI(get_state=store.get_state, dispatch=dispatch_proxy)
            chain = [middleware(api) for middleware in middlewares]
            dispatch = compose(*chain)(store.dispatch)
            logger.debug('Applied %d middleware(s) to the store', len(chain))

            return dataclasses.replace(store, dispatch=dispatch)

        return create_enhanced_store

    return enhancer
