"""
Middleware Chain - chain of responsibility around render calls
Flow: Registered middleware (outer → inner) → Merge props → Render handler

The first registered middleware runs first. Each one either calls ``next`` to
continue inward, optionally replacing the component props, middleware props or
services seen downstream, or returns a result of its own and stops the chain.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

import structlog

from .component_base import RenderFunctionServices, RenderResult
from .exceptions import InvalidRegistrationError

logger = structlog.get_logger(__name__)

NextFunction = Callable[..., RenderResult]
ComponentRendererMiddleware = Callable[
    [Dict[str, Any], Dict[str, Any], RenderFunctionServices, NextFunction],
    RenderResult,
]
ChainTerminal = Callable[
    [Dict[str, Any], Dict[str, Any], RenderFunctionServices], RenderResult
]
ComposedChain = Callable[
    [Dict[str, Any], Dict[str, Any], RenderFunctionServices], RenderResult
]


def merge_props(
    component_props: Dict[str, Any],
    middleware_props: Dict[str, Any],
) -> Dict[str, Any]:
    """Key union of both bags, middleware props win on conflict."""
    return {**component_props, **middleware_props}


def build_chain(
    middlewares: Sequence[ComponentRendererMiddleware],
    terminal: ChainTerminal,
) -> ComposedChain:
    """
    Compose middleware into a single callable ending at ``terminal``.

    Args:
        middlewares: Middleware in registration order
        terminal: Called with the final props once every middleware forwarded

    Returns:
        Callable taking ``(component_props, middleware_props, services)``
    """
    steps: Tuple[ComponentRendererMiddleware, ...] = tuple(middlewares)

    def run(
        index: int,
        current_props: Dict[str, Any],
        current_middleware_props: Dict[str, Any],
        current_services: RenderFunctionServices,
    ) -> RenderResult:
        if index == len(steps):
            return terminal(current_props, current_middleware_props, current_services)

        def next_step(
            component_props: Optional[Dict[str, Any]] = None,
            middleware_props: Optional[Dict[str, Any]] = None,
            services: Optional[RenderFunctionServices] = None,
        ) -> RenderResult:
            # Omitted arguments keep the values this middleware received
            return run(
                index + 1,
                current_props if component_props is None else component_props,
                current_middleware_props if middleware_props is None else middleware_props,
                current_services if services is None else services,
            )

        return steps[index](current_props, current_middleware_props, current_services, next_step)

    def chain(
        component_props: Dict[str, Any],
        middleware_props: Dict[str, Any],
        services: RenderFunctionServices,
    ) -> RenderResult:
        return run(0, component_props, middleware_props, services)

    return chain


class MiddlewareChain:
    """Append-only, ordered list of render middleware."""

    def __init__(self):
        self._middlewares: List[ComponentRendererMiddleware] = []

    def append(self, middleware: ComponentRendererMiddleware) -> None:
        """Add a middleware as the innermost wrapper so far."""
        if not callable(middleware):
            raise InvalidRegistrationError(
                "Component middleware must be callable",
                field="middleware",
                value=middleware,
            )
        self._middlewares.append(middleware)
        logger.debug("Component middleware registered",
                     middleware=getattr(middleware, "__name__", type(middleware).__name__),
                     position=len(self._middlewares))

    def snapshot(self) -> Tuple[ComponentRendererMiddleware, ...]:
        """Immutable copy of the current middleware order."""
        return tuple(self._middlewares)

    def build(self, terminal: ChainTerminal) -> ComposedChain:
        """Compose the registered middleware around ``terminal``."""
        return build_chain(self.snapshot(), terminal)

    def __iter__(self) -> Iterator[ComponentRendererMiddleware]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._middlewares)
