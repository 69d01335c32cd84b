"""
Error boundary middleware
Flow: next() → exception → log → empty render for that component only
"""

from typing import Any, Callable, Dict

import structlog

from content_registrar.core.component_base import RenderFunctionServices, RenderResult

logger = structlog.get_logger(__name__)


class ErrorBoundaryMiddleware:
    """
    Contains exceptions raised further down the chain.
    
    Register it first so it wraps every other middleware and the render
    function. A failing component renders as None and the rest of the content
    area still renders.
    """
    
    def __init__(self, fallback: RenderResult = None, log=None):
        self.fallback = fallback
        self.logger = log if log is not None else logger
    
    def __call__(
        self,
        component_props: Dict[str, Any],
        middleware_props: Dict[str, Any],
        services: RenderFunctionServices,
        next: Callable[..., RenderResult],
    ) -> RenderResult:
        try:
            return next()
        except Exception as e:
            self.logger.error(
                "Component render failed",
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            return self.fallback
