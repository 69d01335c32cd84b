"""
Logging middleware for render tracking
"""

import time
import uuid
from typing import Any, Callable, Dict

from content_registrar.core.component_base import RenderFunctionServices, RenderResult
from content_registrar.core.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware:
    """Middleware to log every component render."""
    
    def __init__(self, log=None):
        self.logger = log if log is not None else logger
    
    def __call__(
        self,
        component_props: Dict[str, Any],
        middleware_props: Dict[str, Any],
        services: RenderFunctionServices,
        next: Callable[..., RenderResult],
    ) -> RenderResult:
        """Log the render and forward unchanged."""
        
        render_id = str(uuid.uuid4())
        start_time = time.time()
        
        self.logger.debug(
            "Render started",
            render_id=render_id,
            props=sorted(component_props.keys()),
            middleware_props=sorted(middleware_props.keys()),
        )
        
        result = next()
        
        duration = time.time() - start_time
        
        self.logger.debug(
            "Render completed",
            render_id=render_id,
            rendered=result is not None,
            duration=f"{duration:.3f}s",
        )
        
        return result
