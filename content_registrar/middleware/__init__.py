"""
Render middleware bundled with the registrar
"""

from .error_boundary import ErrorBoundaryMiddleware
from .logging import LoggingMiddleware
from .skip_render import skip_render_middleware

__all__ = ["ErrorBoundaryMiddleware", "LoggingMiddleware", "skip_render_middleware"]
