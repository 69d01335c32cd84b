"""
Skip-render middleware
"""

from typing import Any, Callable, Dict

from content_registrar.core.component_base import RenderFunctionServices, RenderResult

SKIP_RENDER_PROP = "skip_render"


def skip_render_middleware(
    component_props: Dict[str, Any],
    middleware_props: Dict[str, Any],
    services: RenderFunctionServices,
    next: Callable[..., RenderResult],
) -> RenderResult:
    """Render nothing when the descriptor sets ``skip_render``."""
    if middleware_props.get(SKIP_RENDER_PROP):
        return None
    return next()
