"""
Component Registrar - setup facade over registry and middleware
Flow: register() / register_middleware() chained at startup → read-only during rendering
"""

from typing import Any, Dict, List, Optional

import structlog

from content_registrar.config.settings import get_settings
from content_registrar.schemas.component import RegistryStats

from .component_base import (
    ComponentRegistration,
    DataRenderFunction,
    RenderFunction,
    RenderFunctionServices,
    RenderResult,
    component_factory,
)
from .component_registry import ComponentRegistry
from .data_loading import DataDefinition
from .exceptions import Errors
from .middleware_chain import (
    ComponentRendererMiddleware,
    MiddlewareChain,
    build_chain,
    merge_props,
)


class ComponentRegistrar:
    """
    Allows registration of components and render middleware.

    Setup Process:
    1. register() / register_component() → Add components to the registry
    2. register_middleware() → Append render middleware in order
    3. hand the registrar to a ComponentRenderer → Dispatch content areas

    All registration is expected to finish before the first render. Every
    setup method returns the registrar so calls can be chained.

    Example:
        registrar = (
            ComponentRegistrar()
            .register(hero_registration)
            .register_middleware(feature_flag_middleware)
        )
    """

    def __init__(self, logger: Any = None, production: Optional[bool] = None):
        """
        Initialize registrar.

        Args:
            logger: Logger receiving missing-component warnings
            production: Suppress missing-component warnings; read from settings when None
        """
        self.logger = logger if logger is not None else structlog.get_logger(__name__)
        self.production = get_settings().IS_PRODUCTION if production is None else production
        self._registry = ComponentRegistry()
        self._middleware = MiddlewareChain()
        self._factory = component_factory()

    @property
    def registry(self) -> ComponentRegistry:
        return self._registry

    @property
    def middleware(self) -> MiddlewareChain:
        return self._middleware

    def register(self, registration: ComponentRegistration) -> "ComponentRegistrar":
        """Register a component built with the component factory."""
        self._registry.register(registration)
        return self

    def register_component(
        self,
        component_type: str,
        render: RenderFunction | DataRenderFunction,
        data_definition: Optional[DataDefinition] = None,
    ) -> "ComponentRegistrar":
        """
        Register a render function directly.

        With a data definition, ``render`` must take
        ``(props, data_props, services)``; otherwise ``(props, services)``.
        """
        if data_definition is None:
            registration = self._factory.create_registerable_component(component_type, render)
        else:
            registration = self._factory.create_registerable_component_with_data(
                component_type, data_definition, render
            )
        return self.register(registration)

    def register_middleware(
        self,
        component_middleware: ComponentRendererMiddleware,
    ) -> "ComponentRegistrar":
        """Append a render middleware; it runs after all earlier ones."""
        self._middleware.append(component_middleware)
        return self

    def is_registered(self, component_type: str) -> bool:
        return self._registry.is_registered(component_type)

    def get_data_definition(self, component_type: str) -> Optional[DataDefinition]:
        """Returns the data definition for the given component."""
        return self._registry.get_data_definition(component_type)

    def get(self, component_type: str) -> Optional[ComponentRegistration]:
        """
        Resolve a component for rendering.

        A missing component is not an error: the caller renders nothing in its
        place. Outside production the miss is logged once per call.
        """
        registration = self._registry.get(component_type)
        if registration is None and not self.production:
            self.logger.warning(Errors.missing(component_type), component_type=component_type)
        return registration

    def get_component_types(self) -> List[str]:
        return self._registry.get_component_types()

    @property
    def component_middleware(self) -> ComponentRendererMiddleware:
        """
        All registered middleware composed into one.

        The returned middleware's ``next`` is the render function; it receives
        the merged component and middleware props.
        """
        middlewares = self._middleware.snapshot()

        def composed(
            props: Dict[str, Any],
            middleware_props: Dict[str, Any],
            services: RenderFunctionServices,
            next: RenderFunction,
        ) -> RenderResult:
            chain = build_chain(
                middlewares,
                lambda cp, mp, s: next(merge_props(cp, mp), s),
            )
            return chain(props, middleware_props, services)

        return composed

    def get_registry_stats(self) -> RegistryStats:
        """Get registrar statistics."""
        component_types = self._registry.get_component_types()
        return RegistryStats(
            total_components=len(component_types),
            data_components=sum(
                1 for component_type in component_types
                if self._registry.get_data_definition(component_type) is not None
            ),
            middleware_count=len(self._middleware),
            component_types=component_types,
        )
