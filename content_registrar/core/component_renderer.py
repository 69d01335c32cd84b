"""
┌─────────────────────────────────────────────────────────────┐
│                   Content Area Render Flow                  │
│                                                             │
│  [Descriptors] → [Lookup] → [Load Data] → [Chain] → [Out]   │
│       ↓             ↓           ↓            ↓         ↓    │
│    validate      miss=None   loader once   middleware  list │
│                              per config    → render         │
│                                                             │
│  Output: one result per descriptor, in input order          │
└─────────────────────────────────────────────────────────────┘

Component Renderer - dispatches content areas through the registrar
Flow: Resolve registrations → Query loader → Run middleware chain → Collect results
"""

import asyncio
import inspect
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import structlog
from pydantic import ValidationError

from content_registrar.schemas.component import ComponentDescriptor

from .component_base import ComponentRegistration, RenderFunctionServices, RenderResult
from .component_registrar import ComponentRegistrar
from .data_loading import DATA_ARGS_PROP, DATA_PROP, DataLoader, DataState, config_key

logger = structlog.get_logger(__name__)

DescriptorInput = Union[ComponentDescriptor, Mapping[str, Any]]


@dataclass
class ResolvedComponent:
    """A descriptor paired with its registration and prepared data args."""
    descriptor: ComponentDescriptor
    registration: Optional[ComponentRegistration]
    data_args: Dict[str, Any] = field(default_factory=dict)
    data_key: Optional[Tuple[str, Hashable]] = None
    data_error: Optional[DataState] = None


class ComponentRenderer:
    """
    Renders content areas with the components of a registrar.

    Render Process:
    1. resolve() → Look every descriptor up once and validate its data args
    2. load_data() → Ask the loader for each distinct (type, config) pair
    3. render_resolved() → Thread props through the middleware chain
    4. collect() → Return results in input order

    Exceptions raised by middleware or render functions propagate out of the
    render call. Register an ErrorBoundaryMiddleware to contain them per
    component.
    """

    def __init__(self, registrar: ComponentRegistrar, loader: Optional[DataLoader] = None):
        self.registrar = registrar
        self.loader = loader
        self.logger = logger.bind(renderer="component_renderer")

    def render_content_area(
        self,
        content_area: Iterable[DescriptorInput],
        services: Optional[RenderFunctionServices] = None,
    ) -> List[RenderResult]:
        """
        Render every component of a content area.

        Args:
            content_area: Ordered component descriptors
            services: Services passed to middleware and render functions

        Returns:
            List[RenderResult]: One result per descriptor, same order
        """
        services = services or RenderFunctionServices()
        resolved = self._resolve(content_area)

        states: Dict[Tuple[str, Hashable], DataState] = {}
        for key, registration, config in self._data_requests(resolved):
            if key not in states:
                states[key] = self._load(registration, config)

        results = [self._render_resolved(item, services, states) for item in resolved]
        self.logger.debug("Content area rendered", components=len(results))
        return results

    async def arender_content_area(
        self,
        content_area: Iterable[DescriptorInput],
        services: Optional[RenderFunctionServices] = None,
    ) -> List[RenderResult]:
        """
        Render a content area with an asynchronous loader.

        Distinct data requests are awaited concurrently; the middleware chains
        then run synchronously in input order.
        """
        services = services or RenderFunctionServices()
        resolved = self._resolve(content_area)

        requests: Dict[Tuple[str, Hashable], Tuple[ComponentRegistration, Dict[str, Any]]] = {}
        for key, registration, config in self._data_requests(resolved):
            requests.setdefault(key, (registration, config))

        keys = list(requests.keys())
        loaded = await asyncio.gather(
            *(self._aload(*requests[key]) for key in keys)
        )
        states = dict(zip(keys, loaded))

        results = [self._render_resolved(item, services, states) for item in resolved]
        self.logger.debug("Content area rendered", components=len(results), data_requests=len(keys))
        return results

    def render_component(
        self,
        descriptor: DescriptorInput,
        services: Optional[RenderFunctionServices] = None,
    ) -> RenderResult:
        """Render a single component descriptor."""
        return self.render_content_area([descriptor], services)[0]

    def _resolve(self, content_area: Iterable[DescriptorInput]) -> List[ResolvedComponent]:
        resolved: List[ResolvedComponent] = []
        for item in content_area:
            descriptor = (
                item if isinstance(item, ComponentDescriptor)
                else ComponentDescriptor.model_validate(item)
            )
            registration = self.registrar.get(descriptor.type)
            component = ResolvedComponent(descriptor=descriptor, registration=registration)
            if registration is not None and registration.data_definition is not None:
                self._prepare_data_args(component)
            resolved.append(component)
        return resolved

    def _prepare_data_args(self, component: ResolvedComponent) -> None:
        """Validate a data component's args once; failures become its data state."""
        registration = component.registration
        raw = component.descriptor.props.get(DATA_ARGS_PROP)
        if raw is None:
            raw = {}

        if not isinstance(raw, Mapping):
            self.logger.warning("Invalid data definition args",
                                component_type=registration.type,
                                error=f"expected a mapping, got {type(raw).__name__}")
            component.data_error = DataState.errored(
                TypeError(f"{DATA_ARGS_PROP} must be a mapping, got {type(raw).__name__}")
            )
            return

        try:
            component.data_args = registration.data_definition.validate_config(raw)
        except ValidationError as e:
            self.logger.warning("Invalid data definition args",
                                component_type=registration.type,
                                error=str(e))
            component.data_args = dict(raw)
            component.data_error = DataState.errored(e)
            return

        component.data_key = config_key(registration.type, component.data_args)

    def _data_requests(
        self,
        resolved: List[ResolvedComponent],
    ) -> Iterator[Tuple[Tuple[str, Hashable], ComponentRegistration, Dict[str, Any]]]:
        """Yield ``(key, registration, config)`` for each loadable data component."""
        for component in resolved:
            if component.data_key is not None:
                yield component.data_key, component.registration, component.data_args

    def _load(self, registration: ComponentRegistration, config: Dict[str, Any]) -> DataState:
        if self.loader is None:
            return DataState.not_requested()

        try:
            state = self.loader.load(registration.type, registration.data_definition, config)
        except Exception as e:
            self.logger.warning("Data loader failed", component_type=registration.type, error=str(e))
            return DataState.errored(e)

        if inspect.isawaitable(state):
            if inspect.iscoroutine(state):
                state.close()
            raise TypeError(
                f"Loader returned an awaitable for {registration.type}; "
                "use arender_content_area() with asynchronous loaders"
            )
        return _as_state(state)

    async def _aload(self, registration: ComponentRegistration, config: Dict[str, Any]) -> DataState:
        if self.loader is None:
            return DataState.not_requested()

        try:
            state = self.loader.load(registration.type, registration.data_definition, config)
            if inspect.isawaitable(state):
                state = await state
        except Exception as e:
            self.logger.warning("Data loader failed", component_type=registration.type, error=str(e))
            return DataState.errored(e)
        return _as_state(state)

    def _render_resolved(
        self,
        component: ResolvedComponent,
        services: RenderFunctionServices,
        states: Dict[Tuple[str, Hashable], DataState],
    ) -> RenderResult:
        registration = component.registration
        if registration is None:
            # Degraded render keeps the rest of the page available
            return None

        props = dict(component.descriptor.props)
        if registration.data_definition is not None:
            props[DATA_ARGS_PROP] = component.data_args
            if component.data_error is not None:
                props[DATA_PROP] = component.data_error
            else:
                props[DATA_PROP] = states.get(component.data_key, DataState.not_requested())

        return self.registrar.component_middleware(
            props,
            component.descriptor.middleware_props,
            services,
            registration.render,
        )


def _as_state(value: Any) -> DataState:
    """Loaders may hand back raw data, which counts as loaded."""
    if isinstance(value, DataState):
        return value
    return DataState.loaded(value)
