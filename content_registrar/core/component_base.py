"""
┌─────────────────────────────────────────────────────────────┐
│                  Component Registration Flow                │
│                                                             │
│  [render fn] → [Factory] → [Adapter] → [Registration]       │
│                              ↓                              │
│             data-aware: (props, DataProps, services)        │
│                 becomes (props + data, services)            │
│                                                             │
│  Render Flow: props → middleware chain → render(props, svc) │
└─────────────────────────────────────────────────────────────┘

Base types for component registration
Flow: Render function → Adapter selection → Registration record → Registry
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

import structlog

from .data_loading import DATA_ARGS_PROP, DATA_PROP, DataDefinition, DataProps, DataState

logger = structlog.get_logger(__name__)

# A renderable value, or None for "no output"
RenderResult = Any


@dataclass
class RenderFunctionServices:
    """Per-dispatch services handed to every middleware and render function"""
    route_builder: Any = None
    load_data_services: Any = None


RenderFunction = Callable[[Dict[str, Any], RenderFunctionServices], RenderResult]
DataRenderFunction = Callable[
    [Dict[str, Any], DataProps, RenderFunctionServices], RenderResult
]


class AdapterKind(str, Enum):
    """How a registration's render function was adapted."""
    PLAIN = "plain"
    DATA = "data"


@dataclass(frozen=True)
class ComponentRegistration:
    """
    A registered component.

    ``render`` always has the uniform ``(props, services)`` signature. For
    ``AdapterKind.DATA`` registrations the props carry the data state under
    ``"data"`` and the loader config under ``"data_definition_args"``.
    """
    type: str
    render: RenderFunction
    data_definition: Optional[DataDefinition] = None
    adapter_kind: AdapterKind = AdapterKind.PLAIN


def adapt_data_render(render: DataRenderFunction) -> RenderFunction:
    """
    Wrap a data-aware render function into the uniform signature.

    The wrapper pulls the embedded data state and config out of the props and
    passes them to ``render`` as a DataProps. A ``data`` prop that is not a
    DataState, for example a middleware prop of the same name, stays an
    ordinary prop and the state counts as not requested.
    """
    def normal_render(props: Dict[str, Any], services: RenderFunctionServices) -> RenderResult:
        rest = dict(props)
        state = rest.get(DATA_PROP)
        if isinstance(state, DataState):
            del rest[DATA_PROP]
        else:
            state = DataState.not_requested()
        data_definition_args = rest.get(DATA_ARGS_PROP)
        if isinstance(data_definition_args, Mapping):
            del rest[DATA_ARGS_PROP]
            data_definition_args = dict(data_definition_args)
        else:
            data_definition_args = {}
        return render(
            rest,
            DataProps(state=state, data_definition_args=data_definition_args),
            services,
        )

    normal_render.__wrapped__ = render  # type: ignore[attr-defined]
    return normal_render


class ComponentFactory:
    """Helpers that build registrations for a registrar."""

    def create_registerable_component(
        self,
        component_type: str,
        render: RenderFunction,
    ) -> ComponentRegistration:
        """Create a registration for a plain render function."""
        return ComponentRegistration(type=component_type, render=render)

    def create_registerable_component_with_data(
        self,
        component_type: str,
        data_definition: DataDefinition,
        render: DataRenderFunction,
    ) -> ComponentRegistration:
        """
        Create a registration whose render function receives loaded data.

        Args:
            component_type: Unique component type identifier
            data_definition: How the loader derives this component's data
            render: ``(props, data_props, services) -> RenderResult``

        Returns:
            ComponentRegistration: Registration with the adapted render function
        """
        logger.debug("Adapting data-aware render function", component_type=component_type)
        return ComponentRegistration(
            type=component_type,
            render=adapt_data_render(render),
            data_definition=data_definition,
            adapter_kind=AdapterKind.DATA,
        )


def component_factory() -> ComponentFactory:
    """Get a factory for creating registrations."""
    return ComponentFactory()
