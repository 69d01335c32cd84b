"""
Content Registrar
Flow: register components → register middleware → render content areas
"""

from content_registrar.core.component_base import (
    AdapterKind,
    ComponentFactory,
    ComponentRegistration,
    RenderFunctionServices,
    component_factory,
)
from content_registrar.core.component_registrar import ComponentRegistrar
from content_registrar.core.component_registry import ComponentRegistry
from content_registrar.core.component_renderer import ComponentRenderer
from content_registrar.core.data_loading import (
    DataDefinition,
    DataLoader,
    DataProps,
    DataState,
    DataStatus,
    StaticDataLoader,
)
from content_registrar.core.exceptions import (
    ContentRegistrarException,
    DuplicateRegistrationError,
    Errors,
    InvalidRegistrationError,
)
from content_registrar.core.middleware_chain import MiddlewareChain, build_chain, merge_props
from content_registrar.schemas.component import ComponentDescriptor, RegistryStats

__all__ = [
    "AdapterKind",
    "ComponentDescriptor",
    "ComponentFactory",
    "ComponentRegistrar",
    "ComponentRegistration",
    "ComponentRegistry",
    "ComponentRenderer",
    "ContentRegistrarException",
    "DataDefinition",
    "DataLoader",
    "DataProps",
    "DataState",
    "DataStatus",
    "DuplicateRegistrationError",
    "Errors",
    "InvalidRegistrationError",
    "MiddlewareChain",
    "RegistryStats",
    "RenderFunctionServices",
    "StaticDataLoader",
    "build_chain",
    "component_factory",
    "merge_props",
]
