"""
Component Registry - type key to registration mapping
Flow: Registration → Validation → Storage → Lookup
"""

from typing import Dict, List, Optional

import structlog

from .component_base import ComponentRegistration
from .data_loading import DataDefinition
from .exceptions import DuplicateRegistrationError, InvalidRegistrationError

logger = structlog.get_logger(__name__)


class ComponentRegistry:
    """
    Registry of component registrations keyed by type.

    Registry Lifecycle:
    1. register() → Validate and insert during setup
    2. get() → Read-only lookups during dispatch

    Responsibilities:
    - Reject duplicate and malformed registrations
    - Provide lookups by component type
    - Expose data definitions for data-aware components
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._components: Dict[str, ComponentRegistration] = {}
        self.logger = logger.bind(registry_id="component_registry")

    def register(self, registration: ComponentRegistration) -> None:
        """
        Register a component.

        Args:
            registration: Registration record to store

        Raises:
            InvalidRegistrationError: If the type is empty or render is not callable
            DuplicateRegistrationError: If the type is already registered
        """
        if not isinstance(registration.type, str) or not registration.type:
            raise InvalidRegistrationError(
                "Component type must be a non-empty string",
                field="type",
                value=registration.type,
            )
        if not callable(registration.render):
            raise InvalidRegistrationError(
                f"Render function for {registration.type} must be callable",
                field="render",
                value=registration.render,
            )
        if registration.type in self._components:
            raise DuplicateRegistrationError(registration.type)

        self._components[registration.type] = registration
        self.logger.debug("Component registered",
                          component_type=registration.type,
                          adapter_kind=registration.adapter_kind.value)

    def get(self, component_type: str) -> Optional[ComponentRegistration]:
        """Get registration by type."""
        return self._components.get(component_type)

    def get_data_definition(self, component_type: str) -> Optional[DataDefinition]:
        """Get the data definition for a component, if it declares one."""
        registration = self._components.get(component_type)
        if registration is None:
            return None
        return registration.data_definition

    def is_registered(self, component_type: str) -> bool:
        """Check if component type is registered."""
        return component_type in self._components

    def get_component_types(self) -> List[str]:
        """Get list of all registered component types."""
        return list(self._components.keys())

    def __contains__(self, component_type: object) -> bool:
        return component_type in self._components

    def __len__(self) -> int:
        return len(self._components)
