"""
Component schemas
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ComponentDescriptor(BaseModel):
    """
    One render slot of a content area.
    
    Fields other than ``type`` and ``props`` are kept as extras and handed to
    the middleware chain as middleware props.
    """
    model_config = ConfigDict(extra="allow", frozen=True)
    
    type: str = Field(..., description="Registered component type")
    props: Dict[str, Any] = Field(default_factory=dict, description="Component props")
    
    @property
    def middleware_props(self) -> Dict[str, Any]:
        """Caller-attached fields consumed by middleware."""
        return dict(self.model_extra or {})


class RegistryStats(BaseModel):
    """Component registrar statistics."""
    total_components: int = Field(..., description="Total registered components")
    data_components: int = Field(..., description="Components declaring a data definition")
    middleware_count: int = Field(..., description="Registered render middleware")
    component_types: List[str] = Field(default_factory=list, description="Types in registration order")
