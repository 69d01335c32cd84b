"""
Pydantic schemas for descriptors and registry reporting
"""

from .component import ComponentDescriptor, RegistryStats

__all__ = ["ComponentDescriptor", "RegistryStats"]
