"""
Data models package for the Resource Allocator.

This package exports the two entities of the allocation model:
1. Supply (Resource, ResourceType, ResourceState)
2. Demand (Project)
"""

from .resource import (
    Resource,
    ResourceType,
    ResourceState
)

from .project import Project

__all__ = [
    # --- Supply Models ---
    "Resource",
    "ResourceType",
    "ResourceState",

    # --- Demand Models ---
    "Project",
]
