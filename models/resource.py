"""
Resource data models for the Resource Allocator.

This module defines the 'Supply' side of the allocator:
1. Workers (Human resources, never maintained)
2. Equipment (Physical resources that can go under maintenance)
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator, ConfigDict


class ResourceType(str, Enum):
    """Categories of allocatable resources."""
    WORKER = "worker"
    EQUIPMENT = "equipment"


class ResourceState(str, Enum):
    """Lifecycle state of a resource. Every resource starts Idle."""
    IDLE = "Idle"
    IN_USE = "InUse"
    UNDER_MAINTENANCE = "UnderMaintenance"


class Resource(BaseModel):
    """
    A registered worker or piece of equipment.
    'project_id' is a back-reference to the last project it was allocated to.
    """
    id: str = Field(description="Unique identifier, assigned by the caller")
    type: ResourceType = Field(description="Worker or Equipment")
    state: ResourceState = Field(default=ResourceState.IDLE, description="Current state")

    project_id: Optional[str] = Field(
        default=None,
        description="Project this resource is allocated to (None if never allocated)"
    )

    # Re-run the validator whenever the service mutates a field
    model_config = ConfigDict(validate_assignment=True, json_schema_extra={
        "example": {
            "id": "R1",
            "type": "equipment",
            "state": "UnderMaintenance",
            "project_id": "P1"
        }
    })

    @model_validator(mode='after')
    def validate_allocation(self):
        if self.state == ResourceState.IDLE and self.project_id is not None:
            raise ValueError("An Idle resource cannot be allocated to a project")
        return self

    @property
    def is_equipment(self) -> bool:
        return self.type == ResourceType.EQUIPMENT

    @property
    def is_allocated(self) -> bool:
        return self.project_id is not None
