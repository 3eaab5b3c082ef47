"""
Project data model for the Resource Allocator.

A project is the 'Demand' side: it consumes resources.
It holds resource ids only; the Registry owns the Resource objects.
"""

from typing import List
from pydantic import BaseModel, Field, ConfigDict


class Project(BaseModel):
    """A named project with the ordered list of resources allocated to it."""
    id: str = Field(description="Unique identifier")
    name: str = Field(description="Free text, may contain spaces")

    # Allocation order. The same id may appear more than once.
    resource_ids: List[str] = Field(default_factory=list)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "P1",
            "name": "Alpha",
            "resource_ids": ["R2"]
        }
    })
