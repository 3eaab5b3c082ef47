"""
Registry of Resources and Projects.

This module acts as the 'Memory' of the system.
It owns every entity through two independent id maps and
enforces uniqueness on registration. Nothing is ever removed,
so allocation history stays traceable through the transaction log.

Registration is split in two so a caller can record the change before it
becomes visible: prepare_* validates and builds the entity, add_* inserts it.
"""

import logging
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from models import Resource, ResourceType, Project
from .errors import AllocationError, duplicate_id, invalid_input, not_found

logger = logging.getLogger(__name__)


class Registry:
    """
    Aggregate root for the allocation model.
    Returned entities are shared references; only AllocationService mutates them.
    """

    def __init__(self):
        """Initialize empty registry."""
        # Resource and project ids live in separate namespaces
        self._resources: Dict[str, Resource] = {}
        self._projects: Dict[str, Project] = {}

    # --- Registration ---

    def prepare_resource(self, resource_id: str, resource_type: ResourceType) -> Tuple[Optional[Resource], Optional[AllocationError]]:
        """
        Build an Idle, unallocated resource without inserting it.
        Fails with DUPLICATE_ID if the id is taken, INVALID_INPUT for an unknown type.
        """
        if resource_id in self._resources:
            logger.warning(f"Resource {resource_id} is already registered.")
            return None, duplicate_id("Resource", resource_id)

        try:
            return Resource(id=resource_id, type=resource_type), None
        except ValidationError as e:
            return None, invalid_input("Resource", resource_id, e)

    def prepare_project(self, project_id: str, name: str) -> Tuple[Optional[Project], Optional[AllocationError]]:
        """Build an empty project without inserting it. Fails with DUPLICATE_ID if the id is taken."""
        if project_id in self._projects:
            logger.warning(f"Project {project_id} is already registered.")
            return None, duplicate_id("Project", project_id)

        try:
            return Project(id=project_id, name=name), None
        except ValidationError as e:
            return None, invalid_input("Project", project_id, e)

    def add_resource(self, resource: Resource) -> None:
        """Insert a resource obtained from prepare_resource."""
        self._resources[resource.id] = resource

    def add_project(self, project: Project) -> None:
        """Insert a project obtained from prepare_project."""
        self._projects[project.id] = project

    def register_resource(self, resource_id: str, resource_type: ResourceType) -> Optional[AllocationError]:
        """Prepare and insert in one step. Returns the rejection, or None."""
        resource, error = self.prepare_resource(resource_id, resource_type)
        if error:
            return error
        self.add_resource(resource)
        return None

    def register_project(self, project_id: str, name: str) -> Optional[AllocationError]:
        project, error = self.prepare_project(project_id, name)
        if error:
            return error
        self.add_project(project)
        return None

    # --- Query Methods ---

    def find_resource(self, resource_id: str) -> Tuple[Optional[Resource], Optional[AllocationError]]:
        """Returns (resource, None), or (None, NOT_FOUND) for an unknown id."""
        resource = self._resources.get(resource_id)
        if resource is None:
            return None, not_found("Resource", resource_id)
        return resource, None

    def find_project(self, project_id: str) -> Tuple[Optional[Project], Optional[AllocationError]]:
        """Returns (project, None), or (None, NOT_FOUND) for an unknown id."""
        project = self._projects.get(project_id)
        if project is None:
            return None, not_found("Project", project_id)
        return project, None

    def resources_for_project(self, project_id: str) -> List[Resource]:
        """Resolve a project's ordered resource ids (duplicates included)."""
        project = self._projects.get(project_id)
        if project is None:
            return []
        return [self._resources[rid] for rid in project.resource_ids]

    @property
    def resources(self) -> List[Resource]:
        return list(self._resources.values())

    @property
    def projects(self) -> List[Project]:
        return list(self._projects.values())

    def __len__(self) -> int:
        return len(self._resources) + len(self._projects)
