"""
The Allocation Service.

This module implements the operations layer of the allocator:
the only component that changes Resource.state or Project.resource_ids,
and the only source of transaction log records.

State machine:
    Idle / InUse / UnderMaintenance -> InUse             (allocate, mark_in_use)
    Idle / InUse / UnderMaintenance -> UnderMaintenance  (maintain, equipment only)
Nothing returns a resource to Idle.

Every mutation follows the same order: validate, append the log record, apply.
If the log cannot be written the in-memory state is left untouched.
"""

import logging
from typing import Optional

from models import Resource, ResourceType, ResourceState
from .errors import (
    AllocationError,
    ErrorKind,
    OperationResult,
    PersistenceError,
)
from .registry import Registry
from .transaction_log import TransactionLog

logger = logging.getLogger(__name__)

STATE_LABELS = {
    ResourceState.IDLE: "Idle",
    ResourceState.IN_USE: "In Use",
    ResourceState.UNDER_MAINTENANCE: "under maintenance",
}


class AllocationService:
    """
    Allocates resources to projects and moves them through their states.
    Single caller at a time; there is no internal locking.
    """

    def __init__(self, registry: Registry, transaction_log: TransactionLog):
        self.registry = registry
        self.log = transaction_log

    # --- Registration ---

    def register_resource(self, resource_id: str, resource_type: ResourceType) -> OperationResult:
        resource, error = self.registry.prepare_resource(resource_id, resource_type)
        if error:
            return self._reject(error)

        message = f"Resource {resource_id} of type {resource.type.value} added."
        error = self._record(message, resource_id)
        if error:
            return self._reject(error)

        self.registry.add_resource(resource)
        logger.info(message)
        return OperationResult(message=message)

    def register_project(self, project_id: str, name: str) -> OperationResult:
        project, error = self.registry.prepare_project(project_id, name)
        if error:
            return self._reject(error)

        message = f"Project {project_id} named {name} added."
        error = self._record(message, project_id)
        if error:
            return self._reject(error)

        self.registry.add_project(project)
        logger.info(message)
        return OperationResult(message=message)

    # --- State Transitions ---

    def allocate(self, resource_id: str, project_id: str) -> OperationResult:
        """
        Allocate a resource to a project.

        The resource does not need to be Idle. If it was already allocated
        elsewhere, only its back-reference moves: the previous project keeps
        its (now stale) entry. Allocating twice to the same project lists the
        resource twice.
        """
        resource, error = self.registry.find_resource(resource_id)
        if error:
            return self._reject(error)
        project, error = self.registry.find_project(project_id)
        if error:
            return self._reject(error)

        error = self._record(f"Resource {resource_id} allocated to project {project.name}", resource_id)
        if error:
            return self._reject(error)

        if resource.project_id and resource.project_id != project_id:
            logger.warning(
                f"Resource {resource_id} moved from project {resource.project_id} to {project_id}; "
                f"{resource.project_id} still lists it."
            )

        # State first so the Idle-without-project rule holds at every assignment
        resource.state = ResourceState.IN_USE
        project.resource_ids.append(resource_id)
        resource.project_id = project_id

        logger.info(f"Resource {resource_id} allocated to project {project.name}")
        return OperationResult(message=f"Resource {resource_id} allocated to project {project_id}.")

    def mark_in_use(self, resource_id: str) -> OperationResult:
        """Set InUse from any state. No project is created or required."""
        resource, error = self.registry.find_resource(resource_id)
        if error:
            return self._reject(error)

        message = f"Resource {resource_id} is now in use."
        error = self._record(message, resource_id)
        if error:
            return self._reject(error)

        resource.state = ResourceState.IN_USE
        logger.info(message)
        return OperationResult(message=message)

    def maintain(self, resource_id: str) -> OperationResult:
        """
        Put equipment under maintenance.
        Workers are reported as ineligible: no state change, no log record.
        """
        resource, error = self.registry.find_resource(resource_id)
        if error:
            return self._reject(error)

        if not resource.is_equipment:
            return self._reject(AllocationError(
                kind=ErrorKind.INELIGIBLE_FOR_MAINTENANCE,
                reason=f"Resource {resource_id} is not equipment and cannot be maintained.",
                entity_id=resource_id
            ))

        message = f"Resource {resource_id} is under maintenance."
        error = self._record(message, resource_id)
        if error:
            return self._reject(error)

        resource.state = ResourceState.UNDER_MAINTENANCE
        logger.info(message)
        return OperationResult(message=message)

    # --- Queries ---

    def describe_state(self, resource_id: str) -> OperationResult:
        """
        Read-only description of a resource's state.
        The project name is only appended for resources under maintenance,
        even though an InUse resource can be allocated too.
        """
        resource, error = self.registry.find_resource(resource_id)
        if error:
            return self._reject(error)

        description = STATE_LABELS[resource.state]
        if resource.state == ResourceState.UNDER_MAINTENANCE:
            project_name = self._project_name(resource)
            if project_name is not None:
                description += f" and allocated to project {project_name}"

        return OperationResult(
            message=f"Resource {resource_id} is {description}.",
            value=description
        )

    # --- Helpers ---

    def _project_name(self, resource: Resource) -> Optional[str]:
        if not resource.is_allocated:
            return None
        project, error = self.registry.find_project(resource.project_id)
        return None if error else project.name

    def _record(self, message: str, entity_id: str) -> Optional[AllocationError]:
        """Append to the transaction log, converting sink failures into an error."""
        try:
            self.log.append(message)
        except PersistenceError as e:
            logger.error(f"Transaction log write failed, operation not applied: {e}")
            return AllocationError(kind=ErrorKind.PERSISTENCE, reason=str(e), entity_id=entity_id)
        return None

    def _reject(self, error: AllocationError) -> OperationResult:
        if error.kind != ErrorKind.PERSISTENCE:
            logger.warning(f"{error.kind.value}: {error.reason} ({error.entity_id})")
        return OperationResult.failure(error)
