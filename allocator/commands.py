"""
Command interface between the interactive shell and the AllocationService.

Each menu entry maps to exactly one service call.
Commands are plain data; validation lives in the service.
"""

from enum import Enum
from typing import Dict

from models import ResourceType
from .errors import OperationResult
from .service import AllocationService


class Command(str, Enum):
    """Menu entries, keyed by the number the user types."""
    ADD_RESOURCE = "1"
    USE_RESOURCE = "2"
    MAINTAIN_RESOURCE = "3"
    ADD_PROJECT = "4"
    ALLOCATE_RESOURCE = "5"
    DISPLAY_STATE = "6"
    EXIT = "7"


MENU_LABELS: Dict[Command, str] = {
    Command.ADD_RESOURCE: "Add Resource",
    Command.USE_RESOURCE: "Use Resource",
    Command.MAINTAIN_RESOURCE: "Maintain Resource",
    Command.ADD_PROJECT: "Add Project",
    Command.ALLOCATE_RESOURCE: "Allocate Resource to Project",
    Command.DISPLAY_STATE: "Display Resource State",
    Command.EXIT: "Exit",
}

# Type selector shown when adding a resource: "1. Worker, 2. Equipment"
TYPE_CHOICES: Dict[str, ResourceType] = {
    "1": ResourceType.WORKER,
    "2": ResourceType.EQUIPMENT,
}


def parse_resource_type(choice: str) -> ResourceType:
    """Anything other than '1' selects equipment."""
    return TYPE_CHOICES.get(choice.strip(), ResourceType.EQUIPMENT)


def execute(service: AllocationService, command: Command, **inputs: str) -> OperationResult:
    """
    Run one command against the service.
    Raises ValueError for EXIT or a missing input; those are shell concerns.
    """
    try:
        if command == Command.ADD_RESOURCE:
            return service.register_resource(inputs["resource_id"], parse_resource_type(inputs["type_choice"]))
        if command == Command.USE_RESOURCE:
            return service.mark_in_use(inputs["resource_id"])
        if command == Command.MAINTAIN_RESOURCE:
            return service.maintain(inputs["resource_id"])
        if command == Command.ADD_PROJECT:
            return service.register_project(inputs["project_id"], inputs["name"])
        if command == Command.ALLOCATE_RESOURCE:
            return service.allocate(inputs["resource_id"], inputs["project_id"])
        if command == Command.DISPLAY_STATE:
            return service.describe_state(inputs["resource_id"])
    except KeyError as e:
        raise ValueError(f"Missing input {e} for command {MENU_LABELS[command]}") from e

    raise ValueError(f"{MENU_LABELS[command]} is not a service command")
