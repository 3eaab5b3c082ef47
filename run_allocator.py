"""
Main Execution Script for the Resource Allocator.
Interactive menu loop: reads a choice, prompts for its inputs,
prints the outcome and keeps going until Exit.
"""

import os
import sys
import logging
from typing import Callable

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from allocator import AllocationService, Command, Registry, TransactionLog, DEFAULT_LOG_FILENAME, execute
from allocator.commands import MENU_LABELS

logger = logging.getLogger("Main")

# --- CONFIGURATION ---
LOG_FILENAME = os.environ.get("RESOURCE_LOG_FILE", DEFAULT_LOG_FILENAME)
LOG_LEVEL = os.environ.get("RESOURCE_ALLOCATOR_LOG_LEVEL", "INFO")
# ---------------------

# Inputs each command prompts for, in order
PROMPTS = {
    Command.ADD_RESOURCE: [
        ("resource_id", "Enter Resource ID to add: "),
        ("type_choice", "Select Resource Type (1. Worker, 2. Equipment): "),
    ],
    Command.USE_RESOURCE: [("resource_id", "Enter Resource ID to use: ")],
    Command.MAINTAIN_RESOURCE: [("resource_id", "Enter Resource ID to maintain: ")],
    Command.ADD_PROJECT: [
        ("project_id", "Enter Project ID to add: "),
        ("name", "Enter Project Name: "),
    ],
    Command.ALLOCATE_RESOURCE: [
        ("resource_id", "Enter Resource ID to allocate: "),
        ("project_id", "Enter Project ID to allocate to: "),
    ],
    Command.DISPLAY_STATE: [("resource_id", "Enter Resource ID to display state: ")],
}


def menu_text() -> str:
    lines = [f"{cmd.value}. {label}" for cmd, label in MENU_LABELS.items()]
    return "\n".join(lines) + "\nEnter your choice: "


def run_shell(
    service: AllocationService,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print
) -> None:
    """
    Drive the service until Exit (or end of input).
    A failed command is reported and the loop continues.
    """
    while True:
        try:
            choice = read(menu_text()).strip()
        except EOFError:
            break

        try:
            command = Command(choice)
        except ValueError:
            write("Invalid choice. Please try again.")
            continue

        if command == Command.EXIT:
            write("Exiting...")
            break

        try:
            inputs = {}
            for key, prompt in PROMPTS[command]:
                value = read(prompt)
                # Project names keep their inner spaces; ids are single tokens
                inputs[key] = value.strip()
        except EOFError:
            break

        try:
            result = execute(service, command, **inputs)
        except Exception as e:
            # Report and keep the session alive
            logger.exception(f"{command.name} failed")
            write(f"Error: {e}")
            continue

        if result.ok:
            write(result.message)
        else:
            write(f"Error: {result.message}")


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
    logger.info(f"Starting Resource Allocator (transaction log: {LOG_FILENAME})")

    service = AllocationService(Registry(), TransactionLog(LOG_FILENAME))
    run_shell(service)

    logger.info(f"Session finished: {len(service.log)} transactions recorded.")


if __name__ == "__main__":
    main()
