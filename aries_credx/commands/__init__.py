"""Command line commands and their dispatch."""

from importlib import import_module
from os import getenv
from types import ModuleType
from typing import Optional, Sequence

PROG = getenv("ARIES_CREDX_COMMAND_NAME", "aries-credx")


def available_commands():
    """Index available commands."""
    return [
        {"name": "help", "summary": "Print available commands"},
        {"name": "encode", "summary": "Encode attribute values for signing"},
    ]


def load_command(command: str) -> Optional[ModuleType]:
    """Load the module of a named command, or `None` if there is no such command."""
    if any(cmd["name"] == command for cmd in available_commands()):
        return import_module(f"{__package__}.{command}")
    return None


def run_command(command: str, argv: Sequence[str] = None):
    """Execute a named command with command line arguments, falling back to help."""
    module = load_command(command) or load_command("help")
    module.execute(argv)
