"""
Command handlers for accessortracker CLI.
"""
from .base import BaseCommand, CommandContext
from .check import CheckCommand

__all__ = [
    'BaseCommand',
    'CommandContext',
    'CheckCommand',
]

COMMAND_REGISTRY = {
    'check': CheckCommand,
}
