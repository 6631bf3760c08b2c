"""Commands - Write operations that change state.

Commands represent intent to perform an action. They are immutable
dataclasses with imperative names (SubmitApplication).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.application_commands import SubmitApplication

__all__ = [
    "SubmitApplication",
]
