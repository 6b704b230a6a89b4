"""Chat command handling."""

from fsops.commands.definitions import (
    COMMAND_DEFINITIONS,
    COMMANDS_BY_NAME,
    CommandDefinition,
    CommandOption,
    OptionType,
)
from fsops.commands.handler import CommandHandler
from fsops.commands.messages import Embed, EmbedField, Reply

__all__ = [
    "COMMANDS_BY_NAME",
    "COMMAND_DEFINITIONS",
    "CommandDefinition",
    "CommandHandler",
    "CommandOption",
    "Embed",
    "EmbedField",
    "OptionType",
    "Reply",
]
