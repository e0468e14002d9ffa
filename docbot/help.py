"""
Help topics.

Topics are plain immutable records built once per command class. Renderers
(docbot.folding, docbot.rendering) take them apart; the command classes hand
out the stored instances, so a topic can be compared by identity.
"""
from typing import NamedTuple


class CommandTopic(NamedTuple):
    """Help for a single command: its usage line and long description."""
    usage: object
    desc: object


class CommandSetTopic(NamedTuple):
    """Help for a family of commands: an optional summary and every member usage."""
    summary: str | None
    commands: tuple


class CustomTopic(NamedTuple):
    text: str


__all__ = (
    "CommandTopic",
    "CommandSetTopic",
    "CustomTopic",
)
