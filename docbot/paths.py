"""
Command paths: addressing (nested) commands without their arguments.

A path names a command and, for subcommand commands, optionally a command of
the nested type, and so on:

    Git.parse_path(["remote", "add"])  ->  CommandPath(Git.Remote.id, CommandPath(Remote.Add.id))

Paths are used to look up help topics and to accept command names as values
(Argument(SomeCommands, path=True)).
"""
import logging

from .faults import IdParseError, IncompletePathError, BadPathIdError, TrailingPathError
from .tokenize import Tokens
from .utils import Unset

logger = logging.getLogger(__name__)


class CommandPath:
    """
    A head command id plus an optional path into its nested command type.

    Parameters
    - id: the head CommandId.
    - rest: a CommandPath of the nested type, or None. Only subcommand
      commands can carry a rest.
    """
    __slots__ = ("_id", "_rest")

    def __init__(self, id, rest=None, /):
        if not hasattr(id, "command"):
            raise TypeError("CommandPath() id must be a command id")
        if rest is not None:
            if not isinstance(rest, CommandPath):
                raise TypeError("CommandPath() rest must be a command path or None")
            if not id.command.__subcommand__:
                raise ValueError("command %r has no subcommands" % str(id))
        self._id = id
        self._rest = rest

    @classmethod
    def from_id(cls, id, /):
        """A path consisting of the single id."""
        return cls(id)

    id = property(lambda self: self._id)
    rest = property(lambda self: self._rest)

    def head(self):
        return self._id

    def __iter__(self):
        path = self
        while path is not None:
            yield path._id
            path = path._rest

    def __eq__(self, other):
        if not isinstance(other, CommandPath):
            return NotImplemented
        return self._id is other._id and self._rest == other._rest

    def __hash__(self):
        return hash(tuple(map(id, self)))

    def __str__(self):
        return " ".join(map(str, self))

    def __repr__(self):
        return "CommandPath(%s)" % ", ".join(map(repr, map(str, self)))


def parse_path(owner, tokens, /):
    """
    Parse a command path of the command type owner.

    Parameters
    - owner: a Command or CommandSet class.
    - tokens: a Tokens stream, a string or an iterable of strings.

    Raises
    - IncompletePathError when there is no token to read; it lists every name
      the owner accepts.
    - BadPathIdError wrapping the IdParseError of an unknown or ambiguous name.
    - TrailingPathError when a token follows a command without subcommands.
    """
    stream = Tokens.of(tokens)

    if (token := stream.next()) is Unset:
        raise IncompletePathError(owner.names())

    try:
        id = owner.__trie__.lookup(token)
    except IdParseError as error:
        raise BadPathIdError(error) from error

    rest = None
    if id.command.__subcommand__:
        rest = parse_path_opt(id.command.__fields__[0].type, stream)
    elif (extra := stream.next()) is not Unset:
        raise TrailingPathError(extra)

    logger.debug("parsed path %r -> %s", token, id)
    return CommandPath(id, rest)


def parse_path_opt(owner, tokens, /):
    """Like parse_path, but an empty stream yields None."""
    stream = Tokens.of(tokens)
    if stream.peek() is Unset:
        return None
    return parse_path(owner, stream)


__all__ = (
    "CommandPath",
    "parse_path",
    "parse_path_opt",
)
