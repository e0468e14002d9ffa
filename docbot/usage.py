"""
Usage grammar parser.

A command's documentation opens with a usage paragraph, for example

    `push <branch> [--force]` Push a branch.

or, with the usage on its own first line,

    (remote|r) <command...>
    Manage the set of tracked repositories.

Grammar of the usage tokens, consumed left to right
- identifier clause: a bare token (`push`) or pipe-separated aliases
  (`(push|p)`); the first id is canonical.
- zero or more required arguments `<name>`, then zero or more optional
  arguments `[name]`. A name may not end in a period unless it is at most two
  characters long, so `<branch.>` never swallows sentence punctuation.
- at most one trailing rest argument, `<name...>` (required) or `[name...]`
  (optional).
- anything else left over is an error.
"""
import logging
import re
from typing import NamedTuple

from .faults import UsageSyntaxError
from .utils import relax

logger = logging.getLogger(__name__)

_COMMAND_IDS = re.compile(r"^\s*(?:([^(]\S*)|\(\s*([^)]*)\))")
_PIPE = re.compile(r"\s*\|\s*")
_REQUIRED_ARG = re.compile(r"^\s*<([^>]{0,2}|[^>]*[^>.]{3})>")
_OPTIONAL_ARG = re.compile(r"^\s*\[([^\]]{0,2}|[^\]]*[^\].]{3})\]")
_REST_ARG = re.compile(r"^\s*(?:<([^>]+)\.\.\.>|\[([^\]]+)\.\.\.\])")
_TRAILING = re.compile(r"\S")
_QUOTED_USAGE = re.compile(r"^\s*`([^`]*)`\s*:?\s*", re.DOTALL)


class RestArg(NamedTuple):
    """Trailing argument consuming every remaining token."""
    name: str
    required: bool


class ArgumentUsage(NamedTuple):
    name: str
    is_required: bool
    is_rest: bool


class CommandUsage(NamedTuple):
    """
    Parsed usage line of one command.

    Fields
    - ids: non-empty tuple of identifiers; ids[0] is canonical, the rest are aliases.
    - required / optional: argument names, in usage order.
    - rest: RestArg or None.
    - desc: the short description following the usage tokens.
    """
    ids: tuple
    required: tuple
    optional: tuple
    rest: RestArg | None
    desc: str

    @property
    def canonical(self):
        return self.ids[0]

    @property
    def arguments(self):
        """Every declared argument as ArgumentUsage, in usage order."""
        return (
            *(ArgumentUsage(name, True, False) for name in self.required),
            *(ArgumentUsage(name, False, False) for name in self.optional),
            *((ArgumentUsage(self.rest.name, self.rest.required, True),) if self.rest else ()),
        )

    @property
    def names(self):
        return tuple(argument.name for argument in self.arguments)

    @property
    def arity(self):
        return len(self.required) + len(self.optional) + (self.rest is not None)


def parse_usage_line(line, desc, /):
    """
    Parse the usage tokens of one command.

    Parameters
    - line: the usage tokens, e.g. "(push|p) <branch> [--force]".
    - desc: the short description to attach.

    Returns
    - CommandUsage

    Raises
    - UsageSyntaxError on an invalid id clause, duplicated argument names or a
      trailing string the grammar cannot consume.
    """
    if not isinstance(line, str):
        raise TypeError("parse_usage_line() argument must be a string")

    match = _COMMAND_IDS.match(line)
    if not match:
        raise UsageSyntaxError("invalid command ID specifier, expected e.g. 'foo' or '(foo|bar)'")

    if match[2] is not None:
        ids = tuple(_PIPE.split(match[2].strip()))
    else:
        ids = (match[1],)
    if not all(id.strip() for id in ids):
        raise UsageSyntaxError("invalid command ID specifier %r, empty alias" % match[0].strip())

    line = line[match.end():]

    required = []
    while match := _REQUIRED_ARG.match(line):
        required.append(match[1])
        line = line[match.end():]

    optional = []
    while match := _OPTIONAL_ARG.match(line):
        optional.append(match[1])
        line = line[match.end():]

    rest = None
    if match := _REST_ARG.match(line):
        rest = RestArg(match[1], True) if match[1] is not None else RestArg(match[2], False)
        line = line[match.end():]

    if _TRAILING.search(line):
        raise UsageSyntaxError("trailing string %r" % line.strip())

    usage = CommandUsage(ids, tuple(required), tuple(optional), rest, desc)

    seen = set()
    for name in usage.names:
        if name in seen:
            raise UsageSyntaxError("argument %r of %r is declared more than once" % (name, ids[0]))
        seen.add(name)

    logger.debug("parsed usage of %r: %d argument(s)", ids[0], usage.arity)
    return usage


def parse_usage(paragraph, /):
    """
    Parse a whole usage paragraph into a CommandUsage.

    Two layouts are accepted:
    - `<usage-tokens>`[:] <short description>  (usage quoted in backticks)
    - <usage-tokens> on the first line, the description on the following lines

    The description is collapsed onto a single line.
    """
    if not isinstance(paragraph, str):
        raise TypeError("parse_usage() argument must be a string")

    if match := _QUOTED_USAGE.match(paragraph):
        return parse_usage_line(match[1], relax(paragraph[match.end():]))

    line, _, desc = paragraph.strip().partition("\n")
    return parse_usage_line(line, relax(desc))


__all__ = (
    "RestArg",
    "ArgumentUsage",
    "CommandUsage",
    "parse_usage_line",
    "parse_usage",
)
