"""
Docbot faults (errors) and fault codes.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure, grouped by
  domain so logs and searches stay predictable.
- Spec errors (SpecError and subclasses): raised once, while a command class is
  being built, when its docstring or field layout is invalid. A class that
  fails here never exists.
- Runtime errors (IdParseError, PathParseError, CommandParseError and their
  subclasses): raised by parse calls. They are structured: every variant keeps
  its parts as attributes so the folding protocol (docbot.folding) can take
  them apart and render them.

Rendering
- Every runtime error knows how to render itself with rich (__rich__), through
  docbot.rendering.RichFoldError.
- str(error) is a short technical message for logs and tracebacks.
"""
from enum import IntEnum


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - identifiers (1110x)
      • NO_MATCH, AMBIGUOUS_ID
    - paths (1111x)
      • INCOMPLETE_PATH, BAD_PATH_ID, TRAILING_PATH
    - commands (1112x)
      • NO_INPUT, BAD_ID, MISSING_REQUIRED, BAD_CONVERT, TRAILING_ARGUMENT,
        SUBCOMMAND
    - specification (1310x)
      • USAGE_SYNTAX, DOCUMENTATION, DUPLICATE_IDENTIFIER, INVALID_STRUCTURE

    normalize() allows the host to remap codes to custom labels while keeping
    code stability.
    """
    # --- identifier errors (11xxx) ---
    NO_MATCH                    = 11101
    AMBIGUOUS_ID                = 11102

    # --- path errors (11xxx) ---
    INCOMPLETE_PATH             = 11111
    BAD_PATH_ID                 = 11112
    TRAILING_PATH               = 11113

    # --- command errors (11xxx) ---
    NO_INPUT                    = 11121
    BAD_ID                      = 11122
    MISSING_REQUIRED            = 11123
    BAD_CONVERT                 = 11124
    TRAILING_ARGUMENT           = 11125
    SUBCOMMAND                  = 11126

    # --- specification errors (13xxx) ---
    USAGE_SYNTAX                = 13101
    DOCUMENTATION               = 13102
    DUPLICATE_IDENTIFIER        = 13103
    INVALID_STRUCTURE           = 13104

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class DocbotError(Exception):
    """Base class of every docbot error."""
    code = None

    def __rich__(self):
        from .rendering import RichFoldError
        return RichFoldError().render(self)


# --- specification errors ---

class SpecError(DocbotError):
    """A command declaration is invalid; raised while its class is built."""


class UsageSyntaxError(SpecError):
    code = FaultCode.USAGE_SYNTAX


class DocumentationError(SpecError):
    code = FaultCode.DOCUMENTATION

    def __init__(self, message, /, *, expected=(), found=()):
        super().__init__(message)
        self.expected = tuple(expected)
        self.found = tuple(found)


class DuplicateIdentifierError(SpecError):
    code = FaultCode.DUPLICATE_IDENTIFIER

    def __init__(self, identifier, /):
        super().__init__("multiple entries for identifier %r" % identifier)
        self.identifier = identifier


class InvalidStructureError(SpecError):
    code = FaultCode.INVALID_STRUCTURE


# --- identifier errors ---

class IdParseError(DocbotError):
    """A token could not be resolved to a command identifier."""


class NoMatchError(IdParseError):
    code = FaultCode.NO_MATCH

    def __init__(self, given, available, /):
        super().__init__("no ID match for %r" % given)
        self.given = given
        self.available = tuple(available)


class AmbiguousIdError(IdParseError):
    code = FaultCode.AMBIGUOUS_ID

    def __init__(self, candidates, given, /):
        self.candidates = tuple(candidates)
        self.given = given
        super().__init__("ambiguous ID %r, could be any of %s" % (given, ", ".join(self.candidates)))


# --- path errors ---

class PathParseError(DocbotError):
    """A token sequence could not be parsed into a command path."""


class IncompletePathError(PathParseError):
    code = FaultCode.INCOMPLETE_PATH

    def __init__(self, available, /):
        self.available = tuple(available)
        super().__init__("incomplete command path, expected one of %s" % ", ".join(self.available))


class BadPathIdError(PathParseError):
    code = FaultCode.BAD_PATH_ID

    def __init__(self, error, /):
        super().__init__("failed to parse path ID")
        self.error = error


class TrailingPathError(PathParseError):
    code = FaultCode.TRAILING_PATH

    def __init__(self, extra, /):
        super().__init__("trailing path argument %r" % extra)
        self.extra = extra


# --- command errors ---

class CommandParseError(DocbotError):
    """A token sequence could not be parsed into a command value."""


class NoInputError(CommandParseError):
    code = FaultCode.NO_INPUT

    def __init__(self):
        super().__init__("no values in command parse input")


class BadIdError(CommandParseError):
    code = FaultCode.BAD_ID

    def __init__(self, error, /):
        super().__init__("failed to parse command ID")
        self.error = error


class MissingRequiredError(CommandParseError):
    code = FaultCode.MISSING_REQUIRED

    def __init__(self, cmd, arg, /):
        super().__init__("missing required argument %r of %r" % (arg, cmd))
        self.cmd = cmd
        self.arg = arg


class BadConvertError(CommandParseError):
    code = FaultCode.BAD_CONVERT

    def __init__(self, cmd, arg, error, /):
        super().__init__("failed to convert argument %r of %r from a string" % (arg, cmd))
        self.cmd = cmd
        self.arg = arg
        self.error = error


class TrailingArgumentError(CommandParseError):
    code = FaultCode.TRAILING_ARGUMENT

    def __init__(self, cmd, extra, /):
        super().__init__("trailing argument %r of %r" % (extra, cmd))
        self.cmd = cmd
        self.extra = extra


class SubcommandError(CommandParseError):
    code = FaultCode.SUBCOMMAND

    def __init__(self, cmd, error, /):
        super().__init__("failed to parse subcommand %r" % cmd)
        self.cmd = cmd
        self.error = error


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "DocbotError",
    "SpecError",
    "UsageSyntaxError",
    "DocumentationError",
    "DuplicateIdentifierError",
    "InvalidStructureError",
    "IdParseError",
    "NoMatchError",
    "AmbiguousIdError",
    "PathParseError",
    "IncompletePathError",
    "BadPathIdError",
    "TrailingPathError",
    "CommandParseError",
    "NoInputError",
    "BadIdError",
    "MissingRequiredError",
    "BadConvertError",
    "TrailingArgumentError",
    "SubcommandError",
    "getdoc",
)
