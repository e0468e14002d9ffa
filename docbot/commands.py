"""
Docbot command layer: declarative, documentation-driven command types.

What this module provides
- Command: a single command. Its docstring is its specification: the usage
  paragraph names the command (and aliases) and its positional arguments, the
  sections document them. One Argument is declared per usage argument.
- CommandSet: a family of commands, declared as nested Command classes (or
  passed with the commands= class keyword).
- CommandId: the identifier object of a command, shared by every value of it.

Quick start
    from docbot import Command, CommandSet, Argument

    class Git(CommandSet):
        \"\"\"Version control, the tiny edition.\"\"\"

        class Push(Command):
            \"\"\"
            `push <branch> [--force]` Push a branch.

            # Arguments
            branch: The branch to push.
            --force: Anything non-empty forces the push.
            \"\"\"
            branch = Argument()
            force = Argument()

    Git.parse(["push", "main"])        # Git.Push(branch='main', force=None)
    Git.parse("pu main yes").force     # 'yes'
    Git.help(Git.Push.id)              # CommandTopic(usage=..., desc=...)

Core ideas
- Everything is validated while the class statement runs: a malformed
  docstring, a field that does not line up with the usage or two commands
  sharing an identifier raise a SpecError, so a broken command never exists.
- Parsing only reads what was built: the identifier trie, the resolved fields
  and the help topics are immutable.
- Values are read-only, compare by field values and support structural
  pattern matching (match value: case Git.Push(branch): ...).

Class keywords
- subcommand=True: the command's single rest argument is parsed as a command
  of the nested command type given to its Argument.
- commands=(...): extra members of a CommandSet, after the nested ones.
"""
import logging
import re
from collections.abc import Iterable
from inspect import Parameter, Signature
from typing import final

from .arguments import Argument, FieldMode, resolve_fields
from .docs import parse_command_docs, parse_command_set_docs
from .faults import *
from .help import CommandTopic, CommandSetTopic
from .paths import CommandPath, parse_path, parse_path_opt
from .tokenize import Tokens
from .trie import Trie
from .utils import Unset, rename

logger = logging.getLogger(__name__)

_RESERVED = frozenset({"id", "parse", "parse_path", "parse_path_opt", "help", "names"})


@final
class CommandId:
    """
    Identifier of one command type.

    Attributes
    - name: the canonical identifier (first of the usage ids).
    - aliases: the remaining identifiers.
    - command: the command class it identifies.

    Ids are unique per command class; equality is identity.
    """
    __slots__ = ("_names", "_command")

    def __init__(self, names, command, /):
        self._names = tuple(names)
        self._command = command

    name = property(lambda self: self._names[0])
    aliases = property(lambda self: self._names[1:])
    names = property(lambda self: self._names)
    command = property(lambda self: self._command)

    def __str__(self):
        return self._names[0]

    def __repr__(self):
        return "CommandId(%r)" % self._names[0]

    def __rich_repr__(self):
        yield self._names[0]
        if self._names[1:]:
            yield "aliases", self._names[1:]


def _convert(cmd, field, token):
    try:
        return field.type(token)
    except Exception as error:
        raise BadConvertError(cmd, field.name, error) from error


def _rest(cmd, field, stream):
    empty = stream.peek() is Unset

    if empty and field.mode is FieldMode.REST_REQUIRED:
        raise MissingRequiredError(cmd, field.name)

    if field.subcommand:
        try:
            return field.type.parse(stream)
        except CommandParseError as error:
            raise SubcommandError(cmd, error) from error

    if field.path:
        try:
            if field.mode is FieldMode.REST_REQUIRED:
                return field.type.parse_path(stream)
            return field.type.parse_path_opt(stream)
        except PathParseError as error:
            raise BadConvertError(cmd, field.name, error) from error

    return tuple(_convert(cmd, field, token) for token in stream)


def _construct(command, stream):
    """
    Build a value of command from the tokens following its identifier.

    Fields are consumed in usage order: required fields must be present,
    optional fields default to None and a rest field takes every remaining
    token. Without a rest field, a leftover token is an error.
    """
    cmd = command.id.name
    values = {}
    rest = False

    for field in command.__fields__:
        match field.mode:
            case FieldMode.REQUIRED:
                if (token := stream.next()) is Unset:
                    raise MissingRequiredError(cmd, field.name)
                values[field.attribute] = _convert(cmd, field, token)
            case FieldMode.OPTIONAL:
                token = stream.next()
                values[field.attribute] = None if token is Unset else _convert(cmd, field, token)
            case FieldMode.REST_REQUIRED | FieldMode.REST_OPTIONAL:
                values[field.attribute] = _rest(cmd, field, stream)
                rest = True

    if not rest and (extra := stream.next()) is not Unset:
        raise TrailingArgumentError(cmd, extra)

    return command(**values)


def _signature(fields):
    parameters = []
    kind = Parameter.POSITIONAL_OR_KEYWORD
    defaulted = False

    for field in fields:
        match field.mode:
            case FieldMode.REQUIRED:
                default = Parameter.empty
            case FieldMode.OPTIONAL:
                default = None
            case FieldMode.REST_OPTIONAL:
                if field.subcommand:
                    default = Parameter.empty
                else:
                    default = None if field.path else ()
            case FieldMode.REST_REQUIRED:
                default = Parameter.empty
                if defaulted:
                    kind = Parameter.KEYWORD_ONLY
        defaulted = defaulted or default is not Parameter.empty
        parameters.append(Parameter(field.attribute, kind, default=default))

    return Signature(parameters)


class CommandType(type):
    """
    Metaclass that turns documented class statements into command types.

    Responsibilities
    - Parse the docstring of Command classes (usage, argument docs, examples)
      and bind its arguments to the Argument declarations of the class body.
    - Collect the members of CommandSet classes.
    - Build the identifier trie and the help topics once.
    - Give commands a generated __init__ mirroring their fields, read-only
      instances, value equality and stable __repr__/__rich_repr__.
    - Seal built command types against further subclassing.

    Options (class keywords)
    - abstract: build a plain root class (Command, CommandSet).
    - subcommand: the command delegates its rest argument to a nested type.
    - commands: extra CommandSet members.
    """

    def __new__(cls, name, bases, namespace, /, **options):
        if options.get("abstract", False):
            return super().__new__(cls, name, bases, namespace)

        match tuple({base.__kind__ for base in bases if isinstance(base, CommandType)}):
            case ("command",):
                self = cls._command(name, bases, namespace, options)
            case ("command-set",):
                self = cls._command_set(name, bases, namespace, options)
            case _:
                raise TypeError("a command type must derive from exactly one of Command or CommandSet")

        @rename("__init_subclass__")
        def __init_subclass__(cls, **options):  # NOQA: F-841
            """
            Disallow subclassing of built command types.
            """
            raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
        self.__init_subclass__ = classmethod(__init_subclass__)

        return self

    @classmethod
    def _command(cls, name, bases, namespace, options):
        declarations = {}
        for key, value in namespace.items():
            if isinstance(value, Argument):
                if key in _RESERVED:
                    raise InvalidStructureError("field name %r of %r is reserved" % (key, name))
                declarations[key] = value

        docs = parse_command_docs(namespace.get("__doc__"))
        subcommand = bool(options.get("subcommand", False))
        fields = resolve_fields(docs.usage.canonical, docs.usage, declarations, subcommand=subcommand)
        attributes = tuple(field.attribute for field in fields)
        signature = _signature(fields)

        @rename("__init__")
        def __init__(self, /, *args, **kwargs):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            for attribute, value in bound.arguments.items():
                object.__setattr__(self, attribute, value)

        @rename("__eq__")
        def __eq__(self, other):
            if type(self) is not type(other):
                return NotImplemented
            return all(getattr(self, attribute) == getattr(other, attribute) for attribute in attributes)

        @rename("__hash__")
        def __hash__(self):
            return hash((type(self), *(getattr(self, attribute) for attribute in attributes)))

        self = super().__new__(
            cls,
            name,
            bases,
            {key: value for key, value in namespace.items() if key not in declarations} | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
                "__slots__": attributes,
                "__match_args__": attributes,
                "__init__": __init__,
                "__eq__": __eq__,
                "__hash__": __hash__,
                "__signature__": signature,
            },
        )

        self.id = CommandId(docs.usage.ids, self)
        self.__docs__ = docs
        self.__fields__ = fields
        self.__subcommand__ = subcommand
        self.__ids__ = (self.id,)
        self.__trie__ = Trie((identifier, self.id) for identifier in docs.usage.ids)
        self.__topic__ = CommandTopic(docs.usage, docs.desc)

        logger.debug("built command %r with %d field(s)", self.id.name, len(fields))
        return self

    @classmethod
    def _command_set(cls, name, bases, namespace, options):
        extra = tuple(options.get("commands", ()))
        for value in extra:
            if not isinstance(value, CommandType) or value.__kind__ != "command":
                raise InvalidStructureError("member %r of %r is not a command type" % (value, name))

        members = []
        for value in (*namespace.values(), *extra):
            if isinstance(value, CommandType) and value.__kind__ == "command":
                if "id" not in value.__dict__:
                    raise InvalidStructureError("member %r of %r is not a built command" % (value.__name__, name))
                if value not in members:
                    members.append(value)

        if not members:
            raise InvalidStructureError("command set %r declares no commands" % name)

        docs = parse_command_set_docs(namespace.get("__doc__"))

        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
                "__slots__": (),
            },
        )

        self.__docs__ = docs
        self.__commands__ = tuple(members)
        self.__ids__ = tuple(member.id for member in members)
        self.__trie__ = Trie((identifier, member.id) for member in members for identifier in member.id.names)
        self.__topic__ = CommandSetTopic(docs.summary, tuple(member.__docs__.usage for member in members))

        logger.debug("built command set %r with %d command(s)", name, len(members))
        return self

    def __instancecheck__(self, instance):
        if (commands := self.__dict__.get("__commands__")) is not None:
            return type(instance) in commands
        return super().__instancecheck__(instance)


class _CommandBase(metaclass=CommandType, abstract=True):
    __slots__ = ()
    __kind__ = None
    __subcommand__ = False

    @classmethod
    def parse(cls, tokens, /):
        """
        Parse a command value from tokens.

        Parameters
        - tokens: a string (split with docbot.tokenize), an iterable of
          strings or a Tokens stream. The first token is the command id; any
          unambiguous prefix of an id is accepted.

        Raises
        - NoInputError when there are no tokens.
        - BadIdError wrapping the IdParseError of an unknown or ambiguous id.
        - MissingRequiredError, BadConvertError, TrailingArgumentError or
          SubcommandError for argument failures.
        """
        stream = Tokens.of(tokens)

        if (token := stream.next()) is Unset:
            raise NoInputError()

        try:
            id = cls.__trie__.lookup(token)
        except IdParseError as error:
            raise BadIdError(error) from error

        logger.debug("resolved %r -> %s", token, id)
        return _construct(id.command, stream)

    @classmethod
    def parse_path(cls, tokens, /):
        """Parse a CommandPath (see docbot.paths.parse_path)."""
        return parse_path(cls, tokens)

    @classmethod
    def parse_path_opt(cls, tokens, /):
        return parse_path_opt(cls, tokens)

    @classmethod
    def names(cls):
        """Every identifier accepted by this type, aliases included, in declaration order."""
        return cls.__trie__.names

    @classmethod
    def help(cls, path=None, /):
        """
        Look up a help topic.

        Parameters
        - path: None for the root topic; a CommandPath, a CommandId or tokens
          naming a command (parsed with parse_path) for that command's topic.
          Paths into subcommands are followed into the nested type.

        Raises
        - ValueError when the path starts with a command of another type.
        - PathParseError subclasses when tokens do not form a valid path.
        """
        match path:
            case None:
                return cls.__topic__
            case CommandPath():
                pass
            case CommandId():
                path = CommandPath.from_id(path)
            case str() | Iterable():
                path = cls.parse_path(path)
            case _:
                raise TypeError("help() argument must be a command path, a command id or tokens")

        head = path.head()
        if head not in cls.__ids__:
            raise ValueError("command %r does not belong to %s" % (str(head), cls.__qualname__))

        if path.rest is not None:
            return head.command.__fields__[0].type.help(path.rest)
        return head.command.__topic__


class Command(_CommandBase, abstract=True):
    """
    Base class of single commands.

    Subclasses are built from their docstring (see the module documentation).
    Values expose their fields as read-only attributes and their CommandId as
    value.id.
    """
    __slots__ = ()
    __kind__ = "command"

    def __setattr__(self, name, value):
        raise AttributeError("%s values are read-only" % type(self).__qualname__)

    def __delattr__(self, name):
        raise AttributeError("%s values are read-only" % type(self).__qualname__)

    def __repr__(self):
        return "%s(%s)" % (
            type(self).__qualname__,
            ", ".join("%s=%r" % pair for pair in self.__rich_repr__()),
        )

    def __rich_repr__(self):
        for field in type(self).__fields__:
            yield field.attribute, getattr(self, field.attribute)


class CommandSet(_CommandBase, abstract=True):
    """
    Base class of command families.

    Parsing a command set returns a value of the matching member command;
    isinstance(value, TheSet) holds for values of every member.
    """
    __slots__ = ()
    __kind__ = "command-set"

    def __new__(cls, *args, **kwargs):
        raise TypeError("command set %s cannot be instantiated, parse one of its commands" % cls.__qualname__)


__all__ = (
    "CommandId",
    "CommandType",
    "Command",
    "CommandSet",
)
