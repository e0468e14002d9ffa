"""
Command field declarations.

A command class declares one Argument per usage argument, in usage order:

    class Deploy(Command):
        \"\"\"
        `deploy <target> [region] [flags...]` Deploy a build.
        ...
        \"\"\"
        target = Argument()
        region = Argument()
        flags = Argument(int)

The usage line decides the arity (FieldMode) of each field; the declaration
decides how its tokens are converted:

- type: a callable applied to each token (str by default). Any exception it
  raises becomes a BadConvertError.
- path=True: the (rest) field is parsed as a command path of the given
  command type instead of being converted token by token.
- subcommand commands (class keyword subcommand=True) delegate their single
  rest field to the nested command type's parser.
"""
import re
from enum import Enum
from typing import NamedTuple, final

from .faults import InvalidStructureError


class FieldMode(Enum):
    """Arity of a field, as declared by its usage argument."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    REST_REQUIRED = "rest-required"
    REST_OPTIONAL = "rest-optional"

    @property
    def required(self):
        return self in (FieldMode.REQUIRED, FieldMode.REST_REQUIRED)

    @property
    def rest(self):
        return self in (FieldMode.REST_REQUIRED, FieldMode.REST_OPTIONAL)

    @classmethod
    def of(cls, argument, /):
        """FieldMode of an ArgumentUsage."""
        match argument.is_required, argument.is_rest:
            case True, False:
                return cls.REQUIRED
            case False, False:
                return cls.OPTIONAL
            case True, True:
                return cls.REST_REQUIRED
            case False, True:
                return cls.REST_OPTIONAL


@final
class Argument:
    """
    Declaration of one command field.

    Parameters
    - type: token converter (defaults to str); for path fields and subcommand
      fields, the nested command type.
    - path: parse the field as a command path of type.
    """
    __slots__ = ("_type", "_path")

    def __init__(self, type=str, /, *, path=False):
        if not callable(type):
            raise TypeError("Argument() type must be callable")
        self._type = type
        self._path = bool(path)

    type = property(lambda self: self._type)
    path = property(lambda self: self._path)

    def __repr__(self):
        return "Argument(%s%s)" % (
            getattr(self._type, "__qualname__", repr(self._type)),
            ", path=True" if self._path else "",
        )


class Field(NamedTuple):
    """
    A resolved field: a usage argument bound to its declaration.

    - name: the usage name (`--force`), used in diagnostics.
    - attribute: the attribute the value is stored under (`force`).
    """
    name: str
    attribute: str
    mode: FieldMode
    type: object
    path: bool
    subcommand: bool


def attribute_name(name, /):
    """Python attribute name for a usage argument name (`--dry-run` -> `dry_run`)."""
    return re.sub(r"\W", "_", name.lstrip("-"))


def resolve_fields(owner, usage, declarations, /, *, subcommand=False):
    """
    Bind the usage arguments of a command to its Argument declarations.

    Parameters
    - owner: command name used in error messages.
    - usage: the command's CommandUsage.
    - declarations: mapping of attribute name -> Argument, in declaration order.
    - subcommand: whether the command delegates to a nested command type.

    Returns
    - tuple[Field, ...] in usage order.

    Raises
    - InvalidStructureError when the declarations do not line up with the
      usage, when a path field is not a rest field or when a subcommand
      command is not exactly one non-path rest field.
    """
    arguments = usage.arguments

    if len(arguments) != len(declarations):
        raise InvalidStructureError(
            "command %r declares %d field(s) but its usage has %d argument(s)" % (
                owner, len(declarations), len(arguments)
            )
        )

    fields = []
    for argument in arguments:
        attribute = attribute_name(argument.name)
        if attribute not in declarations:
            raise InvalidStructureError(
                "command %r has no field %r for argument %r" % (owner, attribute, argument.name)
            )
        declaration = declarations[attribute]
        mode = FieldMode.of(argument)
        if declaration.path and not mode.rest:
            raise InvalidStructureError("path field %r of %r must be a rest argument" % (attribute, owner))
        fields.append(Field(argument.name, attribute, mode, declaration.type, declaration.path, subcommand))

    if subcommand:
        match fields:
            case [field] if field.mode.rest and not field.path:
                if not hasattr(field.type, "parse"):
                    raise InvalidStructureError(
                        "subcommand field %r of %r must be a command type" % (field.attribute, owner)
                    )
            case _:
                raise InvalidStructureError(
                    "subcommand %r must have exactly one non-path rest argument" % owner
                )

    for field in fields:
        if field.path and not hasattr(field.type, "parse_path"):
            raise InvalidStructureError("path field %r of %r must be a command type" % (field.attribute, owner))

    return tuple(fields)


__all__ = (
    "FieldMode",
    "Argument",
    "Field",
    "attribute_name",
    "resolve_fields",
)
