"""
Docbot utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the usage/docs parsers, the command layer and
  the renderers.

Overview
- UnsetType / Unset
  • Singleton sentinel for "value not provided" without conflating it with None.
  • Falsey, printable as "Unset", non-subclassable.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables.

- view("attr")
  • Read-only property exposing a private backing field as an immutable snapshot.

- relax(text)
  • Collapse a multi-line block into a single line.

- paragraphs(lines, preserve=False)
  • Split documentation lines into blank-line separated paragraphs.

Stability and contract
- Names not in __all__ are internal and may change without notice.
"""
import builtins
import functools
import re
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable
    - rename(name)           -> decorator
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def view(name, /):
    """
    Define a read-only property over the backing attribute "_{name}".

    Containers are handed out as immutable snapshots (tuple, MappingProxyType,
    frozenset) so the published state of a built object cannot be mutated
    through its public API. Named tuples are returned unchanged.
    """
    if not isinstance(name, str):
        raise TypeError("view() argument must be a string")

    @rename(name)
    def getter(self):
        value = getattr(self, "_" + name)
        if isinstance(value, tuple) or isinstance(value, (str, bytes)):
            return value
        if isinstance(value, Sequence):
            return tuple(value)
        if isinstance(value, Mapping):
            return MappingProxyType(value)
        if isinstance(value, Set):
            return frozenset(value)
        return value

    return property(getter)


def relax(text, /):
    """
    Collapse line breaks (and the whitespace around them) into single spaces.

    >>> relax("  first line\\n    second line  ")
    'first line second line'
    """
    return re.sub(r"\s*\n\s*", " ", text.strip())


def paragraphs(lines, /, *, preserve=False):
    """
    Yield the blank-line separated paragraphs of an iterable of lines.

    When preserve is true every line of a paragraph is kept, each followed by a
    newline; otherwise the stripped lines are joined with single spaces.
    Consecutive blank lines never produce empty paragraphs.
    """
    buffer = []
    for line in lines:
        if line.strip():
            buffer.append(line)
            continue
        if buffer:
            yield _join(buffer, preserve)
            buffer = []
    if buffer:
        yield _join(buffer, preserve)


def _join(lines, preserve):
    if preserve:
        return "".join(line + "\n" for line in lines)
    return " ".join(line.strip() for line in lines)


Unset = UnsetType()
"""
Internal sentinel for "not provided".

Notes
- Singleton: there is only one Unset instance.
- Falsey, but not equivalent to None or 0.
"""


__all__ = (
    # Functions
    "rename",
    "view",
    "relax",
    "paragraphs",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
