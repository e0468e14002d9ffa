"""
Identifier trie: prefix matching of command identifiers.

Overview
- Built once from (display name, payload) entries; read-only afterwards.
- Keys are lowercased, so matching is case-insensitive.
- Every node remembers the entries reachable beneath it, which makes any
  unambiguous prefix of an identifier (`dep` for `deploy`) a valid match.
- A node that terminates an identifier holds only that identifier, so an exact
  match wins over longer identifiers sharing it as a prefix (`run` vs `runall`).
"""
import logging

from .faults import DuplicateIdentifierError, NoMatchError, AmbiguousIdError
from .utils import view

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("children", "entries", "terminal")

    def __init__(self):
        self.children = {}
        self.entries = []
        self.terminal = None


def resolve_equal(candidates, /):
    """
    Default ambiguity resolver.

    Returns the shared payload when every candidate carries the same (or an
    equal) payload, e.g. two aliases of one command; None otherwise.
    """
    _, first = candidates[0]
    if all(payload is first or payload == first for _, payload in candidates[1:]):
        return first
    return None


class Trie:
    """
    Case-insensitive prefix automaton over command identifiers.

    Parameters
    - entries: iterable of (name, payload) pairs in declaration order.

    Raises
    - DuplicateIdentifierError when two entries share a (lowercased) name.
    """

    def __init__(self, entries, /):
        self._entries = []
        self._root = _Node()

        for name, payload in entries:
            if not isinstance(name, str):
                raise TypeError("trie entry names must be strings")
            node = self._root
            for character in name.lower():
                node = node.children.setdefault(character, _Node())
            if node.terminal is not None:
                raise DuplicateIdentifierError(name)
            node.terminal = len(self._entries)
            self._entries.append((name, payload))

        self._collect(self._root)
        logger.debug("built identifier trie over %d name(s)", len(self._entries))

    def _collect(self, node):
        reachable = []
        for child in node.children.values():
            reachable.extend(self._collect(child))
        if node.terminal is not None:
            node.entries = [node.terminal]
            reachable.append(node.terminal)
        else:
            node.entries = sorted(reachable)
        return reachable

    names = property(lambda self: tuple(name for name, _ in self._entries))
    entries = view("entries")

    def __len__(self):
        return len(self._entries)

    def __contains__(self, name):
        try:
            node = self._walk(name)
        except NoMatchError:
            return False
        return node.terminal is not None

    def _walk(self, input):
        node = self._root
        for character in input.lower():
            if (node := node.children.get(character)) is None:
                raise NoMatchError(input, self.names)
        return node

    def lookup(self, input, /, resolve=resolve_equal):
        """
        Resolve user input (a full identifier or a prefix of one).

        Parameters
        - input: the token to resolve.
        - resolve: called with [(name, payload), ...] when several entries match;
          a non-None result is returned, None means the input is ambiguous.

        Raises
        - NoMatchError(input, names) when nothing matches.
        - AmbiguousIdError(names, input) when several entries match and the
          resolver declines; names follow declaration order.
        """
        if not isinstance(input, str):
            raise TypeError("lookup() argument must be a string")

        node = self._walk(input)
        match [self._entries[index] for index in node.entries]:
            case []:
                raise NoMatchError(input, self.names)
            case [(_, payload)]:
                return payload
            case candidates:
                if (payload := resolve(candidates)) is not None:
                    return payload
                raise AmbiguousIdError((name for name, _ in candidates), input)


__all__ = (
    "Trie",
    "resolve_equal",
)
