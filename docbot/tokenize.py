"""
Token input for the parsers.

- tokenize(text): split a raw chat/terminal line into tokens, with minimal
  quoting support.
- Tokens: the forward-only token stream every parse call reads from.
"""
import re
from collections.abc import Iterable, Iterator

from .utils import Unset

_TOKEN = re.compile(r"""\s*(?:([^'"\s]\S*)|'([^']*)'|"((?:[^"\\]|\\.)*)")""")
_ESCAPE = re.compile(r"\\(.)")


def tokenize(text, /):
    """
    Split text on whitespace, honouring quotes.

    - 'single quotes' keep their content verbatim.
    - "double quotes" allow backslash escapes (\\" and \\\\).
    - Unbalanced quote characters are skipped.

    >>> list(tokenize('say "hello \\\\"world\\\\"" \\'a b\\''))
    ['say', 'hello "world"', 'a b']
    """
    if not isinstance(text, str):
        raise TypeError("tokenize() argument must be a string")
    for match in _TOKEN.finditer(text):
        if match[3] is not None:
            yield _ESCAPE.sub(r"\1", match[3])
        elif match[2] is not None:
            yield match[2]
        else:
            yield match[1]


class Tokens(Iterator):
    """
    Forward-only, fused stream of string tokens with one token of lookahead.

    Once exhausted the stream stays exhausted; next(stream) raises
    StopIteration and stream.next()/stream.peek() return Unset.
    """
    __slots__ = ("_iterator", "_peeked", "_done")

    def __init__(self, tokens=(), /):
        if isinstance(tokens, str):
            raise TypeError("Tokens() argument must be an iterable of strings, not a string")
        if not isinstance(tokens, Iterable):
            raise TypeError("Tokens() argument must be an iterable of strings")
        self._iterator = iter(tokens)
        self._peeked = Unset
        self._done = False

    @classmethod
    def of(cls, tokens, /):
        """Reuse a stream, tokenize a string, or wrap any other iterable."""
        if isinstance(tokens, cls):
            return tokens
        if isinstance(tokens, str):
            return cls(tokenize(tokens))
        return cls(tokens)

    def _pull(self):
        if self._done:
            return Unset
        try:
            token = next(self._iterator)
        except StopIteration:
            self._done = True
            return Unset
        if not isinstance(token, str):
            raise TypeError("command tokens must be strings, not %s" % type(token).__name__)
        return token

    def peek(self):
        if self._peeked is Unset:
            self._peeked = self._pull()
        return self._peeked

    def next(self):
        """Pop the next token, or return Unset when the stream is exhausted."""
        if (token := self._peeked) is not Unset:
            self._peeked = Unset
            return token
        return self._pull()

    def __next__(self):
        if (token := self.next()) is Unset:
            raise StopIteration
        return token

    def __iter__(self):
        return self

    def __bool__(self):
        return self.peek() is not Unset

    def __repr__(self):
        return "Tokens(%s)" % ("exhausted" if self._done and self._peeked is Unset else "...")


__all__ = (
    "tokenize",
    "Tokens",
)
