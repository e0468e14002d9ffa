"""
"Did you mean" ranking for unknown command identifiers.
"""
from rapidfuzz.distance import DamerauLevenshtein

THRESHOLD = 0.3


def similarity(a, b, /):
    """
    Normalized Damerau-Levenshtein similarity in [0, 1].

    1.0 means equal strings (two empty strings included), 0.0 means nothing in
    common.
    """
    if not a and not b:
        return 1.0
    return DamerauLevenshtein.normalized_similarity(a, b)


def did_you_mean(given, options, /, threshold=THRESHOLD):
    """
    Rank options by similarity to what the user typed.

    Each option is compared case-insensitively, truncated to one character
    more than the input, so long identifiers are not penalized for the part the
    user has not typed yet. Options scoring below threshold are dropped; the
    rest are returned best first, ties in lexicographic order.

    >>> did_you_mean("pish", ["pull", "push", "status"])
    ['push']
    """
    key = given.lower()
    scored = sorted(
        (-similarity(key, option.lower()[:len(key) + 1]), option)
        for option in options
    )
    return [option for score, option in scored if -score >= threshold]


__all__ = (
    "similarity",
    "did_you_mean",
)
