"""
Argument documentation parser.

A command docstring is made of blank-line separated paragraphs:

    `deploy <target> [region] [flags...]` Deploy a build.

    # Description
    Uploads the current build and switches traffic over once it is healthy.

    # Arguments
    target: Environment to deploy to.
    region: Region override, defaults to the
        environment's primary region.
    flags: Extra feature flags.

    # Examples
    deploy staging
    deploy prod eu-west-1

The first paragraph is the usage paragraph (docbot.usage). Every following
paragraph starts with a header, written either `# Header` or `Header:`:

- description / overview / summary: the long summary, collapsed to one line.
- arguments / parameters: `name: text` entries, validated against the usage.
- examples: kept verbatim (common indentation removed).

Other headers are ignored. Each known section may appear at most once.
"""
import inspect
import logging
import re
import textwrap
from typing import NamedTuple

from .faults import DocumentationError
from .usage import parse_usage
from .utils import relax, paragraphs

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"^\s*(?:#\s*(\S+)|(\w+)\s*:)\s*\n")
_ARGUMENT = re.compile(r"^\s*([^\n\s](?:[^:\n]*[^:\n\s])?)\s*:\s*", re.MULTILINE)

_SUMMARY_HEADERS = frozenset({"description", "overview", "summary"})
_ARGUMENT_HEADERS = frozenset({"arguments", "parameters"})
_EXAMPLE_HEADERS = frozenset({"examples"})


class ArgumentDoc(NamedTuple):
    name: str
    is_required: bool
    desc: str


class CommandDesc(NamedTuple):
    """Long-form description of a command, as shown by detailed help."""
    summary: str | None
    args: tuple
    examples: str | None


class CommandDocs(NamedTuple):
    usage: object
    summary: str | None
    args: tuple
    examples: str | None

    @property
    def desc(self):
        return CommandDesc(self.summary, self.args, self.examples)


class CommandSetDocs(NamedTuple):
    summary: str | None


def parse_argument_lines(usage, text, /):
    """
    Parse an arguments section and cross-validate it against a usage.

    Entries have the form `name: description`; a name runs up to the first
    colon of its line and the description continues until the next entry.
    Descriptions are collapsed to single lines.

    Returns
    - tuple[ArgumentDoc, ...] in usage order, tagged with the required flag.

    Raises
    - DocumentationError on a duplicate entry, an unparsable non-empty block,
      or when the documented names differ from the declared ones. Mismatch
      errors carry both name sets (error.expected, error.found).
    """
    matches = list(_ARGUMENT.finditer(text))
    found = {}

    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        if match[1] in found:
            raise DocumentationError("duplicate argument description %r" % match[1])
        found[match[1]] = relax(text[match.end():end])

    if text.strip() and not found:
        raise DocumentationError("unexpected argument description format")

    expected = usage.arguments
    if set(found) != {argument.name for argument in expected}:
        names = tuple(argument.name for argument in expected)
        raise DocumentationError(
            "mismatched argument descriptions for %r (expected %s, found %s)" % (
                usage.canonical, list(names), list(found)
            ),
            expected=names,
            found=found,
        )

    return tuple(ArgumentDoc(argument.name, argument.is_required, found[argument.name]) for argument in expected)


def _header(paragraph):
    match = _HEADER.match(paragraph)
    if not match:
        raise DocumentationError("paragraph missing header: %r" % paragraph.strip().splitlines()[0])
    return (match[1] or match[2]).lower(), paragraph[match.end():]


def parse_command_docs(text, /):
    """
    Parse a command docstring into CommandDocs.

    Raises
    - DocumentationError when the docstring is missing, when the short
      description is empty, when a section is repeated or malformed, or when
      the argument documentation does not match the usage.
    - UsageSyntaxError (from docbot.usage) for an invalid usage paragraph.
    """
    if text is None or not text.strip():
        raise DocumentationError("missing doc comment for command")

    blocks = paragraphs(inspect.cleandoc(text).splitlines(), preserve=True)
    usage = parse_usage(next(blocks))

    summary = args = examples = None

    for paragraph in blocks:
        header, body = _header(paragraph)
        if header in _SUMMARY_HEADERS:
            if summary is not None:
                raise DocumentationError("multiple summary sections found")
            summary = relax(body)
        elif header in _ARGUMENT_HEADERS:
            if args is not None:
                raise DocumentationError("multiple arguments sections found")
            args = parse_argument_lines(usage, body)
        elif header in _EXAMPLE_HEADERS:
            if examples is not None:
                raise DocumentationError("multiple examples sections found")
            examples = textwrap.dedent(body).strip("\n")
        else:
            logger.debug("ignoring unknown section %r of %r", header, usage.canonical)

    if not usage.desc.strip():
        raise DocumentationError("missing command description for %r" % usage.canonical)

    if args is None:
        args = parse_argument_lines(usage, "")

    return CommandDocs(usage, summary, args, examples)


def parse_command_set_docs(text, /):
    """
    Parse a command-set docstring into CommandSetDocs.

    Paragraphs are collapsed and joined with newlines; a missing or blank
    docstring yields an empty summary (None).
    """
    if text is None:
        return CommandSetDocs(None)
    summary = "\n".join(paragraphs(inspect.cleandoc(text).splitlines())).strip()
    return CommandSetDocs(summary or None)


__all__ = (
    "ArgumentDoc",
    "CommandDesc",
    "CommandDocs",
    "CommandSetDocs",
    "parse_argument_lines",
    "parse_command_docs",
    "parse_command_set_docs",
)
