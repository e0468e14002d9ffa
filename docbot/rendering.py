"""
Rich rendering of docbot errors and help topics.

Scope
- RichFoldError: folds parse errors into rich renderables, with a
  "[ prog — code | title ]" header, the message and an optional hint taken
  from the host's fault docs (docbot.faults.getdoc).
- RichFoldHelp: folds help topics into styled usage lines, sections and a
  commands table.
- report(error) / display(owner, path): print either to a console.

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- Define __prog__ in __main__ to show a program name in error headers.
- colorful=False strips every style; fancy=True wraps the output in a panel.
"""
import re
from collections import defaultdict

from rich.box import ROUNDED
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .faults import getdoc
from .folding import FoldError, FoldHelp, SimpleFoldHelp
from .suggest import did_you_mean

_ERROR_STYLES = {
    # header parts
    "prog-name": "bold #E6E6F0",  # near-white program name
    "code": "bold #00E5FF",  # neon cyan fault code
    "error-title": "bold #FF4DA6",  # friendly pinky title

    # body
    "error-message": "#C8C8D0",  # soft light gray message
    "token": "bold #FFD600",  # amber user input
    "command": "bold #36C5F0",  # sky-blue command and argument names
    "option": "bold #22C55E",  # green suggestions
    "hint-arrow": "#9CE19C dim",  # gentle green arrow
    "hint": "italic #9CE19C",  # gentle green hint text
}

_HELP_STYLES = {
    "usage-label": "bold #00E6FF",
    "command-id": "bold #FF4D94",
    "metavar": "bold #FFD600",
    "rest-metavar": "bold italic #FFD600",
    "description": "italic #A3A3A3",
    "section-label": "bold #FFFFFF",
    "argument-name": "bold #36C5F0",
    "argument-description": "#9CA3AF",
    "optional": "#737373",
    "example": "#E5E7EB",
    "commands-table": "#4B5563",
    "panel-title": "bold #FF4D94",
}


def _palette(defaults):
    return defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))


class _Styled:
    """Palette lookup shared by the rich folders."""

    def styler(self, style):
        return self.styles[style] if self.colorful else ""

    def text(self, fragment, style=""):
        if isinstance(fragment, Text):
            return fragment if self.colorful else Text(fragment.plain)
        return Text(str(fragment), self.styler(style))


class RichFoldError(_Styled, FoldError):
    """
    Fold errors into rich Text, and complete errors into headed renderables.

    fold(error) returns the message as Text (nested errors are folded into
    their parent's message); render(error) adds the header and hint.
    """

    def __init__(self, *, colorful=True, fancy=False, suggest=True):
        self.colorful = colorful
        self.fancy = fancy
        self.suggest = suggest
        self.styles = _palette(_ERROR_STYLES)

    def _options(self, options):
        return Text(", ").join(self.text(repr(option), "option") for option in options)

    def no_id_match(self, given, available, /):
        message = Text.assemble("Not sure what you mean by ", self.text(repr(given), "token"), ".")
        if self.suggest and (suggestions := did_you_mean(given, available)):
            return Text.assemble(message, "  Did you mean: ", self._options(suggestions))
        if available:
            return Text.assemble(message, "  Available options are: ", self._options(available))
        return message

    def ambiguous_id(self, candidates, given, /):
        return Text.assemble(
            "Not sure what you mean by ", self.text(repr(given), "token"), ".  Could be: ", self._options(candidates)
        )

    def incomplete_path(self, available, /):
        return Text.assemble("Incomplete command path, expected one of: ", self._options(available))

    def trailing_path(self, extra, /):
        return Text.assemble("Unexpected extra path argument ", self.text(repr(extra), "token"))

    def no_input(self):
        return Text("")

    def missing_required(self, cmd, arg, /):
        return Text.assemble(
            "Missing required argument ", self.text(repr(arg), "command"),
            " to command ", self.text(repr(cmd), "command"),
        )

    def bad_convert(self, cmd, arg, inner, /):
        return Text.assemble(
            "Couldn't parse argument ", self.text(repr(arg), "command"),
            " of command ", self.text(repr(cmd), "command"), ": ", inner,
        )

    def trailing(self, cmd, extra, /):
        return Text.assemble(
            "Unexpected extra argument ", self.text(repr(extra), "token"), " to ", self.text(repr(cmd), "command")
        )

    def subcommand(self, cmd, inner, /):
        return Text.assemble("Subcommand ", self.text(repr(cmd), "command"), " failed: ", inner)

    def other(self, error, /):
        return Text(str(error) or type(error).__name__)

    def render(self, error, /):
        """Headed renderable for a complete error."""
        main = __import__("__main__")

        title = re.sub(r"(?<!^)(?=[A-Z])", " ", type(error).__name__.removesuffix("Error")).lower()
        header = Text.assemble("[ ")
        if prog := getattr(main, "__prog__", None):
            header.append_text(Text.assemble(self.text(prog, "prog-name"), " — "))
        if (code := getattr(error, "code", None)) is not None:
            header.append_text(Text.assemble(self.text(code.normalize(), "code"), " | "))
        header.append_text(Text.assemble(self.text(title, "error-title"), " ]"))

        message = self.fold(error)
        message.stylize(self.styler("error-message"))

        renders = [message]
        if code is not None and (docs := getdoc(code)):
            renders.append(Text.assemble(self.text(" → ", "hint-arrow"), self.text(docs, "hint")))

        if self.fancy:
            return Panel(Group(*renders), title=header, title_align="left", box=ROUNDED)
        return Group(header, *renders)


class RichFoldHelp(_Styled, FoldHelp):
    """Fold help topics into rich renderables."""

    def __init__(self, *, colorful=True, fancy=False):
        self.colorful = colorful
        self.fancy = fancy
        self.styles = _palette(_HELP_STYLES)

    def command_topic(self, usage, desc, /):
        return Group(usage, Text(""), desc) if desc.plain else usage

    def command_set_topic(self, summary, commands, /):
        renders = []
        if summary:
            renders.append(self.text(summary, "description"))
        if commands:
            table = Table(
                show_header=False,
                title=self.text("commands", "section-label"),
                title_justify="left",
                box=ROUNDED,
                style=self.styler("commands-table"),
            )
            table.add_column("usage")
            table.add_column("description")
            for usage, desc in commands:
                table.add_row(usage, desc)
            renders.append(table)
        return Group(*renders)

    def custom_topic(self, text, /):
        return Text(text)

    def argument_usage(self, name, is_required, is_rest, /):
        return self.text(
            "%s%s%s%s" % ("<" if is_required else "[", name, "..." if is_rest else "", ">" if is_required else "]"),
            "rest-metavar" if is_rest else "metavar",
        )

    def command_usage(self, ids, args, desc, long, /):
        usage = Text(" ").join([self.text(SimpleFoldHelp.command_ids(ids), "command-id"), *args])
        if not long:
            return usage, self.text(desc, "description")
        return Text.assemble(
            self.text("usage", "usage-label"), ": ", usage, "\n", self.text(desc, "description")
        )

    def argument_desc(self, name, is_required, desc, /):
        return Text.assemble(
            "  ",
            self.text(name, "argument-name"),
            self.text(" (optional)", "optional") if not is_required else "",
            ": ",
            self.text(desc, "argument-description"),
        )

    def command_desc(self, summary, args, examples, /):
        sections = []
        if summary is not None:
            sections.append(Text.assemble(self.text("summary", "section-label"), ":\n", self.text(summary, "description")))
        if args:
            sections.append(Text.assemble(self.text("arguments", "section-label"), ":\n", Text("\n").join(args)))
        if examples is not None:
            sections.append(Text.assemble(self.text("examples", "section-label"), ":\n", self.text(examples, "example")))
        return Text("\n\n").join(sections)

    def render(self, topic, /, *, title=None):
        renderable = self.fold(topic)
        if self.fancy:
            return Panel(
                renderable,
                title=self.text("[ %s ]" % ("%s help" % title if title else "help").upper(), "panel-title"),
                title_align="left",
                box=ROUNDED,
            )
        return renderable


def report(error, /, *, console=None, colorful=True, fancy=False, suggest=True):
    """Print an error to a console (stderr by default)."""
    console = console or Console(stderr=True)
    console.print(RichFoldError(colorful=colorful, fancy=fancy, suggest=suggest).render(error))


def display(owner, path=None, /, *, console=None, colorful=True, fancy=False):
    """Print the help topic of owner (a command type) for path."""
    console = console or Console()
    console.print(RichFoldHelp(colorful=colorful, fancy=fancy).render(owner.help(path), title=owner.__typename__))


__all__ = (
    "RichFoldError",
    "RichFoldHelp",
    "report",
    "display",
)
