"""
Folding protocol: turn structured errors and help topics into output.

A folder walks an error (or a topic) and hands each part to a small leaf
method; subclasses only decide what those leaves produce. The reference
folders below produce plain English text:

    >>> SimpleFoldError().fold(MissingRequiredError("push", "branch"))
    "Missing required argument 'branch' to command 'push'"

docbot.rendering builds rich renderables on top of the same protocol.
"""
from abc import ABC, abstractmethod

from .faults import *
from .help import CommandTopic, CommandSetTopic, CustomTopic
from .suggest import did_you_mean


class FoldError(ABC):
    """
    Base folder for docbot errors.

    fold(error) dispatches to one leaf per error variant. Nested errors are
    folded first and passed on as already-folded output (bad_convert,
    subcommand); bad_id and bad_path_id default to folding their inner
    identifier error. Anything that is not a docbot parse error goes to other().
    """

    def fold(self, error, /):
        match error:
            case IdParseError():
                return self.fold_id_parse(error)
            case PathParseError():
                return self.fold_path_parse(error)
            case CommandParseError():
                return self.fold_command_parse(error)
            case _:
                return self.other(error)

    def fold_id_parse(self, error, /):
        match error:
            case NoMatchError(given=given, available=available):
                return self.no_id_match(given, available)
            case AmbiguousIdError(candidates=candidates, given=given):
                return self.ambiguous_id(candidates, given)
            case _:
                return self.other(error)

    def fold_path_parse(self, error, /):
        match error:
            case IncompletePathError(available=available):
                return self.incomplete_path(available)
            case BadPathIdError(error=inner):
                return self.bad_path_id(inner)
            case TrailingPathError(extra=extra):
                return self.trailing_path(extra)
            case _:
                return self.other(error)

    def fold_command_parse(self, error, /):
        match error:
            case NoInputError():
                return self.no_input()
            case BadIdError(error=inner):
                return self.bad_id(inner)
            case MissingRequiredError(cmd=cmd, arg=arg):
                return self.missing_required(cmd, arg)
            case BadConvertError(cmd=cmd, arg=arg, error=inner):
                return self.bad_convert(cmd, arg, self.fold(inner))
            case TrailingArgumentError(cmd=cmd, extra=extra):
                return self.trailing(cmd, extra)
            case SubcommandError(cmd=cmd, error=inner):
                return self.subcommand(cmd, self.fold_command_parse(inner))
            case _:
                return self.other(error)

    @abstractmethod
    def no_id_match(self, given, available, /): ...

    @abstractmethod
    def ambiguous_id(self, candidates, given, /): ...

    @abstractmethod
    def incomplete_path(self, available, /): ...

    def bad_path_id(self, error, /):
        return self.fold_id_parse(error)

    @abstractmethod
    def trailing_path(self, extra, /): ...

    @abstractmethod
    def no_input(self): ...

    def bad_id(self, error, /):
        return self.fold_id_parse(error)

    @abstractmethod
    def missing_required(self, cmd, arg, /): ...

    @abstractmethod
    def bad_convert(self, cmd, arg, inner, /): ...

    @abstractmethod
    def trailing(self, cmd, extra, /): ...

    @abstractmethod
    def subcommand(self, cmd, inner, /): ...

    @abstractmethod
    def other(self, error, /): ...


class FoldHelp(ABC):
    """
    Base folder for help topics.

    fold(topic) decomposes a topic into usage lines, argument usages and
    descriptions; each part is folded bottom-up and handed to its parent leaf.
    Command set topics fold their member usages in short form, command topics
    fold their usage in long form.
    """

    def fold(self, topic, /):
        match topic:
            case CommandTopic(usage=usage, desc=desc):
                return self.command_topic(self.fold_command_usage(usage, True), self.fold_command_desc(desc))
            case CommandSetTopic(summary=summary, commands=commands):
                return self.command_set_topic(summary, [self.fold_command_usage(usage, False) for usage in commands])
            case CustomTopic(text=text):
                return self.custom_topic(text)
            case _:
                raise TypeError("fold() argument must be a help topic, not %s" % type(topic).__name__)

    def fold_argument_usage(self, usage, /):
        return self.argument_usage(usage.name, usage.is_required, usage.is_rest)

    def fold_command_usage(self, usage, long, /):
        return self.command_usage(
            usage.ids,
            [self.fold_argument_usage(argument) for argument in usage.arguments],
            usage.desc,
            long,
        )

    def fold_argument_desc(self, desc, /):
        return self.argument_desc(desc.name, desc.is_required, desc.desc)

    def fold_command_desc(self, desc, /):
        return self.command_desc(desc.summary, [self.fold_argument_desc(argument) for argument in desc.args], desc.examples)

    @abstractmethod
    def command_topic(self, usage, desc, /): ...

    @abstractmethod
    def command_set_topic(self, summary, commands, /): ...

    @abstractmethod
    def custom_topic(self, text, /): ...

    @abstractmethod
    def argument_usage(self, name, is_required, is_rest, /): ...

    @abstractmethod
    def command_usage(self, ids, args, desc, long, /):
        """long hints at a detailed rendering; short usages are listed in command sets."""

    @abstractmethod
    def argument_desc(self, name, is_required, desc, /): ...

    @abstractmethod
    def command_desc(self, summary, args, examples, /): ...


def _options(options):
    return ", ".join("'%s'" % option for option in options)


class SimpleFoldError(FoldError):
    """
    Fold errors into one-line English messages.

    Parameters
    - suggest: rank "Did you mean" candidates for unknown identifiers; when
      disabled (or when nothing is close enough) every available name is listed.
    """

    def __init__(self, *, suggest=True):
        self.suggest = suggest

    def no_id_match(self, given, available, /):
        message = "Not sure what you mean by %r." % given
        if self.suggest and (suggestions := did_you_mean(given, available)):
            return message + "  Did you mean: " + _options(suggestions)
        if available:
            return message + "  Available options are: " + _options(available)
        return message

    def ambiguous_id(self, candidates, given, /):
        return "Not sure what you mean by %r.  Could be: %s" % (given, _options(candidates))

    def incomplete_path(self, available, /):
        return "Incomplete command path, expected one of: " + _options(available)

    def trailing_path(self, extra, /):
        return "Unexpected extra path argument %r" % extra

    def no_input(self):
        return ""

    def missing_required(self, cmd, arg, /):
        return "Missing required argument '%s' to command '%s'" % (arg, cmd)

    def bad_convert(self, cmd, arg, inner, /):
        return "Couldn't parse argument '%s' of command '%s': %s" % (arg, cmd, inner)

    def trailing(self, cmd, extra, /):
        return "Unexpected extra argument %r to '%s'" % (extra, cmd)

    def subcommand(self, cmd, inner, /):
        return "Subcommand '%s' failed: %s" % (cmd, inner)

    def other(self, error, /):
        return str(error) or type(error).__name__


class SimpleFoldHelp(FoldHelp):
    """Fold help topics into POSIX-flavoured plain text."""

    @staticmethod
    def command_ids(ids, /):
        """`push` for a single plain id, `(push|p)` otherwise."""
        if len(ids) != 1 or not ids[0] or any(character.isspace() for character in ids[0]):
            return "(%s)" % "|".join(ids)
        return ids[0]

    def command_topic(self, usage, desc, /):
        if usage and desc:
            return usage + "\n\n" + desc
        return usage + desc

    def command_set_topic(self, summary, commands, /):
        text = summary or ""
        if commands:
            if text:
                text += "\n\n"
            text += "COMMANDS" + "".join("\n  " + command for command in commands)
        return text

    def custom_topic(self, text, /):
        return text

    def argument_usage(self, name, is_required, is_rest, /):
        return "%s%s%s%s" % ("<" if is_required else "[", name, "..." if is_rest else "", ">" if is_required else "]")

    def command_usage(self, ids, args, desc, long, /):
        text = " ".join([self.command_ids(ids), *args])
        if long:
            return "USAGE: " + text + "\n" + desc
        return text + ": " + desc

    def argument_desc(self, name, is_required, desc, /):
        return "%s%s: %s" % (name, "" if is_required else " (optional)", desc)

    def command_desc(self, summary, args, examples, /):
        sections = []
        if summary is not None:
            sections.append("SUMMARY\n" + summary)
        if args:
            sections.append("ARGUMENTS" + "".join("\n  " + arg for arg in args))
        if examples is not None:
            sections.append("EXAMPLES\n\n" + examples)
        return "\n\n".join(sections)


__all__ = (
    "FoldError",
    "FoldHelp",
    "SimpleFoldError",
    "SimpleFoldHelp",
)
