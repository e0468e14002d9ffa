"""
Folding protocol tests (plain text and rich renderers).

Scope
- Validate the English messages of SimpleFoldError, suggestions included.
- Validate the POSIX-like layout of SimpleFoldHelp.
- Validate that the rich renderers print the same information.

Conventions
- Test method names follow CamelCase per project convention.
"""
import io
import unittest
from unittest import TestCase

from rich.console import Console

from docbot import Argument, Command, CommandSet
from docbot.faults import (
    AmbiguousIdError,
    BadConvertError,
    BadIdError,
    BadPathIdError,
    IncompletePathError,
    MissingRequiredError,
    NoInputError,
    NoMatchError,
    SubcommandError,
    TrailingArgumentError,
    TrailingPathError,
)
from docbot.folding import SimpleFoldError, SimpleFoldHelp
from docbot.help import CustomTopic
from docbot.rendering import RichFoldError, RichFoldHelp, display, report


class Git(CommandSet):
    """Version control, the tiny edition."""

    class Push(Command):
        """
        `push <branch> [--force]` Push a branch.

        # Description
        Sends local commits upstream.

        # Arguments
        branch: The branch to push.
        --force: Anything non-empty forces the push.

        # Examples
        push main
        push main yes
        """
        branch = Argument()
        force = Argument()

    class Status(Command):
        """`(status|st)` Show the working tree status."""

    class Add(Command):
        """
        `add <paths...>` Stage files.

        # Arguments
        paths: Files to stage.
        """
        paths = Argument()


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestSimpleFoldError(TestCase):
    """Behavioral tests for SimpleFoldError messages."""

    def setUp(self):
        self.folder = SimpleFoldError()

    def testNoMatchWithSuggestion(self):
        error = BadIdError(NoMatchError("pish", ("push", "pull", "status")))
        self.assertEqual(self.folder.fold(error), "Not sure what you mean by 'pish'.  Did you mean: 'push'")

    def testNoMatchWithoutSuggestion(self):
        error = NoMatchError("xyz", ("deploy", "delete"))
        self.assertEqual(
            self.folder.fold(error),
            "Not sure what you mean by 'xyz'.  Available options are: 'deploy', 'delete'",
        )

    def testSuggestionsDisabled(self):
        error = NoMatchError("pish", ("push", "pull"))
        self.assertEqual(
            SimpleFoldError(suggest=False).fold(error),
            "Not sure what you mean by 'pish'.  Available options are: 'push', 'pull'",
        )

    def testAmbiguous(self):
        error = AmbiguousIdError(("deploy", "delete"), "de")
        self.assertEqual(self.folder.fold(error), "Not sure what you mean by 'de'.  Could be: 'deploy', 'delete'")

    def testPathErrors(self):
        self.assertEqual(
            self.folder.fold(IncompletePathError(("add", "remove"))),
            "Incomplete command path, expected one of: 'add', 'remove'",
        )
        self.assertEqual(self.folder.fold(TrailingPathError("x")), "Unexpected extra path argument 'x'")
        self.assertEqual(
            self.folder.fold(BadPathIdError(AmbiguousIdError(("add", "all"), "a"))),
            "Not sure what you mean by 'a'.  Could be: 'add', 'all'",
        )

    def testCommandErrors(self):
        self.assertEqual(self.folder.fold(NoInputError()), "")
        self.assertEqual(
            self.folder.fold(MissingRequiredError("push", "branch")),
            "Missing required argument 'branch' to command 'push'",
        )
        self.assertEqual(
            self.folder.fold(TrailingArgumentError("push", "c")),
            "Unexpected extra argument 'c' to 'push'",
        )

    def testNestedErrors(self):
        self.assertEqual(
            self.folder.fold(BadConvertError("deploy", "replicas", ValueError("not a number"))),
            "Couldn't parse argument 'replicas' of command 'deploy': not a number",
        )
        self.assertEqual(
            self.folder.fold(SubcommandError("remote", MissingRequiredError("add", "url"))),
            "Subcommand 'remote' failed: Missing required argument 'url' to command 'add'",
        )

    def testParsedError(self):
        try:
            Git.parse(["push"])
        except MissingRequiredError as error:
            self.assertEqual(self.folder.fold(error), "Missing required argument 'branch' to command 'push'")
        else:
            self.fail("parse did not raise")

    def testForeignError(self):
        self.assertEqual(self.folder.fold(KeyError("k")), "'k'")


class TestSimpleFoldHelp(TestCase):
    """Behavioral tests for SimpleFoldHelp layout."""

    def setUp(self):
        self.folder = SimpleFoldHelp()

    def testCommandTopic(self):
        self.assertEqual(self.folder.fold(Git.help(Git.Push.id)), "\n".join((
            "USAGE: push <branch> [--force]",
            "Push a branch.",
            "",
            "SUMMARY",
            "Sends local commits upstream.",
            "",
            "ARGUMENTS",
            "  branch: The branch to push.",
            "  --force (optional): Anything non-empty forces the push.",
            "",
            "EXAMPLES",
            "",
            "push main",
            "push main yes",
        )))

    def testCommandTopicWithoutDescription(self):
        self.assertEqual(self.folder.fold(Git.help(Git.Status.id)), "USAGE: (status|st)\nShow the working tree status.")

    def testCommandSetTopic(self):
        self.assertEqual(self.folder.fold(Git.help()), "\n".join((
            "Version control, the tiny edition.",
            "",
            "COMMANDS",
            "  push <branch> [--force]: Push a branch.",
            "  (status|st): Show the working tree status.",
            "  add <paths...>: Stage files.",
        )))

    def testCustomTopic(self):
        self.assertEqual(self.folder.fold(CustomTopic("Ask me anything.")), "Ask me anything.")

    def testCommandIds(self):
        self.assertEqual(SimpleFoldHelp.command_ids(("push",)), "push")
        self.assertEqual(SimpleFoldHelp.command_ids(("push", "p")), "(push|p)")
        self.assertEqual(SimpleFoldHelp.command_ids(("",)), "()")

    def testNotATopic(self):
        with self.assertRaises(TypeError):
            self.folder.fold("push")


class TestRichRendering(TestCase):
    """Smoke tests for the rich renderers."""

    def testErrorRender(self):
        console = _console()
        console.print(RichFoldError(colorful=False).render(MissingRequiredError("push", "branch")))
        output = console.file.getvalue()
        self.assertIn("11123", output)
        self.assertIn("missing required", output)
        self.assertIn("Missing required argument 'branch' to command 'push'", output)

    def testErrorIsRenderable(self):
        console = _console()
        console.print(AmbiguousIdError(("deploy", "delete"), "de"))
        self.assertIn("Could be: 'deploy', 'delete'", console.file.getvalue())

    def testFancyReport(self):
        console = _console()
        report(BadIdError(NoMatchError("pish", ("push",))), console=console, fancy=True)
        self.assertIn("Did you mean: 'push'", console.file.getvalue())

    def testHelpDisplay(self):
        console = _console()
        display(Git, console=console, colorful=False)
        output = console.file.getvalue()
        self.assertIn("Version control, the tiny edition.", output)
        self.assertIn("push <branch> [--force]", output)
        self.assertIn("(status|st)", output)

    def testCommandHelpDisplay(self):
        console = _console()
        display(Git, ["push"], console=console, fancy=True)
        output = console.file.getvalue()
        self.assertIn("Push a branch.", output)
        self.assertIn("--force (optional)", output)
        self.assertIn("push main yes", output)

    def testCustomTopic(self):
        console = _console()
        console.print(RichFoldHelp().render(CustomTopic("Ask me anything.")))
        self.assertIn("Ask me anything.", console.file.getvalue())


if __name__ == "__main__":
    unittest.main()
