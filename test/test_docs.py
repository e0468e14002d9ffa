"""
Documentation parser tests (sections, argument entries, cross-validation).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from docbot.docs import (
    ArgumentDoc,
    CommandSetDocs,
    parse_argument_lines,
    parse_command_docs,
    parse_command_set_docs,
)
from docbot.faults import DocumentationError, UsageSyntaxError
from docbot.usage import parse_usage_line

DEPLOY = """
    `deploy <target> [region] [flags...]` Deploy a build.

    # Description
    Uploads the current build and
    switches traffic over.

    # Arguments
    flags: Extra feature flags.
    target: Environment to deploy to.
    region: Region override, defaults to the
        environment's primary region.

    # Examples
    deploy staging
      deploy prod eu-west-1
"""


class TestCommandDocs(TestCase):
    """Behavioral tests for parse_command_docs."""

    def testFullDocstring(self):
        docs = parse_command_docs(DEPLOY)
        self.assertEqual(docs.usage.canonical, "deploy")
        self.assertEqual(docs.summary, "Uploads the current build and switches traffic over.")
        self.assertEqual(docs.args, (
            ArgumentDoc("target", True, "Environment to deploy to."),
            ArgumentDoc("region", False, "Region override, defaults to the environment's primary region."),
            ArgumentDoc("flags", False, "Extra feature flags."),
        ))
        self.assertEqual(docs.examples, "deploy staging\n  deploy prod eu-west-1")

    def testDescriptionMirrorsDocs(self):
        docs = parse_command_docs(DEPLOY)
        self.assertEqual(docs.desc.summary, docs.summary)
        self.assertEqual(docs.desc.args, docs.args)
        self.assertEqual(docs.desc.examples, docs.examples)

    def testColonHeadersAndAliases(self):
        docs = parse_command_docs("""
            `(push|p) <branch>` Push a branch.

            Parameters:
            branch: The branch to push.

            Overview:
            Sends commits upstream.
        """)
        self.assertEqual(docs.usage.ids, ("push", "p"))
        self.assertEqual(docs.summary, "Sends commits upstream.")
        self.assertEqual(docs.args, (ArgumentDoc("branch", True, "The branch to push."),))

    def testNoArgumentsNeedNoSection(self):
        docs = parse_command_docs("`status` Show the status.")
        self.assertEqual(docs.args, ())
        self.assertIsNone(docs.summary)
        self.assertIsNone(docs.examples)

    def testUnknownSectionsAreIgnored(self):
        docs = parse_command_docs("`status` Show the status.\n\n# Notes\nNothing to see.")
        self.assertEqual(docs.args, ())

    def testMissingDocstring(self):
        with self.assertRaisesRegex(DocumentationError, "missing doc comment for command"):
            parse_command_docs(None)
        with self.assertRaisesRegex(DocumentationError, "missing doc comment for command"):
            parse_command_docs("   \n  ")

    def testMissingDescription(self):
        with self.assertRaisesRegex(DocumentationError, "missing command description"):
            parse_command_docs("`status`")

    def testParagraphWithoutHeader(self):
        with self.assertRaisesRegex(DocumentationError, "paragraph missing header"):
            parse_command_docs("`status` Show the status.\n\nJust some prose.")

    def testRepeatedSection(self):
        with self.assertRaisesRegex(DocumentationError, "multiple summary sections found"):
            parse_command_docs("`status` Show.\n\n# Summary\nOne.\n\n# Description\nTwo.")

    def testUndocumentedArgument(self):
        with self.assertRaises(DocumentationError) as context:
            parse_command_docs("`push <branch> [--force]` Push.\n\n# Arguments\nbranch: The branch.")
        self.assertEqual(context.exception.expected, ("branch", "--force"))
        self.assertEqual(context.exception.found, ("branch",))

    def testArgumentsWithoutSection(self):
        with self.assertRaises(DocumentationError) as context:
            parse_command_docs("`push <branch>` Push.")
        self.assertEqual(context.exception.expected, ("branch",))
        self.assertEqual(context.exception.found, ())

    def testInvalidUsage(self):
        with self.assertRaises(UsageSyntaxError):
            parse_command_docs("`push <branch> oops` Push.")


class TestArgumentLines(TestCase):
    """Behavioral tests for parse_argument_lines."""

    def setUp(self):
        self.usage = parse_usage_line("copy <source> [target]", "Copy.")

    def testExtraArgument(self):
        with self.assertRaises(DocumentationError) as context:
            parse_argument_lines(self.usage, "source: From.\ntarget: To.\nmode: How.\n")
        self.assertEqual(context.exception.expected, ("source", "target"))
        self.assertEqual(context.exception.found, ("source", "target", "mode"))

    def testDuplicateArgument(self):
        with self.assertRaises(DocumentationError):
            parse_argument_lines(self.usage, "source: From.\nsource: Again.\ntarget: To.\n")

    def testUnparsableSection(self):
        with self.assertRaisesRegex(DocumentationError, "unexpected argument description format"):
            parse_argument_lines(self.usage, "nothing that looks like an entry\n")


class TestCommandSetDocs(TestCase):
    """Behavioral tests for parse_command_set_docs."""

    def testMissingDocstring(self):
        self.assertEqual(parse_command_set_docs(None), CommandSetDocs(None))

    def testParagraphsAreCollapsed(self):
        docs = parse_command_set_docs("""
            Version control,
            the tiny edition.

            Supports pushing.
        """)
        self.assertEqual(docs.summary, "Version control, the tiny edition.\nSupports pushing.")


if __name__ == "__main__":
    unittest.main()
