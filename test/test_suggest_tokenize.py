"""
Suggestion ranking, tokenizer, token stream and logging setup tests.

Conventions
- Test method names follow CamelCase per project convention.
"""
import io
import logging
import unittest
from unittest import TestCase

from rich.console import Console

from docbot import logs
from docbot.suggest import did_you_mean, similarity
from docbot.tokenize import Tokens, tokenize
from docbot.trie import Trie
from docbot.utils import Unset


class TestSuggest(TestCase):
    """Behavioral tests for did_you_mean and similarity."""

    def testSimilarityBounds(self):
        self.assertEqual(similarity("", ""), 1.0)
        self.assertEqual(similarity("push", "push"), 1.0)
        self.assertEqual(similarity("abc", "xyz"), 0.0)

    def testTranspositionCountsOnce(self):
        self.assertAlmostEqual(similarity("psuh", "push"), 0.75)

    def testEditsBetweenTransposedCharacters(self):
        # unrestricted metric: "ca" -> "ac" -> "abc" is two edits
        self.assertAlmostEqual(similarity("ca", "abc"), 1 - 2 / 3)

    def testRankingAndThreshold(self):
        self.assertEqual(did_you_mean("pish", ["pull", "push", "status"]), ["push"])
        self.assertEqual(did_you_mean("xyz", ["deploy", "delete"]), [])

    def testLongOptionsAreTruncated(self):
        self.assertEqual(did_you_mean("dep", ["deployment"]), ["deployment"])

    def testTiesAreLexicographic(self):
        self.assertEqual(did_you_mean("ab", ["abd", "abc"]), ["abc", "abd"])

    def testCaseInsensitive(self):
        self.assertEqual(did_you_mean("PUSH", ["push"]), ["push"])

    def testAcceptsIterables(self):
        self.assertEqual(did_you_mean("stat", (name for name in ("status", "stash"))), ["status", "stash"])


class TestTokenize(TestCase):
    """Behavioral tests for tokenize."""

    def testWhitespace(self):
        self.assertEqual(list(tokenize("  push   main\tyes ")), ["push", "main", "yes"])

    def testQuotes(self):
        self.assertEqual(list(tokenize("say 'a b' \"c d\"")), ["say", "a b", "c d"])

    def testDoubleQuoteEscapes(self):
        self.assertEqual(list(tokenize(r'say "he said \"hi\" \\o/"')), ["say", 'he said "hi" \\o/'])

    def testEmptyQuotes(self):
        self.assertEqual(list(tokenize("set name ''")), ["set", "name", ""])

    def testNotAString(self):
        with self.assertRaises(TypeError):
            list(tokenize(["push"]))


class TestTokens(TestCase):
    """Behavioral tests for the Tokens stream."""

    def testPeekAndNext(self):
        stream = Tokens(["a", "b"])
        self.assertEqual(stream.peek(), "a")
        self.assertEqual(stream.next(), "a")
        self.assertEqual(list(stream), ["b"])
        self.assertIs(stream.next(), Unset)
        self.assertIs(stream.peek(), Unset)

    def testFused(self):
        def source():
            yield "a"
            yield "late"

        stream = Tokens(iter(["a"]))
        list(stream)
        self.assertFalse(stream)
        stream = Tokens(source())
        self.assertTrue(stream)
        self.assertEqual(next(stream), "a")
        self.assertEqual(next(stream), "late")
        with self.assertRaises(StopIteration):
            next(stream)
        with self.assertRaises(StopIteration):
            next(stream)

    def testOf(self):
        stream = Tokens(["x"])
        self.assertIs(Tokens.of(stream), stream)
        self.assertEqual(list(Tokens.of("a 'b c'")), ["a", "b c"])

    def testRejectsStrings(self):
        with self.assertRaises(TypeError):
            Tokens("push")
        with self.assertRaises(TypeError):
            Tokens(42)


class TestLogs(TestCase):
    """Behavioral tests for logging setup."""

    def tearDown(self):
        logger = logging.getLogger("docbot")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def testConfigureIsIdempotent(self):
        console = Console(file=io.StringIO(), width=120, color_system=None)
        logs.configure(logging.DEBUG, console=console)
        logger = logs.configure(logging.DEBUG, console=console)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def testDebugRecordsAreEmitted(self):
        console = Console(file=io.StringIO(), width=120, color_system=None)
        logs.configure(logging.DEBUG, console=console)
        Trie([("push", 1)])
        self.assertIn("built identifier trie", console.file.getvalue())

    def testConfigureIsExported(self):
        import docbot
        self.assertIs(docbot.configure, logs.configure)
        self.assertIn("configure", docbot.__all__)


if __name__ == "__main__":
    unittest.main()
