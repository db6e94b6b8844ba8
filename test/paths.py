"""
PathKey behavioral tests (normalization, equality, prefix matching).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from commandeer import PathKey


class TestPathKey(TestCase):
    """Behavioral tests for the registry key type."""

    def testTokensAreLowercased(self):
        self.assertEqual(tuple(PathKey(["Config", "SET"])), ("config", "set"))

    def testStringIsSplitOnWhitespace(self):
        self.assertEqual(PathKey("config  set"), PathKey(["config", "set"]))

    def testEqualityAndHashIgnoreInputCasing(self):
        self.assertEqual(PathKey(["Foo", "Bar"]), PathKey(["foo", "bar"]))
        self.assertEqual(hash(PathKey(["Foo", "Bar"])), hash(PathKey(["foo", "bar"])))
        self.assertEqual(len({PathKey("a b"), PathKey("A B")}), 1)

    def testDifferentLengthsAreDifferentKeys(self):
        self.assertNotEqual(PathKey("a"), PathKey("a b"))

    def testEmptyTokenRejected(self):
        with self.assertRaises(ValueError):
            PathKey(["config", ""])

    def testWhitespaceTokenRejected(self):
        with self.assertRaises(ValueError):
            PathKey(["config set"])

    def testNonStringTokenRejected(self):
        with self.assertRaises(TypeError):
            PathKey(["config", 1])

    def testNonIterableRejected(self):
        with self.assertRaises(TypeError):
            PathKey(42)

    def testEmptyKeyIsConstructible(self):
        self.assertEqual(len(PathKey([])), 0)
        self.assertEqual(len(PathKey("")), 0)

    def testPrefixesLongerInput(self):
        self.assertTrue(PathKey("a b").prefixes(("a", "b", "c")))

    def testPrefixesEqualInput(self):
        self.assertTrue(PathKey("a b").prefixes(("a", "b")))

    def testPrefixesIsCaseInsensitiveOnInput(self):
        self.assertTrue(PathKey("a b").prefixes(("A", "B", "c")))

    def testShorterInputIsNotPrefixed(self):
        self.assertFalse(PathKey("a b").prefixes(("a",)))

    def testMismatchIsNotPrefixed(self):
        self.assertFalse(PathKey("a b").prefixes(("a", "c")))

    def testPartialTokenIsNotPrefixed(self):
        self.assertFalse(PathKey("config").prefixes(("conf",)))

    def testStrJoinsWithSpaces(self):
        self.assertEqual(str(PathKey(["Config", "Set"])), "config set")

    def testRepr(self):
        self.assertEqual(repr(PathKey("config set")), "PathKey('config set')")


if __name__ == "__main__":
    unittest.main()
