# python
"""
Choice set tests: construction, lookup and declaration errors.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argstream.choices import Choice, Choices
from argstream.faults import DeclarationError


class TestChoices(TestCase):
    def testLoadByLabel(self):
        levels = Choices(Choice("low", 1), ("high", 10))
        self.assertEqual(levels.load("high"), 10)
        self.assertEqual(levels.labels, ("low", "high"))
        self.assertEqual(len(levels), 2)
        self.assertIn("low", levels)
        self.assertNotIn("LOW", levels)

    def testLoadMissingLabel(self):
        with self.assertRaises(KeyError):
            Choices.of("low", "high").load("medium")

    def testAtIndex(self):
        levels = Choices.of("low", "high")
        self.assertEqual(levels.at(1), Choice("high", "high"))
        self.assertIsNone(levels.at(2))
        self.assertIsNone(levels.at(-1))

    def testOfStringifiesLabels(self):
        numbers = Choices.of(1, 2)
        self.assertEqual(numbers.labels, ("1", "2"))
        self.assertEqual(numbers.load("2"), 2)

    def testDuplicateLabelsRejected(self):
        with self.assertRaises(DeclarationError):
            Choices(("a", 1), ("a", 2))

    def testNonStringLabelRejected(self):
        with self.assertRaises(DeclarationError):
            Choices((1, 1))

    def testCoerce(self):
        levels = Choices.of("low")
        self.assertIs(Choices.coerce(levels), levels)
        self.assertEqual(Choices.coerce({"on": True}).load("on"), True)
        self.assertEqual(Choices.coerce(["a", "b"]).labels, ("a", "b"))
        with self.assertRaises(DeclarationError):
            Choices.coerce("ab")

    def testEqualityAndIteration(self):
        self.assertEqual(Choices.of("a", "b"), Choices(("a", "a"), ("b", "b")))
        self.assertEqual([choice.label for choice in Choices.of("a", "b")], ["a", "b"])
        self.assertFalse(Choices())


if __name__ == "__main__":
    unittest.main()
