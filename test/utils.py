# python
"""
Utility helpers behavioral tests.

Scope
- Unset sentinel: singleton, falsy, printable, sealed.
- coalesce/rename/mirror contracts.
- derive_dest key derivation and ordinal labels used in fault messages.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import unittest
from unittest import TestCase

from argstream.utils import Unset, UnsetType, coalesce, derive_dest, mirror, ordinal, rename


class TestUnset(TestCase):
    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)

    def testFalsyAndPrintable(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testNotSubclassable(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})


class TestCoalesce(TestCase):
    def testUnsetResolvesToDefault(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testFalseyValuesPreserved(self):
        for value in (None, 0, "", []):
            self.assertIs(coalesce(value, "fallback"), value)


class TestRename(TestCase):
    def testDirectForm(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testDecoratorForm(self):
        @rename("decorated")
        def function():
            pass

        self.assertEqual(function.__name__, "decorated")

    def testRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(1, "name")
        with self.assertRaises(TypeError):
            rename(print, 1)
        with self.assertRaises(TypeError):
            rename()


class TestMirror(TestCase):
    def testReadOnlyDetachedCopy(self):
        class Holder:
            values = mirror("values")

            def __init__(self):
                self._values = [1, 2]

        holder = Holder()
        holder.values.append(3)
        self.assertEqual(holder.values, [1, 2])
        with self.assertRaises(AttributeError):
            holder.values = []


class TestDeriveDest(TestCase):
    def testLongestReductionWins(self):
        self.assertEqual(derive_dest(("-n", "--dry-run")), "dryrun")

    def testFirstWinsOnTies(self):
        self.assertEqual(derive_dest(("-a", "-b")), "a")

    def testCasePreserved(self):
        self.assertEqual(derive_dest(("--Output-Dir",)), "OutputDir")

    def testPositionalName(self):
        self.assertEqual(derive_dest(("files",)), "files")

    def testEmptyWhenNoAlphanumeric(self):
        self.assertEqual(derive_dest(("--",)), "")


class TestOrdinal(TestCase):
    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(3), "third")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self):
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(112), "112th")


if __name__ == "__main__":
    unittest.main()
