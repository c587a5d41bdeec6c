# python
"""
Built-in converter tests.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argstream import converters


class TestConverters(TestCase):
    def testString(self):
        self.assertEqual(converters.string(" a "), " a ")

    def testBoolean(self):
        self.assertIs(converters.boolean("TRUE"), True)
        self.assertIs(converters.boolean("false"), False)
        with self.assertRaises(ValueError):
            converters.boolean("yes")

    def testInteger(self):
        self.assertEqual(converters.integer("-42"), -42)
        with self.assertRaises(ValueError):
            converters.integer(" 1")
        with self.assertRaises(ValueError):
            converters.integer("0x10")
        with self.assertRaises(ValueError):
            converters.integer("1_000")

    def testUnsigned(self):
        self.assertEqual(converters.unsigned("7"), 7)
        with self.assertRaises(ValueError):
            converters.unsigned("-1")

    def testFloating(self):
        self.assertEqual(converters.floating("2.5"), 2.5)
        with self.assertRaises(ValueError):
            converters.floating("inf")
        with self.assertRaises(ValueError):
            converters.floating("nan")
        with self.assertRaises(ValueError):
            converters.floating("1_0.5")

    def testBounded(self):
        int8 = converters.bounded(8)
        self.assertEqual(int8.__name__, "int8")
        self.assertEqual(int8("-128"), -128)
        self.assertEqual(int8("127"), 127)
        with self.assertRaises(ValueError):
            int8("128")

        uint8 = converters.bounded(8, signed=False)
        self.assertEqual(uint8.__name__, "uint8")
        self.assertEqual(uint8("255"), 255)
        with self.assertRaises(ValueError):
            uint8("-1")

    def testBoundedIsCached(self):
        self.assertIs(converters.bounded(16), converters.bounded(16))

    def testBoundedRejectsBadWidth(self):
        with self.assertRaises(ValueError):
            converters.bounded(0)


if __name__ == "__main__":
    unittest.main()
