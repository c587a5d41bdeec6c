# python
"""
Action dispatch table tests.

Scope
- Name resolution at declaration time (case-insensitive, "-" or "_").
- store: scalar vs list commit, AlreadySetError on a second write.
- store_true/store_false: single synthetic value contract.
- append: accumulation across invocations.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argstream.actions import Action
from argstream.arguments import Argument
from argstream.faults import AlreadySetError, DeclarationError
from argstream.namespace import Namespace


class TestResolve(TestCase):
    def testNames(self):
        self.assertIs(Action.resolve("store"), Action.STORE)
        self.assertIs(Action.resolve("Store-True"), Action.STORE_TRUE)
        self.assertIs(Action.resolve(" append "), Action.APPEND)
        self.assertIs(Action.resolve(Action.STORE_FALSE), Action.STORE_FALSE)

    def testUnknownName(self):
        with self.assertRaises(DeclarationError):
            Action.resolve("count")


class TestStore(TestCase):
    def testScalarForExactlyOne(self):
        argument = Argument("--name")
        namespace = Namespace()
        Action.STORE(argument, namespace, ["x"])
        self.assertEqual(namespace, {"name": "x"})

    def testListForOtherArities(self):
        argument = Argument("--pair", nargs=2)
        namespace = Namespace()
        Action.STORE(argument, namespace, ["a", "b"])
        self.assertEqual(namespace, {"pair": ["a", "b"]})

        argument = Argument("--maybe", nargs="?")
        namespace = Namespace()
        Action.STORE(argument, namespace, ["a"])
        self.assertEqual(namespace, {"maybe": ["a"]})

    def testSecondWriteFails(self):
        argument = Argument("--name")
        namespace = Namespace(name="x")
        with self.assertRaises(AlreadySetError) as context:
            Action.STORE(argument, namespace, ["y"])
        self.assertEqual(context.exception.options["value"], "x")
        self.assertEqual(namespace, {"name": "x"})


class TestStoreConstant(TestCase):
    def testCommitsSyntheticValue(self):
        argument = Argument("--verbose", action="store_true")
        namespace = Namespace()
        Action.STORE_TRUE(argument, namespace, [argument.const])
        self.assertIs(namespace["verbose"], True)

    def testRejectsOtherCounts(self):
        argument = Argument("--quiet", action="store_false")
        with self.assertRaises(TypeError):
            Action.STORE_FALSE(argument, Namespace(), [])
        with self.assertRaises(TypeError):
            Action.STORE_FALSE(argument, Namespace(), [False, False])


class TestAppend(TestCase):
    def testAccumulates(self):
        argument = Argument("--tag", action="append")
        namespace = Namespace()
        Action.APPEND(argument, namespace, ["a"])
        Action.APPEND(argument, namespace, ["b", "c"])
        self.assertEqual(namespace, {"tag": ["a", "b", "c"]})

    def testPromotesExistingScalar(self):
        argument = Argument("--tag", action="append")
        namespace = Namespace(tag="a")
        Action.APPEND(argument, namespace, ["b"])
        self.assertEqual(namespace["tag"], ["a", "b"])


if __name__ == "__main__":
    unittest.main()
