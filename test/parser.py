# python
"""
Parser facade tests.

Scope
- Declaration through add_argument, faults raised in library mode.
- Help interception: prints help to stderr and exits before parsing.
- Shell mode: faults rendered on stderr, process exits with status 1.
- Bindings applied after a successful parse.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import contextlib
import io
import sys
import unittest
from types import SimpleNamespace
from unittest import TestCase, mock

from argstream import converters
from argstream.faults import AlreadySetError, DeclarationError, MissingRequiredError, TypeMismatchError
from argstream.parser import ArgumentParser


class TestParseArgs(TestCase):
    def setUp(self):
        self.parser = ArgumentParser("tool", description="Process items.")
        self.count = self.parser.add_argument("-c", "--count", type=converters.integer, default=1)
        self.parser.add_argument("-v", "--verbose", action="store_true")
        self.parser.add_argument("files", nargs="+")

    def testParse(self):
        namespace = self.parser.parse_args(["--count", "3", "a.txt", "b.txt"])
        self.assertEqual(namespace.count, 3)
        self.assertEqual(namespace.files, ["a.txt", "b.txt"])
        self.assertIs(namespace.verbose, False)

    def testDefaultsToProcessArguments(self):
        with mock.patch.object(sys, "argv", ["tool", "-v", "x"]):
            namespace = self.parser.parse_args()
        self.assertEqual(namespace, {"verbose": True, "files": ["x"], "count": 1})

    def testFaultRaisedWithProg(self):
        with self.assertRaises(MissingRequiredError) as context:
            self.parser.parse_args([])
        self.assertEqual(context.exception.options["prog"], "tool")

    def testDeclarationFault(self):
        with self.assertRaises(DeclarationError):
            self.parser.add_argument("-c")

    def testRejectsNonStringTokens(self):
        with self.assertRaises(TypeError):
            self.parser.parse_args(["-c", 3])


class TestHelpInterception(TestCase):
    def setUp(self):
        self.parser = ArgumentParser("tool", description="Process items.")
        self.parser.add_argument("files", nargs="+")

    def testHelpPrintedAndExits(self):
        stream = io.StringIO()
        with contextlib.redirect_stderr(stream), self.assertRaises(SystemExit) as context:
            self.parser.parse_args(["a", "--help"])
        self.assertEqual(context.exception.code, 1)
        self.assertIn("usage: tool", stream.getvalue())
        self.assertIn("Process items.", stream.getvalue())

    def testShortHelp(self):
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            self.parser.parse_args(["-h"])

    def testDisabled(self):
        parser = ArgumentParser("tool", add_help=False)
        parser.add_argument("files", nargs="*")
        self.assertEqual(parser.parse_args(["-h"]), {"files": ["-h"]})

    def testDeclaredHelpIsParsed(self):
        parser = ArgumentParser("tool")
        parser.add_argument("-h", "--help", action="store_true")
        self.assertEqual(parser.parse_args(["-h"]), {"help": True})


class TestShellMode(TestCase):
    def testFaultRenderedAndExits(self):
        parser = ArgumentParser("tool", shell=True, colorful=False)
        parser.add_argument("--count")
        stream = io.StringIO()
        with contextlib.redirect_stderr(stream), self.assertRaises(SystemExit) as context:
            parser.parse_args(["--count", "1", "--count", "2"])
        self.assertEqual(context.exception.code, 1)
        self.assertIn("Value Already Set", stream.getvalue())
        self.assertIn("pass '--count' only once", stream.getvalue())

    def testLibraryModeRaises(self):
        parser = ArgumentParser("tool")
        parser.add_argument("--count")
        with self.assertRaises(AlreadySetError):
            parser.parse_args(["--count", "1", "--count", "2"])


class TestBind(TestCase):
    def setUp(self):
        self.parser = ArgumentParser("tool")
        self.count = self.parser.add_argument("--count", type=converters.integer, default=1)
        self.settings = SimpleNamespace()

    def testBindingApplied(self):
        self.parser.bind(self.count, self.settings, "count", int)
        self.parser.parse_args(["--count", "5"])
        self.assertEqual(self.settings.count, 5)

    def testBindingUsesDefault(self):
        self.parser.bind(self.count, self.settings, "count", int)
        self.parser.parse_args([])
        self.assertEqual(self.settings.count, 1)

    def testBindingTwiceRejected(self):
        self.parser.bind(self.count, self.settings, "count")
        with self.assertRaises(DeclarationError):
            self.parser.bind(self.count, self.settings, "other")

    def testBindingFaultRaised(self):
        self.parser.bind(self.count, self.settings, "count", str)
        with self.assertRaises(TypeMismatchError):
            self.parser.parse_args(["--count", "5"])


class TestData(TestCase):
    def testSubparsersAreData(self):
        parser = ArgumentParser("tool")
        child = parser.add_subparser(ArgumentParser("child"))
        self.assertEqual(parser.subparsers, [child])
        with self.assertRaises(TypeError):
            parser.add_subparser("child")

    def testFormatHelp(self):
        parser = ArgumentParser("tool")
        parser.add_argument("--name")
        self.assertIn("usage: tool [--name NAME]", parser.format_help())


if __name__ == "__main__":
    unittest.main()
