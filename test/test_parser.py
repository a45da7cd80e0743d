"""
Parser module behavioral tests (global flags, leftover split, degradation).

Scope
- Validate recognition and canonical re-serialization of every global flag.
- Validate that recognition stops at the first non-global token.
- Validate the version/help prepending and the command/params split.
- Validate graceful degradation on malformed global flags.
- Validate prompt normalization (list, string, sys.argv).

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (parse, GLOBAL_FLAGS, MalformedGlobalFlagWarning).
"""

from __future__ import annotations

import sys
import unittest
import warnings
from unittest import TestCase
from unittest.mock import patch

from hubargs import parse, GLOBAL_FLAGS, FlagKind, MalformedGlobalFlagWarning, Args


class TestParseGlobalFlags(TestCase):
    """Behavioral tests for the recognized global flags."""

    def testConfigAndBareBeforeStatus(self):
        args = parse(["-c", "a=1", "--bare", "status"])
        self.assertIsInstance(args, Args)
        self.assertEqual(args.flags, ["-c", "a=1", "--bare"])
        self.assertEqual(args.command, "status")
        self.assertEqual(args.params, [])
        self.assertFalse(args.noop)
        self.assertEqual(args.executable, "git")
        self.assertEqual(args.before_chain, ())
        self.assertEqual(args.after_chain, ())

    def testNoopIsConsumed(self):
        args = parse(["--noop", "push", "origin"])
        self.assertTrue(args.noop)
        self.assertEqual(args.flags, [])
        self.assertEqual((args.command, args.params), ("push", ["origin"]))

    def testStringFlagsSpacedAndInline(self):
        args = parse(["--git-dir", "/tmp/repo.git", "--work-tree=/tmp/wt", "--exec-path", "/usr/libexec", "log"])
        self.assertEqual(args.flags, [
            "--exec-path", "/usr/libexec",
            "--git-dir", "/tmp/repo.git",
            "--work-tree", "/tmp/wt",
        ])
        self.assertEqual(args.command, "log")

    def testEmptyStringFlagIsNotEmitted(self):
        args = parse(["--git-dir=", "status"])
        self.assertEqual(args.flags, [])
        self.assertEqual(args.command, "status")

    def testCanonicalOrder(self):
        args = parse(["--work-tree", "wt", "--bare", "--no-replace-objects", "-c", "x=y", "fetch"])
        self.assertEqual(args.flags, ["-c", "x=y", "--no-replace-objects", "--bare", "--work-tree", "wt"])

    def testConfigAttachedForms(self):
        args = parse(["-cuser.name=octocat", "-c=core.pager=cat", "status"])
        self.assertEqual(sorted(zip(args.flags[::2], args.flags[1::2])), [
            ("-c", "core.pager=cat"),
            ("-c", "user.name=octocat"),
        ])

    def testConfigRepeatedKeyKeepsLastValue(self):
        args = parse(["-c", "a=1", "-c", "a=2", "status"])
        self.assertEqual(args.flags, ["-c", "a=2"])

    def testConfigValueMayContainEquals(self):
        args = parse(["-c", "alias.x=log --format=%h", "x"])
        self.assertEqual(args.flags, ["-c", "alias.x=log --format=%h"])

    def testConfigPairsAreAllEmitted(self):
        args = parse(["-c", "a=1", "-c", "b=2", "-c", "c=", "status"])
        pairs = set(zip(args.flags[::2], args.flags[1::2]))
        self.assertEqual(pairs, {("-c", "a=1"), ("-c", "b=2"), ("-c", "c=")})

    def testSwitchInlineBooleans(self):
        args = parse(["--bare=true", "--no-replace-objects=FALSE", "status"])
        self.assertEqual(args.flags, ["--bare"])

    def testTableIsClosed(self):
        self.assertEqual(set(GLOBAL_FLAGS), {
            "--noop", "-c", "--no-replace-objects", "--bare", "--version",
            "--help", "--exec-path", "--git-dir", "--work-tree",
        })
        self.assertIs(GLOBAL_FLAGS["-c"].kind, FlagKind.CONFIG)
        self.assertFalse(GLOBAL_FLAGS["--noop"].passthrough)


class TestParseLeftover(TestCase):
    """Behavioral tests for the command/params split."""

    def testEmptyInput(self):
        args = parse([])
        self.assertEqual((args.command, args.params, args.flags), ("", [], []))

    def testVersion(self):
        args = parse(["--version"])
        self.assertEqual(args.command, "version")
        self.assertEqual(args.params, [])

    def testHelpAndVersion(self):
        args = parse(["--help", "--version"])
        self.assertEqual(args.command, "help")
        self.assertEqual(args.params, ["version"])

    def testHelpBeforeCommand(self):
        args = parse(["--help", "commit"])
        self.assertEqual((args.command, args.params), ("help", ["commit"]))

    def testRecognitionStopsAtFirstNonGlobalToken(self):
        args = parse(["--bare", "log", "--bare", "-c", "a=1", "--oneline"])
        self.assertEqual(args.flags, ["--bare"])
        self.assertEqual(args.command, "log")
        self.assertEqual(args.params, ["--bare", "-c", "a=1", "--oneline"])

    def testUnknownLeadingFlagIsLeftover(self):
        args = parse(["--paginate", "--bare", "log"])
        self.assertEqual(args.flags, [])
        self.assertEqual(args.command, "--paginate")
        self.assertEqual(args.params, ["--bare", "log"])

    def testDoubleDashEndsRecognition(self):
        args = parse(["--bare", "--", "--help"])
        self.assertEqual(args.flags, ["--bare"])
        self.assertEqual(args.command, "--help")
        self.assertEqual(args.params, [])

    def testEmptyTokensAreKept(self):
        args = parse(["commit", "", "-m", ""])
        self.assertEqual(args.params, ["", "-m", ""])

    def testCustomExecutable(self):
        self.assertEqual(parse(["status"], executable="/usr/bin/git").to_cmd().argv, ("/usr/bin/git", "status"))


class TestParseDegradation(TestCase):
    """Behavioral tests for malformed global flags."""

    def assertPassthrough(self, argv):
        with self.assertWarns(MalformedGlobalFlagWarning):
            args = parse(argv)
        self.assertEqual(args.flags, [])
        self.assertFalse(args.noop)
        self.assertEqual([args.command, *args.params], argv)
        return args

    def testMissingStringValue(self):
        self.assertPassthrough(["--bare", "--git-dir"])

    def testMissingConfigValue(self):
        self.assertPassthrough(["-c"])

    def testConfigWithoutEquals(self):
        self.assertPassthrough(["--noop", "-c", "novalue", "status"])

    def testConfigWithoutKey(self):
        self.assertPassthrough(["-c", "=1", "status"])

    def testBadSwitchValue(self):
        self.assertPassthrough(["--help", "--bare=maybe", "status"])

    def testDegradationDropsVersionAndHelp(self):
        args = self.assertPassthrough(["--version", "--help", "--work-tree"])
        self.assertEqual(args.command, "--version")

    def testWarningCarriesInput(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            parse(["-c"])
        self.assertEqual(len(caught), 1)
        self.assertEqual(caught[0].message.options["input"], ("-c",))


class TestParsePrompt(TestCase):
    """Behavioral tests for argv normalization."""

    def testStringPromptIsShellSplit(self):
        args = parse("-c 'user.name=Mona Lisa' commit -m 'first commit'")
        self.assertEqual(args.flags, ["-c", "user.name=Mona Lisa"])
        self.assertEqual(args.params, ["-m", "first commit"])

    def testDefaultReadsSysArgv(self):
        with patch.object(sys, "argv", ["hub", "--bare", "status"]):
            args = parse()
        self.assertEqual((args.flags, args.command), (["--bare"], "status"))

    def testInputIsNotMutated(self):
        argv = ["--version", "--bare"]
        parse(argv)
        self.assertEqual(argv, ["--version", "--bare"])

    def testNonStringTokensRejected(self):
        with self.assertRaises(TypeError):
            parse(["status", 1])

    def testNonIterableRejected(self):
        with self.assertRaises(TypeError):
            parse(42)


if __name__ == "__main__":
    unittest.main()
