"""
hubargs command layer: literal, ready-to-run invocations.

What this module provides
- Cmd: one command invocation resolved to a program name and its ordered
  argument tokens. It is what Args renders into and what the before/after
  chains hold.

Core ideas
- Immutable snapshots: a Cmd copies its tokens on construction and never
  changes afterwards, so registering it in a chain freezes the invocation as
  it was at that moment.
- Executor-agnostic: a Cmd does not spawn anything. Executors read argv (or
  name/args) and decide how to run it.
- Friendly rendering: str(cmd) is a shell-quoted line; rich renders the
  program name highlighted and the arguments dimmed by kind.

Quick start
    from hubargs.commands import Cmd

    cmd = Cmd.from_array(["git", "remote", "add", "origin", "git@host:a/b.git"])
    cmd.with_args("-f").argv  # ('git', 'remote', 'add', 'origin', 'git@host:a/b.git', '-f')
    str(Cmd("echo", "hello world"))  # "echo 'hello world'"
"""
import shlex
from collections.abc import Iterable

from rich.text import Text

from .faults import *


def _tokens(iterable, caller, /):
    tokens = tuple(iterable)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError(f"{caller}() arguments must be strings")
    return tokens


class Cmd:
    """
    A single, immutable command invocation.

    Fields
    - name: the program to run (e.g. "git", "echo").
    - args: the argument tokens, in order, without the program name.

    Notes
    - Empty-string arguments are kept verbatim; dropping them is the
      container's business when it renders its main invocation.
    - Equality and hashing are by (name, args).
    """
    __slots__ = ("_name", "_args")

    def __init__(self, name, /, *args, **options):
        if not isinstance(name, str):
            raise TypeError("Cmd() program name must be a string")
        if not name:
            trigger(EmptyCommandError(
                "cannot build a command without a program name",
                title="empty command",
                code=FaultCode.EMPTY_COMMAND,
                hint="pass the program as the first token (for example: Cmd('git', 'status'))",
                docs=getdoc(FaultCode.EMPTY_COMMAND),
            ), **options)
        self._name = name
        self._args = _tokens(args, "Cmd")

    @classmethod
    def from_array(cls, tokens, /, **options):
        """
        build a Cmd from a token sequence: the first token is the program.

        an empty sequence is a contract violation and surfaces an
        EmptyCommandError through trigger() with the given runtime options.
        """
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("from_array() argument must be an iterable of strings")
        tokens = _tokens(tokens, "from_array")
        if not tokens:
            return trigger(EmptyCommandError(
                "cannot build a command from an empty token sequence",
                title="empty command",
                code=FaultCode.EMPTY_COMMAND,
                hint="pass at least the program name (for example: before('echo', 'done'))",
                docs=getdoc(FaultCode.EMPTY_COMMAND),
            ), **options)
        return cls(*tokens, **options)

    @property
    def name(self):
        return self._name

    @property
    def args(self):
        return self._args

    @property
    def argv(self):
        """the full argument vector, program first."""
        return (self._name, *self._args)

    def with_args(self, *args):
        """return a new Cmd with args appended; self is left untouched."""
        return type(self)(self._name, *self._args, *_tokens(args, "with_args"))

    def __iter__(self):
        return iter(self.argv)

    def __len__(self):
        return len(self._args) + 1

    def __eq__(self, other):
        if not isinstance(other, Cmd):
            return NotImplemented
        return self.argv == other.argv

    def __hash__(self):
        return hash(self.argv)

    def __str__(self):
        return shlex.join(self.argv)

    def __repr__(self):
        return "cmd(%s)" % ", ".join(map(repr, self.argv))

    def __rich__(self):
        line = Text(self._name, style="bold cyan")
        for arg in self._args:
            line.append(" ")
            line.append(shlex.quote(arg), style="yellow" if arg.startswith("-") else "")
        return line

    def __rich_repr__(self):
        yield "name", self._name
        yield "args", self._args


__all__ = (
    "Cmd",
)
