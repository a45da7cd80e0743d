"""
hubargs global-flag parser.

What this module provides
- GLOBAL_FLAGS: the closed table of global flags the wrapped program accepts
  before its sub-command, each mapped to a GlobalFlag(kind, target, passthrough).
- parse(argv): split a raw argument vector into canonical global flags and the
  leftover sub-command + params, and return a ready-to-edit Args.

Scanning
- Only leading tokens are inspected. Recognition stops at the first token
  that is not in GLOBAL_FLAGS (or at a bare '--', which is consumed); that
  token and everything after it are leftover, untouched and in order.
- Accepted spellings
  • switches: --bare, --bare=true|false (also 1/0, t/f, any case)
  • strings:  --git-dir PATH, --git-dir=PATH
  • config:   -c key=value, -ckey=value, -c=key=value (repeatable; a later
    value for the same key wins)

Degradation
- A string flag or -c without a value, a -c value without a key, or a
  switch with a non-boolean inline value makes the leading flags unreadable.
  The parser then discards everything it collected and passes the whole
  input through as leftover, emitting MalformedGlobalFlagWarning, so the
  wrapped program reports the problem in its own words.

Re-serialization
- Passthrough flags are emitted in table order: -c pairs, --no-replace-objects,
  --bare, --exec-path, --git-dir, --work-tree. String flags are emitted only
  when non-empty. --noop only sets Args.noop; --version and --help prepend
  "version" and "help" to the leftover (help ends up first when both are set).
- The order of several -c pairs follows first appearance of each key, but
  callers must not rely on it.

Quick example:
    >>> args = parse(["-c", "a=1", "--bare", "status"])
    >>> args.flags, args.command, args.params
    (['-c', 'a=1', '--bare'], 'status', [])
"""
import shlex
import sys
from collections import deque, namedtuple
from collections.abc import Iterable
from enum import Enum
from types import MappingProxyType

from .arguments import Args
from .faults import *
from .utils import *


class FlagKind(Enum):
    SWITCH = "switch"
    STRING = "string"
    CONFIG = "config"


GlobalFlag = namedtuple("GlobalFlag", ("kind", "target", "passthrough"))

GLOBAL_FLAGS = MappingProxyType({
    "--noop": GlobalFlag(FlagKind.SWITCH, "noop", False),
    "-c": GlobalFlag(FlagKind.CONFIG, "config", True),
    "--no-replace-objects": GlobalFlag(FlagKind.SWITCH, "no_replace_objects", True),
    "--bare": GlobalFlag(FlagKind.SWITCH, "bare", True),
    "--version": GlobalFlag(FlagKind.SWITCH, "version", False),
    "--help": GlobalFlag(FlagKind.SWITCH, "help", False),
    "--exec-path": GlobalFlag(FlagKind.STRING, "exec_path", True),
    "--git-dir": GlobalFlag(FlagKind.STRING, "git_dir", True),
    "--work-tree": GlobalFlag(FlagKind.STRING, "work_tree", True),
})

_BOOLEANS = MappingProxyType({
    "1": True, "t": True, "true": True,
    "0": False, "f": False, "false": False,
})


class _MalformedFlag(Exception):
    def __init__(self, message, hint, /):
        super().__init__(message)
        self.message = message
        self.hint = hint


def _defaults():
    state = {}
    for flag in GLOBAL_FLAGS.values():
        match flag.kind:
            case FlagKind.SWITCH:
                state[flag.target] = False
            case FlagKind.STRING:
                state[flag.target] = ""
            case FlagKind.CONFIG:
                state[flag.target] = {}
    return state


def _split(token):
    """
    split a token into (name, inline value or None) for table lookup.
    """
    if token.startswith("--"):
        name, separator, value = token.partition("=")
        return name, value if separator else None
    if token.startswith("-c") and len(token) > 2:
        value = token[2:]
        return "-c", value[1:] if value.startswith("=") else value
    return token, None


def _scan(tokens):
    """
    consume leading global flags from tokens (a deque) and return the state.

    raises _MalformedFlag when a recognized flag cannot be read; tokens are
    then in an unspecified state and callers should start over from the input.
    """
    state = _defaults()

    while tokens:
        if tokens[0] == "--":
            tokens.popleft()
            break

        name, value = _split(tokens[0])
        try:
            flag = GLOBAL_FLAGS[name]
        except KeyError:
            break
        tokens.popleft()

        match flag.kind:
            case FlagKind.SWITCH:
                if value is None:
                    state[flag.target] = True
                    continue
                try:
                    state[flag.target] = _BOOLEANS[value.lower()]
                except KeyError:
                    raise _MalformedFlag(
                        "flag %r expects a boolean but got %r" % (name, value),
                        "use %s alone, or %s=true / %s=false" % (name, name, name),
                    ) from None
            case FlagKind.STRING:
                if value is None:
                    if not tokens:
                        raise _MalformedFlag(
                            "flag %r needs a value" % name,
                            "pass it after a space or inline (for example: %s=<path>)" % name,
                        )
                    value = tokens.popleft()
                state[flag.target] = value
            case FlagKind.CONFIG:
                if value is None:
                    if not tokens:
                        raise _MalformedFlag(
                            "flag %r needs a key=value pair" % name,
                            "pass the setting after it (for example: -c user.name=octocat)",
                        )
                    value = tokens.popleft()
                key, separator, setting = value.partition("=")
                if not separator or not key:
                    raise _MalformedFlag(
                        "flag %r expects key=value but got %r" % (name, value),
                        "write the setting as key=value (for example: -c core.pager=cat)",
                    )
                state[flag.target][key] = setting

    return state


def _serialize(state):
    flags = []
    for name, flag in GLOBAL_FLAGS.items():
        if not flag.passthrough:
            continue
        value = state[flag.target]
        match flag.kind:
            case FlagKind.SWITCH if value:
                flags.append(name)
            case FlagKind.STRING if value:
                flags.extend((name, value))
            case FlagKind.CONFIG:
                for key, setting in value.items():
                    flags.extend((name, f"{key}={setting}"))
    return flags


def _normalize(argv):
    if argv is Unset:
        return sys.argv[1:]
    if isinstance(argv, str):
        return shlex.split(argv)
    if isinstance(argv, Iterable):
        tokens = list(argv)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("parse() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("parse() argument must be a string or an iterable of strings")


def parse(argv=Unset, /, *, executable="git", shell=False, fancy=False, colorful=False):
    """
    build an Args from a raw argument vector.

    Parameters
    - argv:
      • Unset: read tokens from sys.argv[1:].
      • str: shell-like string; split via shlex.split.
      • Iterable[str]: tokens used as-is (no trimming, empty tokens kept).
    - executable: program the main invocation runs (default "git").
    - shell/fancy/colorful: runtime options handed to the Args and used to
      surface the degradation warning.

    Returns
    - Args with executable, canonical flags, command, params and noop filled
      in, and empty before/after chains.

    Raises
    - TypeError: when argv is not Unset/str/Iterable[str].
    """
    tokens = _normalize(argv)
    leftover = deque(tokens)

    try:
        state = _scan(leftover)
    except _MalformedFlag as fault:
        trigger(MalformedGlobalFlagWarning(
            fault.message + "; passing the input through unchanged",
            title="malformed global flag",
            code=FaultCode.MALFORMED_GLOBAL_FLAG,
            hint=fault.hint,
            input=tuple(tokens),
            docs=getdoc(FaultCode.MALFORMED_GLOBAL_FLAG),
        ), prog=executable, shell=shell, fancy=fancy, colorful=colorful)
        state = _defaults()
        leftover = deque(tokens)

    if state["version"]:
        leftover.appendleft("version")
    if state["help"]:
        leftover.appendleft("help")

    command = leftover.popleft() if leftover else ""

    return Args(
        executable,
        command,
        leftover,
        _serialize(state),
        noop=state["noop"],
        shell=shell,
        fancy=fancy,
        colorful=colorful,
    )


__all__ = (
    "FlagKind",
    "GlobalFlag",
    "GLOBAL_FLAGS",
    "parse",
)
