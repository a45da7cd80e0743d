"""
hubargs faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the core
  can surface (contract violations and degraded parsing).
- ArgsException / ArgsWarning: base types that carry message + options and
  know how to render themselves in a friendly, lowercased, and actionable way.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Kinds of faults
- contract violations (ParamIndexError, EmptyCommandError): a rewrite rule
  addressed a parameter that does not exist or registered an empty command.
  they are raised before any state changes and are never recovered from.
- degraded parsing (MalformedGlobalFlagWarning): the leading global flags
  could not be read; the parser falls back to passing everything through and
  lets the wrapped program complain.

Integration
- The container and the parser build a fault and call trigger(fault, **ctx).
- In non-shell mode, exceptions are raised and warnings are emitted through
  the warnings module; in shell mode, both are rendered via rich on stderr and
  errors terminate the process with status 1.
"""
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the package (stable identifiers).

    grouping
    - contract violations (211xx)
      • PARAM_OUT_OF_BOUND, EMPTY_PARAMS, EMPTY_COMMAND
    - degraded input (221xx)
      • MALFORMED_GLOBAL_FLAG
    """
    # --- contract violations (211xx) ---
    PARAM_OUT_OF_BOUND    = 21101
    EMPTY_PARAMS          = 21102
    EMPTY_COMMAND         = 21103

    # --- degraded input (221xx) ---
    MALFORMED_GLOBAL_FLAG = 22101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, styles, kind):
    main = __import__("__main__")
    options = fault.options

    styles = defaultdict(str, styles | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if options.get("colorful", False) else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not options.get("colorful", False):
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    prog = text(getattr(main, "__prog__", options.get("prog", "hub")), styler("prog-name"))

    code = options.get("code")
    header = Text.assemble(
        "[ ",
        prog,
        " - ",
        text(code.normalize() if code is not None else "", styler("code")),
        " | ",
        text(str(options.get("title", kind)).title(), styler(kind + "-title")),
        " ]"
    )
    message = text(fault.message, styler(kind + "-message"))
    hint = Text.assemble(text(" → ", styler("hint-arrow")), text(options.get("hint", ""), styler("hint")))

    if options.get("fancy", False):
        return Panel(Group(message, hint), title=header, title_align="left")

    return Group(header, message, hint)


class ArgsException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if self.message is not Unset else ""

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        }, "error")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ParamIndexError(ArgsException, IndexError): ...
class EmptyCommandError(ArgsException, ValueError): ...


class ArgsWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if self.message is not Unset else ""

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "warning-title": "bold #FFC2E0",  # softer pinky title for warnings

            # body
            "warning-message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        }, "warning")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MalformedGlobalFlagWarning(ArgsWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, exceptions
      are raised and warnings are emitted.

    typical options
    - shell, fancy, colorful, prog, title, code, hint, docs, and any other
      context the reporter may want to show (e.g., index/size/operation).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "ArgsException",
    "ParamIndexError",
    "EmptyCommandError",
    "ArgsWarning",
    "MalformedGlobalFlagWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
