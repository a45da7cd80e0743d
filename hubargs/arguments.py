r"""
hubargs parameter container.

Overview
- Args: the mutable, in-memory model of one invocation of the wrapped
  program. It holds the program (executable), the canonical global flags, the
  sub-command, the ordered parameters, the dry-run marker (noop), and two
  chains of auxiliary invocations to run before and after the main one.

- Life of an Args
  • built once per raw argv by hubargs.parser.parse(),
  • edited in place by a linear sequence of rewrite rules (read, then mutate),
  • rendered once through commands() into the list of Cmd to execute.

Positional editing
- Every index-taking method validates its index before touching anything and
  raises ParamIndexError (an IndexError) naming the index, the operation and
  the current size. Indices are never clamped and negative ones never wrap.
- insert_param() accepts 0 <= i <= len(params) - 1, plus i == 0 on an empty
  list (insert-at-head). Appending at the tail goes through append_params().
- Edits are copy-on-write splices (see hubargs.utils.splice): either the new
  parameter list is fully built and rebound, or nothing happens.

Rendering
- to_cmd(): executable, then command when non-empty, then every non-empty
  parameter verbatim. Global flags are not part of the main invocation.
- commands(): before chain, main invocation, after chain, as a fresh list.
  Rendering never mutates the container.

Quick example:
    >>> from hubargs import parse
    >>> args = parse(["push", "origin", "HEAD"])
    >>> args.insert_param(0, "--force")
    >>> args.after("echo", "pushed")
    >>> [str(cmd) for cmd in args.commands()]
    ['git push --force origin HEAD', 'echo pushed']
"""
import functools
import operator

from .commands import Cmd
from .faults import *
from .utils import *


def _chain(name, /):
    """
    read-only view over one of the auxiliary chains (self._{name}_chain).
    """
    @rename(name + "_chain")
    def getter(self):
        return tuple(getattr(self, "_" + name + "_chain"))

    return property(getter)


def _nameless(operation, /):
    return EmptyCommandError(
        "%s() needs a program to run but the executable is empty" % operation,
        title="empty executable",
        code=FaultCode.EMPTY_COMMAND,
        hint="name the program to invoke (for example: replace('git', 'status'))",
        operation=operation,
        docs=getdoc(FaultCode.EMPTY_COMMAND),
    )


def _tokens(iterable, caller, /):
    tokens = list(iterable)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError(f"{caller}() arguments must be strings")
    return tokens


class Args:
    """
    Mutable model of a single invocation of the wrapped program.

    Fields
    - executable: str: program to run (replace() swaps it).
    - flags: list[str]: canonical global flags, flag and value as separate tokens.
    - command: str: sub-command name, possibly "".
    - params: list[str]: sub-command tokens in invocation order.
    - noop: bool: dry-run marker, read by executors only.
    - before_chain / after_chain: tuple[Cmd, ...]: read-only views of the chains.

    Runtime options
    - shell: contract violations are rendered on stderr and exit(1) instead of raising.
    - fancy: render faults inside a panel.
    - colorful: style faults.
    """

    __displayable__ = (
        "executable",
        "flags",
        "command",
        "params",
        "noop",
        "before_chain",
        "after_chain",
    )

    before_chain = _chain("before")
    after_chain = _chain("after")

    def __init__(
            self,
            executable,
            /,
            command="",
            params=(),
            flags=(),
            *,
            noop=False,
            shell=False,
            fancy=False,
            colorful=False,
    ):
        if not isinstance(executable, str):
            raise TypeError("Args() executable must be a string")
        if not isinstance(command, str):
            raise TypeError("Args() command must be a string")
        if not executable:
            trigger(_nameless("Args"), shell=shell, fancy=fancy, colorful=colorful)
        self.executable = executable
        self.command = command
        self.params = _tokens(params, "Args")
        self.flags = _tokens(flags, "Args")
        self.noop = bool(noop)
        self.shell = shell
        self.fancy = fancy
        self.colorful = colorful
        self._before_chain = []
        self._after_chain = []

    def trigger(self, fault, /, **options):
        trigger(fault, **options, prog=self.executable, shell=self.shell, fancy=self.fancy, colorful=self.colorful)

    def _outbound(self, index, operation, /):
        """
        surface a ParamIndexError for an invalid position (never returns normally
        outside shell mode).
        """
        size = len(self.params)
        if size:
            hint = "valid positions for %s() are 0 to %d" % (operation, size - 1)
        else:
            hint = "there are no params; only insert_param(0, ...) and the bulk helpers apply"
        self.trigger(ParamIndexError(
            "index %r is out of bound for %s() on %d params" % (index, operation, size),
            title="index out of bound",
            code=FaultCode.PARAM_OUT_OF_BOUND,
            hint=hint,
            index=index,
            size=size,
            operation=operation,
            docs=getdoc(FaultCode.PARAM_OUT_OF_BOUND),
        ))

    def _empty(self, operation, /):
        self.trigger(ParamIndexError(
            "%s() needs at least one param but there are none" % operation,
            title="no params",
            code=FaultCode.EMPTY_PARAMS,
            hint="check is_params_empty() before reading the first or last param",
            operation=operation,
            docs=getdoc(FaultCode.EMPTY_PARAMS),
        ))

    def words(self):
        """params that are not flags (do not start with '-'), in order."""
        return [param for param in self.params if not param.startswith("-")]

    def before(self, *tokens):
        self._before_chain.append(Cmd.from_array(tokens, prog=self.executable, shell=self.shell, fancy=self.fancy, colorful=self.colorful))

    def after(self, *tokens):
        self._after_chain.append(Cmd.from_array(tokens, prog=self.executable, shell=self.shell, fancy=self.fancy, colorful=self.colorful))

    def replace(self, executable, command, /, *params):
        """
        swap the whole main invocation at once (program, sub-command and params).

        the chains are left alone: entries registered earlier still run around
        the new main invocation.
        """
        if not isinstance(executable, str) or not isinstance(command, str):
            raise TypeError("replace() executable and command must be strings")
        if not executable:
            return self.trigger(_nameless("replace"))
        params = _tokens(params, "replace")
        self.executable, self.command, self.params = executable, command, params

    def to_cmd(self):
        """
        render the main invocation: executable, command (when non-empty) and
        every non-empty param, verbatim.
        """
        args = [self.command] if self.command else []
        args.extend(param for param in self.params if param)
        return Cmd(self.executable, *args)

    def commands(self):
        """
        everything to execute, in order: before chain, main invocation, after chain.
        """
        return [*self._before_chain, self.to_cmd(), *self._after_chain]

    def get_param(self, index, /):
        if not inbounds(index, len(self.params)):
            return self._outbound(index, "get_param")
        return self.params[index]

    def first_param(self):
        if not self.params:
            return self._empty("first_param")
        return self.params[0]

    def last_param(self):
        if not self.params:
            return self._empty("last_param")
        return self.params[-1]

    def has_subcommand(self):
        """
        true iff the first param exists and is not a flag, i.e. it names a
        sub-command rather than opening a flag context.
        """
        return not self.is_params_empty() and not self.params[0].startswith("-")

    def insert_param(self, index, /, *items):
        """
        splice items in at index; params from index onward shift right.

        index 0 is always legal (even on an empty list); any other index must
        address an existing param.
        """
        if not inbounds(index, len(self.params), head=True):
            return self._outbound(index, "insert_param")
        items = _tokens(items, "insert_param")
        self.params = splice(self.params, index, index, *items)

    def remove_param(self, index, /):
        """remove and return the param at index; later params shift left."""
        if not inbounds(index, len(self.params)):
            return self._outbound(index, "remove_param")
        item = self.params[index]
        self.params = splice(self.params, index, index + 1)
        return item

    def replace_param(self, index, item, /):
        if not inbounds(index, len(self.params)):
            return self._outbound(index, "replace_param")
        if not isinstance(item, str):
            raise TypeError("replace_param() item must be a string")
        self.params[index] = item

    def index_of_param(self, param, /):
        """first index of an exact match, or -1."""
        try:
            return self.params.index(param)
        except ValueError:
            return -1

    def params_size(self):
        return len(self.params)

    def is_params_empty(self):
        return self.params_size() == 0

    def prepend_params(self, *params):
        self.params = [*_tokens(params, "prepend_params"), *self.params]

    def append_params(self, *params):
        self.params = [*self.params, *_tokens(params, "append_params")]

    def has_flags(self, *flags):
        """true iff any of the given tokens appears, exactly, among the params."""
        return any(self.index_of_param(flag) != -1 for flag in flags)

    def __len__(self):
        return self.params_size()

    def __repr__(self):
        return "args(%s)" % ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))

    def __rich_repr__(self):
        for name in type(self).__displayable__:
            yield name, getattr(self, name)


__all__ = (
    "Args",
)
