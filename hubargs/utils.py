"""
hubargs utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the container, the parser and the faults.
- Public-but-internal leaning: stable enough for consumers, designed primarily
  to support the arguments/parser layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to wrappers for clean tracebacks.

- inbounds(index, size, head=False) / splice(sequence, start, stop, *items)
  • The bounds check and the copy-on-write splice behind every positional edit
    of a parameter list. Checking and splicing are split so callers can refuse
    an edit before anything is built.

Quick examples
    >>> inbounds(0, 0, head=True)
    True
    >>> splice(["a", "b", "c"], 1, 2, "x", "y")
    ['a', 'x', 'y', 'c']
"""
import builtins
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    This is used when None is a legitimate user value, but the API needs a way
    to distinguish “not provided” from “provided as None”. A single instance,
    Unset, is exposed for use as the default in internal parameters.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when UnsetType appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable
    - @rename(name)
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def inbounds(index, size, /, *, head=False):
    """
    tell whether a position addresses an existing element of a sequence.

    rules
    - valid iff 0 <= index < size; negative indices are never wrapped.
    - head=True additionally accepts index 0 on any size (insert-at-head is
      always legal, even on an empty sequence).
    - booleans are not positions.
    """
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    if head and index == 0:
        return True
    return 0 <= index < size


def splice(sequence, start, stop, /, *items):
    """
    return a new list where sequence[start:stop] is replaced by items.

    the source sequence is left untouched, so an edit is applied by a single
    rebinding once the new list is complete. bounds are the caller's job
    (see inbounds()); this helper never clamps on their behalf beyond what
    slicing does.

    examples
    - splice(["a", "b"], 0, 0, "x")      -> ["x", "a", "b"]   (insert)
    - splice(["a", "b"], 1, 2)           -> ["a"]             (remove)
    - splice(["a", "b"], 0, 1, "z")      -> ["z", "b"]        (replace)
    """
    return [*sequence[:start], *items, *sequence[stop:]]


__all__ = (
    # Functions
    "rename",
    "inbounds",
    "splice",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
