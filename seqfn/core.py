"""
seqfn.core - Polymorphic sequence operations

This module contains the sequence operations and the dispatch machinery
they share. Every operation classifies its input as an ordered list, a
character sequence or a key-value mapping, runs the implementation
registered for that representation, and returns a value of the same
representation.

Categories:
- Dispatch: operation registry, per-representation implementations
- Sequence operations: drop, drop_while, take, take_while, each, filter, concat
- Checked calls: checked() wraps an operation to return Ok / Unsupported

Unsupported input never raises: the operations return None (each simply
does nothing). Exceptions raised by caller-supplied predicates and
callbacks propagate unchanged.
"""

import functools
import logging
from typing import Any, Callable, Optional

from seqfn.config import DEFAULT_OPTIONS, MergePolicy
from seqfn.types import _MISSING, Ok, Representation, Unsupported, classify

logger = logging.getLogger(__name__)

LIST = Representation.ORDERED_LIST
CHARS = Representation.CHARACTER_SEQUENCE
MAPPING = Representation.KEY_VALUE_MAPPING

# =============================================================================
# Dispatch
# =============================================================================

# Global registries for operations
_OPERATIONS: dict[str, dict[str, Any]] = {
    # op_name: {
    #   "doc": str or None,
    # }
}

_OPERATION_IMPLS: dict[str, dict[Representation, Callable]] = {
    # op_name: {
    #   Representation.ORDERED_LIST: callable,
    #   Representation.CHARACTER_SEQUENCE: callable,
    # }
}


def register_operation(name: str, doc: Optional[str] = None) -> None:
    """Register an operation name so implementations can be attached to it."""
    _OPERATIONS[name] = {"doc": doc}
    _OPERATION_IMPLS.setdefault(name, {})


def register_impl(name: str, representation: Representation, fn: Callable) -> None:
    """
    Register the implementation of an operation for one representation.

    Args:
        name: Name of the operation
        representation: The Representation the implementation handles
        fn: Callable taking the dispatch value first, then the remaining args

    Raises:
        KeyError: If the operation was never registered
        ValueError: If representation is Representation.UNSUPPORTED
    """
    if name not in _OPERATIONS:
        raise KeyError(f"Unknown operation: {name}")
    if representation is Representation.UNSUPPORTED:
        raise ValueError("Cannot register an implementation for unsupported input")
    _OPERATION_IMPLS[name][representation] = fn


def implementations(name: str) -> frozenset:
    """Return the representations an operation has implementations for."""
    if name not in _OPERATIONS:
        raise KeyError(f"Unknown operation: {name}")
    return frozenset(_OPERATION_IMPLS[name])


def supports(name: str, value: Any) -> bool:
    """Check whether an operation has an implementation for a value."""
    return classify(value) in implementations(name)


def dispatch(name: str, target: Any, *args):
    """
    Dispatch an operation call on the representation of its target.

    Args:
        name: Name of the operation
        target: The value whose representation selects the implementation
        *args: Remaining arguments, passed after target

    Returns:
        Result of the implementation, or None if no implementation exists
        for the target's representation

    Raises:
        KeyError: If the operation is unknown
    """
    if name not in _OPERATIONS:
        raise KeyError(f"Unknown operation: {name}")

    representation = classify(target)
    fn = _OPERATION_IMPLS[name].get(representation)
    if fn is None:
        logger.debug(
            "%s: no implementation for %s (%s)",
            name,
            type(target).__name__,
            representation.value,
        )
        return None
    return fn(target, *args)


def _operation(name: str, target: str, position: int):
    """Mark a public function as the entry point of a registered operation."""

    def decorate(fn):
        register_operation(name, fn.__doc__)
        fn.__seqfn_operation__ = name
        fn.__seqfn_target__ = (target, position)
        return fn

    return decorate


# =============================================================================
# Sequence Operations
# =============================================================================


def _count(seq, n) -> int:
    # Clamp before int() so an infinite count never reaches it
    if n <= 0:
        return 0
    if n >= len(seq):
        return len(seq)
    return int(n)


@_operation("drop", target="seq", position=0)
def drop(seq, n=0):
    """Return all but the first n elements of seq.

    seq may be a list, a tuple or a string. The result is the same type of
    sequence as seq: empty if n exceeds its length, the full content if n
    is 0. Returns None for any other input.
    """
    return dispatch("drop", seq, n)


@_operation("take", target="seq", position=0)
def take(seq, n=0):
    """Return the first n elements of seq.

    seq may be a list, a tuple or a string. n <= 0 gives an empty sequence,
    n past the end gives the whole sequence. Returns None for any other input.
    """
    return dispatch("take", seq, n)


@_operation("drop-while", target="seq", position=1)
def drop_while(pred, seq):
    """Drop the longest prefix of seq whose elements satisfy pred.

    Scanning stops at the first element for which pred is falsy; the
    result starts at that element. Returns None unless seq is a list,
    tuple or string.
    """
    return dispatch("drop-while", seq, pred)


@_operation("take-while", target="seq", position=1)
def take_while(pred, seq):
    """Return the longest prefix of seq whose elements satisfy pred.

    Scanning stops at the first element for which pred is falsy. Returns
    None unless seq is a list, tuple or string.
    """
    return dispatch("take-while", seq, pred)


@_operation("each", target="seq", position=0)
def each(seq, fn):
    """Call fn for every element of seq, for side effects.

    Lists and strings call fn(element, index) in index order. Mappings call
    fn(key, value) in insertion order. Anything else is ignored.
    """
    dispatch("each", seq, fn)


@_operation("filter", target="seq", position=1)
def filter(pred, seq):
    """Return the elements of seq for which pred is falsy.

    Note the exclusion convention: an element is DROPPED when pred returns
    a truthy value. Mappings call pred(key, value) and return a new dict of
    the pairs that were kept. Returns None for unsupported input.
    """
    return dispatch("filter", seq, pred)


@_operation("concat", target="args", position=0)
def concat(*args, policy: Optional[MergePolicy] = None):
    """Return all arguments concatenated together.

    The representation of the first argument decides the result type.
    Mappings are merged into a new dict; with the default
    MergePolicy.LAST_WINS a later argument overrides an earlier one on a
    shared key, MergePolicy.FIRST_WINS keeps the earliest value.
    """
    if not args:
        return None
    if policy is None:
        policy = DEFAULT_OPTIONS.merge_policy
    return dispatch("concat", args[0], args[1:], policy)


# -----------------------------------------------------------------------------
# Implementations
# -----------------------------------------------------------------------------


def _drop_sliced(seq, n):
    return seq[_count(seq, n) :]


def _take_sliced(seq, n):
    return seq[: _count(seq, n)]


def _drop_while_indexed(seq, pred):
    for i, x in enumerate(seq):
        if not pred(x):
            return seq[i:]
    return seq[:0]


def _take_while_indexed(seq, pred):
    for i, x in enumerate(seq):
        if not pred(x):
            return seq[:i]
    return seq[:]


def _each_indexed(seq, fn):
    for i, x in enumerate(seq):
        fn(x, i)


def _each_mapping(seq, fn):
    # Snapshot so fn may mutate the mapping it is walking
    for key, val in list(seq.items()):
        fn(key, val)


def _filter_list(seq, pred):
    ret = [x for x in seq if not pred(x)]
    if isinstance(seq, tuple):
        return tuple(ret)
    return ret


def _filter_chars(seq, pred):
    return "".join(c for c in seq if not pred(c))


def _filter_mapping(seq, pred):
    ret = {}
    for key, val in list(seq.items()):
        if not pred(key, val):
            ret[key] = val
    return ret


def _concat_list(first, rest, policy):
    result = list(first)
    for coll in rest:
        if isinstance(coll, (list, tuple)):
            result.extend(coll)
        else:
            result.append(coll)
    if isinstance(first, tuple):
        return tuple(result)
    return result


def _concat_chars(first, rest, policy):
    parts = [first]
    for s in rest:
        parts.append(s if isinstance(s, str) else str(s))
    return "".join(parts)


def _concat_mapping(first, rest, policy):
    result = dict(first)
    for coll in rest:
        if policy is MergePolicy.FIRST_WINS:
            for key, val in dict(coll).items():
                result.setdefault(key, val)
        else:
            result.update(coll)
    return result


register_impl("drop", LIST, _drop_sliced)
register_impl("drop", CHARS, _drop_sliced)
register_impl("take", LIST, _take_sliced)
register_impl("take", CHARS, _take_sliced)
register_impl("drop-while", LIST, _drop_while_indexed)
register_impl("drop-while", CHARS, _drop_while_indexed)
register_impl("take-while", LIST, _take_while_indexed)
register_impl("take-while", CHARS, _take_while_indexed)
register_impl("each", LIST, _each_indexed)
register_impl("each", CHARS, _each_indexed)
register_impl("each", MAPPING, _each_mapping)
register_impl("filter", LIST, _filter_list)
register_impl("filter", CHARS, _filter_chars)
register_impl("filter", MAPPING, _filter_mapping)
register_impl("concat", LIST, _concat_list)
register_impl("concat", CHARS, _concat_chars)
register_impl("concat", MAPPING, _concat_mapping)


# =============================================================================
# Checked Calls
# =============================================================================


def checked(operation: Callable) -> Callable:
    """
    Wrap a sequence operation so it returns an explicit result.

    The wrapper takes the same arguments as the operation and returns
    Ok(value) on success, or Unsupported(...) when the operation has no
    implementation for the input's representation.

    Example:
        >>> checked(take)([1, 2, 3], 2)
        Ok([1, 2])
        >>> checked(take)(42, 2)
        Unsupported(take, int)

    Raises:
        TypeError: If operation is not one of the seqfn sequence operations
    """
    name = getattr(operation, "__seqfn_operation__", None)
    if name is None:
        raise TypeError(f"{operation!r} is not a seqfn sequence operation")
    param, position = operation.__seqfn_target__

    @functools.wraps(operation)
    def wrapper(*args, **kwargs):
        if len(args) > position:
            target = args[position]
        else:
            target = kwargs.get(param, _MISSING)
        if target is _MISSING:
            # concat() with no arguments has nothing to dispatch on
            target = None
        if not supports(name, target):
            return Unsupported(name, classify(target), target)
        return Ok(operation(*args, **kwargs))

    return wrapper


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Dispatch
    "_OPERATIONS",
    "_OPERATION_IMPLS",
    "register_operation",
    "register_impl",
    "implementations",
    "supports",
    "dispatch",
    # Sequence operations
    "drop",
    "take",
    "drop_while",
    "take_while",
    "each",
    "filter",
    "concat",
    # Checked calls
    "checked",
]
