"""
seqfn - Functional helpers over sequences and mappings

This package contains small, independent functional-programming helpers.
Everything is importable from the top level.

Submodules:
- types: Representation, classify, Ok / Unsupported results
- core: drop, take, drop_while, take_while, each, filter, concat, checked
- predicate: not_, is_even, is_odd, is_digit, is_alphabetic
- transformer: identity, to_upper, to_lower, trim, stringify
- reducer: add, sub, mul, div, mod
- combinators: apply, partial, compose, cond
- json: JSON encoder for seqfn values
- config: SeqOptions and MergePolicy

The catalogs are also available as namespaces:

    from seqfn import filter, predicate

    filter(predicate.is_even, [1, 2, 3, 4])  # => [1, 3]
"""

import logging

from seqfn import predicate, reducer, transformer

# Re-export combinators
from seqfn.combinators import apply, compose, cond, partial

# Re-export config
from seqfn.config import DEFAULT_OPTIONS, ConfigError, MergePolicy, SeqOptions

# Re-export core functions
from seqfn.core import (
    checked,
    concat,
    dispatch,
    drop,
    drop_while,
    each,
    filter,
    implementations,
    register_impl,
    register_operation,
    supports,
    take,
    take_while,
)

# Re-export JSON utilities
from seqfn.json import SeqJSONEncoder
from seqfn.json import dumps as json_dumps
from seqfn.json import loads as json_loads

# Re-export catalog functions
from seqfn.predicate import is_alphabetic, is_digit, is_even, is_odd, not_
from seqfn.reducer import add, div, mod, mul, sub
from seqfn.transformer import identity, stringify, to_lower, to_upper, trim

# Re-export types
from seqfn.types import (
    Ok,
    Representation,
    Unsupported,
    UnsupportedRepresentation,
    classify,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Types
    "Representation",
    "classify",
    "Ok",
    "Unsupported",
    "UnsupportedRepresentation",
    # Config
    "ConfigError",
    "MergePolicy",
    "SeqOptions",
    "DEFAULT_OPTIONS",
    # Dispatch
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
    "checked",
    # Catalogs
    "predicate",
    "transformer",
    "reducer",
    "not_",
    "is_even",
    "is_odd",
    "is_digit",
    "is_alphabetic",
    "identity",
    "to_upper",
    "to_lower",
    "trim",
    "stringify",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    # Combinators
    "apply",
    "partial",
    "compose",
    "cond",
    # JSON
    "SeqJSONEncoder",
    "json_dumps",
    "json_loads",
]
