"""Fuzz testing suite for seqfn."""

from .fuzz import Fuzzer, FuzzRunner, random_text, random_value, run_suite

__all__ = ["Fuzzer", "FuzzRunner", "random_text", "random_value", "run_suite"]
