"""
Test suite for seqfn

Contains:
- tests/test_*.py      : Unit tests for each module
- tests/fuzzing/       : Randomized law checks (python -m tests.fuzzing.fuzz)
"""
