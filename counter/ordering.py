"""
ordering.py - Key Ordering

Puts the words of a frequency table in ascending order for the report.
"""

from functools import cmp_to_key


def ordinal_compare(first, second):
    """Codepoint-wise comparison: negative, zero or positive."""
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def ordered_keys(table, compare=ordinal_compare):
    """
    Return every key of `table` once, ascending according to `compare`.

    Runtime Complexity: O(U log U) where U is the number of distinct words.
    Iterative, so the vocabulary size is not bounded by the recursion limit.
    """
    return sorted(table, key=cmp_to_key(compare))
