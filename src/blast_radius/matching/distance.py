"""Levenshtein edit distance.

Unit cost for insertion, deletion and substitution:

    D[i][0] = i,  D[0][j] = j
    D[i][j] = min(D[i-1][j] + 1, D[i][j-1] + 1, D[i-1][j-1] + [a_i != b_j])

Rows are filled with numpy. The left-to-right insertion term is a running
minimum: with c[j] the best of the deletion and substitution terms,
D[i][j] - j = min(c[j] - j, D[i][j-1] - (j-1)), i.e. a cumulative minimum
of (c - arange) shifted back by arange.
"""

import numpy as np


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings. Symmetric; any strings are valid."""
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    table[0, :] = np.arange(n + 1)
    table[:, 0] = np.arange(m + 1)

    b_codes = np.fromiter((ord(c) for c in b), dtype=np.int64, count=n)
    offsets = np.arange(n + 1)

    for i in range(1, m + 1):
        prev = table[i - 1]
        cost = (b_codes != ord(a[i - 1])).astype(np.int64)

        candidates = np.empty(n + 1, dtype=np.int64)
        candidates[0] = i
        candidates[1:] = np.minimum(prev[1:] + 1, prev[:-1] + cost)

        table[i] = np.minimum.accumulate(candidates - offsets) + offsets

    return int(table[m, n])
