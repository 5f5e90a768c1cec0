"""Levenshtein edit distance between section titles.

Standard dynamic-programming formulation, keeping only two rows of the
table since titles are compared pairwise and the alignment itself is never
needed.
"""

from __future__ import annotations


def levenshtein(a: str, b: str, limit: int | None = None) -> int:
    """Return the minimum number of single-character edits turning *a* into *b*.

    Parameters
    ----------
    a, b:
        Strings to compare.
    limit:
        Optional early-exit bound.  When every cell of a row is already
        ``>= limit`` the true distance cannot drop below it, and ``limit``
        is returned instead of the exact value.

    Returns
    -------
    int
        The edit distance (insertions, deletions and substitutions all
        cost 1), or *limit* if the distance is at least *limit*.

    Examples
    --------
    >>> levenshtein("kitten", "sitting")
    3
    >>> levenshtein("Overview", "Overveiw")
    2
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a) if limit is None else min(len(a), limit)
    if limit is not None and len(a) - len(b) >= limit:
        return limit

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            )
        if limit is not None and min(current) >= limit:
            return limit
        previous = current

    distance = previous[-1]
    return distance if limit is None else min(distance, limit)
