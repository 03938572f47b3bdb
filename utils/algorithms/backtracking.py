"""
Array-based backtracking over a fixed number of integer-valued levels.

A candidate solution is a list of n integers in range(m). Levels are filled
from left to right; `accept(candidate, k)` decides whether the value at
index k is compatible with the values before it (values after index k are
-1). Typical uses are the eight queens puzzle and enumerating permutations.

Complexity: O(m^n) accept calls in the worst case, O(n) memory besides the
returned solutions.
"""

from collections.abc import Callable, Iterator

type Accept = Callable[[list[int], int], bool]


def _accept_all(candidate: list[int], k: int) -> bool:
    return True


def _solutions(n: int, m: int, distinct: bool, accept: Accept) -> Iterator[tuple[int, ...]]:
    """Yield the feasible solutions in lexicographic order."""
    if n == 0:
        yield ()
        return

    candidate = [-1] * n
    used = [False] * m
    k = 0
    while k >= 0:
        # Next valid value for the k-th level
        value = candidate[k] + 1
        while value < m and ((distinct and used[value]) or not _try(candidate, k, value, accept)):
            value += 1

        if value < m:
            candidate[k] = value
            if k < n - 1:
                if distinct:
                    used[value] = True
                k += 1
            else:
                yield tuple(candidate)
        else:
            # Step back to the previous level
            candidate[k] = -1
            k -= 1
            if distinct and k >= 0:
                used[candidate[k]] = False


def _try(candidate: list[int], k: int, value: int, accept: Accept) -> bool:
    candidate[k] = value
    return accept(candidate, k)


def _check_range(n: int, m: int) -> None:
    if m < n:
        raise ValueError(f"The value range is smaller than the domain: {m} < {n}")


def find_all(n: int, m: int, accept: Accept = _accept_all) -> list[tuple[int, ...]]:
    """All feasible solutions of n values in range(m)."""
    return list(_solutions(n, m, False, accept))


def find_first(n: int, m: int, accept: Accept = _accept_all) -> tuple[int, ...] | None:
    return next(_solutions(n, m, False, accept), None)


def find_all_distinct(n: int, m: int, accept: Accept = _accept_all) -> list[tuple[int, ...]]:
    """All feasible solutions of n distinct values in range(m). Requires m >= n."""
    _check_range(n, m)
    return list(_solutions(n, m, True, accept))


def find_first_distinct(
    n: int, m: int, accept: Accept = _accept_all
) -> tuple[int, ...] | None:
    _check_range(n, m)
    return next(_solutions(n, m, True, accept), None)


def find_all_permutations(n: int) -> list[tuple[int, ...]]:
    """All permutations of range(n), in lexicographic order."""
    return find_all_distinct(n, n)
