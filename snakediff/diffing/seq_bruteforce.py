# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .lcs import script_from_lcs

__all__ = ["bruteforce_edit_script"]


def bruteforce_compare_grid(N, M, same_at):
    "Brute force compute grid G[i][j] == same_at(i, j)."
    return [[bool(same_at(i, j)) for j in range(M)] for i in range(N)]


def bruteforce_llcs_grid(G):
    "Brute force compute grid R[x][y] == llcs(A[:x], B[:y]), given G[i][j] = compare(A[i], B[j])."
    N = len(G)
    M = len(G[0]) if N else 0

    R = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        for y in range(1, M+1):
            if G[x-1][y-1]:
                R[x][y] = R[x-1][y-1] + 1
            else:
                R[x][y] = max(R[x-1][y], R[x][y-1])
    return R


def bruteforce_lcs_indices(G, R):
    """Brute force compute the lcs of A and B.

    Returns two lists (A_indices, B_indices) with length == llcs(A, B),
    such that lcs(A, B) == A[A_indices] == B[B_indices].
    """
    A_indices = []
    B_indices = []
    x = len(R) - 1
    y = len(R[0]) - 1
    while x > 0 and y > 0:
        if G[x-1][y-1]:
            assert R[x][y] == R[x-1][y-1] + 1
            x -= 1
            y -= 1
            A_indices.append(x)
            B_indices.append(y)
        elif R[x][y] == R[x-1][y]:
            x -= 1
        else:
            assert R[x][y] == R[x][y-1]
            y -= 1
    A_indices.reverse()
    B_indices.reverse()
    return A_indices, B_indices


def bruteforce_llcs(N, M, same_at):
    "Length of the longest common subsequence, using the O(NM) table."
    G = bruteforce_compare_grid(N, M, same_at)
    return bruteforce_llcs_grid(G)[N][M] if N else 0


def bruteforce_edit_script(N, M, same_at):
    """Compute a minimal edit script using expensive brute force O(NM) algorithms."""
    G = bruteforce_compare_grid(N, M, same_at)
    R = bruteforce_llcs_grid(G)
    A_indices, B_indices = bruteforce_lcs_indices(G, R)
    return script_from_lcs(N, M, A_indices, B_indices)
