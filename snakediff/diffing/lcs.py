# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import Operation, SequenceDiffBuilder


def lcs_indices_from_script(script):
    """Compute the indices of the common subsequence matched by an edit script.

    Returns two lists (A_indices, B_indices), one entry per skip in script.
    """
    A_indices = []
    B_indices = []
    # x,y = how many symbols we have consumed from A and B
    x = 0
    y = 0
    for op in script:
        if op == Operation.SKIP:
            A_indices.append(x)
            B_indices.append(y)
            x += 1
            y += 1
        elif op == Operation.REMOVE:
            x += 1
        elif op == Operation.INSERT:
            y += 1
    return A_indices, B_indices


def script_from_lcs(N, M, A_indices, B_indices):
    """Compute the edit script for sequences of length N and M, given indices of their lcs.

    Within each gap between matched elements, removals come before insertions.
    """
    assert len(A_indices) == len(B_indices)
    script = []
    x = 0
    y = 0
    for i, j in zip(A_indices, B_indices):
        script.extend([Operation.REMOVE] * (i - x))
        script.extend([Operation.INSERT] * (j - y))
        script.append(Operation.SKIP)
        x = i + 1
        y = j + 1
    script.extend([Operation.REMOVE] * (N - x))
    script.extend([Operation.INSERT] * (M - y))
    return script


def diff_from_lcs(A, B, A_indices, B_indices):
    """Compute the diff of A and B, given indices of their lcs."""
    di = SequenceDiffBuilder()
    N, M = len(A), len(B)
    llcs = len(A_indices)
    assert llcs == len(B_indices)
    # x,y = how many symbols we have consumed from A and B
    x = 0
    y = 0
    for r in range(llcs):
        i = A_indices[r]
        j = B_indices[r]
        if i > x:
            di.removerange(x, i-x)
        if j > y:
            di.addrange(x, B[y:j])
        x = i + 1
        y = j + 1
    if x < N:
        di.removerange(x, N-x)
    if y < M:
        di.addrange(x, B[y:M])
    return di.validated()
