# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from snakediff import patch, Operation
from snakediff.diff_format import is_valid_diff, is_valid_edit_script, DiffOp

import snakediff.diffing.sequences
from snakediff.diffing.lcs import diff_from_lcs, lcs_indices_from_script, script_from_lcs
from snakediff.diffing.seq_bruteforce import (
    bruteforce_compare_grid, bruteforce_llcs_grid, bruteforce_lcs_indices,
    bruteforce_edit_script,
)
from snakediff.diffing.sequences import (
    diff_sequence, edit_script, diff_strings_by_char, diff_strings_linewise,
    compare_casefold,
)


def check_diff_sequence_and_patch(a, b):
    d = diff_sequence(a, b)
    assert is_valid_diff(d)
    assert patch(a, d) == b
    d = diff_sequence(b, a)
    assert is_valid_diff(d)
    assert patch(b, d) == a


def test_diff_sequence(algorithm):
    a = """\
    def f(a, b):
        c = a * b
        return c

    def g(x):
        y = x**2
        return y
    """.splitlines()

    b = []
    check_diff_sequence_and_patch(a, b)

    for i in range(len(a)+1):
        for j in range(len(a)+1):
            for k in range(len(a)+1):
                for l in range(len(a)+1):
                    b = a[i:j] + a[k:l]
                    check_diff_sequence_and_patch(a, b)


def test_diff_sequence_entries():
    d = diff_sequence([1, 2, 3], [1, 4, 3])
    assert d == [
        {"op": DiffOp.ADDRANGE, "key": 1, "valuelist": [4]},
        {"op": DiffOp.REMOVERANGE, "key": 1, "length": 1},
    ]


def test_edit_script_algorithms_agree():
    examples = [
        ("ABCABBA", "CBABAC"),
        ("xaxcxabc", "abcy"),
        ("", "abc"),
        ("abc", ""),
        ("kitten", "sitting"),
    ]
    for a, b in examples:
        scripts = []
        for alg in snakediff.diffing.sequences.legal_diff_sequence_algorithms:
            old = snakediff.diffing.sequences.diff_sequence_algorithm
            snakediff.diffing.sequences.diff_sequence_algorithm = alg
            try:
                scripts.append(edit_script(a, b))
            finally:
                snakediff.diffing.sequences.diff_sequence_algorithm = old
        for script in scripts:
            assert is_valid_edit_script(script, len(a), len(b))
        assert len({s.count(Operation.SKIP) for s in scripts}) == 1


def test_edit_script_unknown_algorithm():
    old = snakediff.diffing.sequences.diff_sequence_algorithm
    snakediff.diffing.sequences.diff_sequence_algorithm = "myers"
    try:
        with pytest.raises(RuntimeError):
            edit_script("a", "b")
    finally:
        snakediff.diffing.sequences.diff_sequence_algorithm = old


def test_diff_sequence_bruteforce_pieces():
    examples = [
        ([], []),
        ([1], [1]),
        ([2, 1], [1, 2]),
        ([1, 2, 3, 4, 1, 2], [3, 4, 2, 3]),
        (list("abcab"), list("ayb")),
        (list("xaxcxabc"), list("abcy")),
        ]
    for a, b in examples:
        same_at = lambda i, j: a[i] == b[j]
        G = bruteforce_compare_grid(len(a), len(b), same_at)
        assert all(G[i][j] == (a[i] == b[j]) for i in range(len(a)) for j in range(len(b)))

        R = bruteforce_llcs_grid(G)
        for i in range(len(a)):
            for j in range(len(b)):
                assert R[i+1][j+1] >= R[i][j]
                assert R[i+1][j+1] - R[i][j] <= 1
        llcs = R[len(a)][len(b)] if a else 0

        A_indices, B_indices = bruteforce_lcs_indices(G, R)
        assert len(A_indices) == len(B_indices) == llcs
        assert all(a[A_indices[r]] == b[B_indices[r]] for r in range(llcs))

        d = diff_from_lcs(a, b, A_indices, B_indices)
        assert is_valid_diff(d)
        assert patch(a, d) == b

        script = bruteforce_edit_script(len(a), len(b), same_at)
        assert lcs_indices_from_script(script) == (A_indices, B_indices)


def test_script_from_lcs():
    script = script_from_lcs(4, 3, [1, 3], [0, 2])
    assert script == [
        Operation.REMOVE, Operation.SKIP,
        Operation.REMOVE, Operation.INSERT, Operation.SKIP,
    ]
    assert lcs_indices_from_script(script) == ([1, 3], [0, 2])
    assert script_from_lcs(2, 1, [], []) == [Operation.REMOVE] * 2 + [Operation.INSERT]


def test_diff_strings_by_char():
    assert diff_strings_by_char("abc", "abc") == []
    a = "If you continue to work on it"
    b = "Well, things will get better"
    assert patch(a, diff_strings_by_char(a, b)) == b
    with pytest.raises(AssertionError):
        diff_strings_by_char(["a"], "a")


def test_diff_strings_linewise():
    a = "first\nsecond\nthird\n"
    b = "first\nthird\nfourth\n"
    d = diff_strings_linewise(a, b)
    assert "".join(patch(a.splitlines(True), d)) == b
    assert diff_strings_linewise(a, a) == []


def test_diff_sequence_casefold():
    a = ["Alpha", "beta", "Gamma"]
    b = ["alpha", "BETA", "delta"]
    d = diff_sequence(a, b, compare=compare_casefold)
    assert d == [
        {"op": DiffOp.ADDRANGE, "key": 2, "valuelist": ["delta"]},
        {"op": DiffOp.REMOVERANGE, "key": 2, "length": 1},
    ]
