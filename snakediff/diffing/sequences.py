# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from .lcs import diff_from_lcs, lcs_indices_from_script
from .seq_bruteforce import bruteforce_edit_script
from .snakes import compute_edit_script

__all__ = ["edit_script", "diff_sequence", "diff_strings_by_char", "diff_strings_linewise"]


legal_diff_sequence_algorithms = ("wavefront", "bruteforce")
diff_sequence_algorithm = "wavefront"


def compare_casefold(x, y):
    "Compare two strings ignoring case."
    return x.casefold() == y.casefold()


def edit_script(a, b, compare=operator.__eq__):
    """Compute a minimal edit script turning sequence a into sequence b.

    This is a wrapper for alternative edit script implementations,
    selected by the module variable diff_sequence_algorithm.
    """
    def same_at(i, j):
        return compare(a[i], b[j])

    if diff_sequence_algorithm == "wavefront":
        return compute_edit_script(len(a), len(b), same_at)
    elif diff_sequence_algorithm == "bruteforce":
        return bruteforce_edit_script(len(a), len(b), same_at)
    else:
        raise RuntimeError("Unknown diff_sequence_algorithm {}.".format(diff_sequence_algorithm))


def diff_sequence(a, b, compare=operator.__eq__):
    """Compute a shallow diff of two sequences.

    Returns a list of addrange/removerange diff entries keyed by
    indices into a, which snakediff.patching.patch applies to a.
    """
    script = edit_script(a, b, compare)
    A_indices, B_indices = lcs_indices_from_script(script)
    return diff_from_lcs(a, b, A_indices, B_indices)


def diff_strings_by_char(a, b, compare=operator.__eq__):
    "Compute char-based diff of two strings."
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    if a == b:
        return []
    return diff_sequence(a, b, compare)


def diff_strings_linewise(a, b, compare=operator.__eq__):
    """Do a line-wise diff of two strings

    Lines keep their line endings, so the diff applies to a.splitlines(True).
    """
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    if a == b:
        return []
    return diff_sequence(a.splitlines(True), b.splitlines(True), compare)
