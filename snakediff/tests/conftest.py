# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

from pytest import fixture, skip

import snakediff.diffing.sequences


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(params=snakediff.diffing.sequences.legal_diff_sequence_algorithms)
def algorithm(request):
    alg = snakediff.diffing.sequences.diff_sequence_algorithm
    snakediff.diffing.sequences.diff_sequence_algorithm = request.param
    yield request.param
    snakediff.diffing.sequences.diff_sequence_algorithm = alg


@fixture
def textfiles(tmpdir):
    """Fixture writing an old and a new text file into a temporary directory"""
    old = """\
def f(a, b):
    c = a * b
    return c

def g(x):
    y = x**2
    return y
"""
    new = """\
def f(a, b):
    return a * b

def g(x):
    y = x**2
    z = y + 1
    return z
"""
    old_fn = str(tmpdir.join('old.py'))
    new_fn = str(tmpdir.join('new.py'))
    for fn, text in ((old_fn, old), (new_fn, new)):
        with io.open(fn, 'w', encoding='utf8', newline='') as f:
            f.write(text)
    return old_fn, new_fn
