# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import pytest

from snakediff import Operation, diff_sequence, patch
from snakediff.diff_format import (
    DiffEntry, SequenceDiffBuilder, op_addrange, op_removerange,
    count_consumed_elements, validate_edit_script, is_valid_edit_script,
    validate_diff, is_valid_diff, to_diffentry_dicts,
)
from snakediff.log import DiffFormatError


def test_count_consumed_elements():
    script = [Operation.SKIP, Operation.REMOVE, Operation.INSERT, Operation.INSERT]
    assert count_consumed_elements(script) == (2, 3)
    assert count_consumed_elements([]) == (0, 0)


def test_validate_edit_script():
    script = [Operation.REMOVE, Operation.SKIP, Operation.INSERT]
    validate_edit_script(script)
    validate_edit_script(script, 2, 2)
    assert is_valid_edit_script(script, old_len=2)
    assert not is_valid_edit_script(script, old_len=3)
    assert not is_valid_edit_script(script, new_len=1)
    assert not is_valid_edit_script([Operation.SKIP, "add"])
    with pytest.raises(DiffFormatError):
        validate_edit_script("skip")


def test_diff_entry_attribute_access():
    e = op_addrange(3, ["x"])
    assert e.op == "addrange"
    assert e.key == 3
    assert e.valuelist == ["x"]
    e.key = 4
    assert e["key"] == 4
    with pytest.raises(AttributeError):
        e.length


def test_sequence_diff_builder_order():
    di = SequenceDiffBuilder()
    di.removerange(2, 1)
    di.removerange(0, 1)
    di.addrange(2, [5])
    di.addrange(1, [])
    di.removerange(1, 0)
    assert di.validated() == [
        op_removerange(0, 1),
        op_addrange(2, [5]),
        op_removerange(2, 1),
    ]


def test_validate_diff():
    validate_diff([op_addrange(0, [1]), op_removerange(0, 2)])
    assert is_valid_diff([])
    assert not is_valid_diff({})
    assert not is_valid_diff([{"op": "addrange", "key": 0, "valuelist": [1]}])
    assert not is_valid_diff([DiffEntry(op="addrange", key=-1, valuelist=[1])])
    assert not is_valid_diff([DiffEntry(op="addrange", key=0, valuelist=3)])
    assert not is_valid_diff([DiffEntry(op="removerange", key=0, length="2")])
    assert not is_valid_diff([DiffEntry(op="removerange", key=0, length=-2)])
    assert not is_valid_diff([DiffEntry(op="removerange", key=0, length=True)])
    assert not is_valid_diff([DiffEntry(op="addrange", key=True, valuelist=[1])])
    assert not is_valid_diff([DiffEntry(op="removerange", key=False, length=1)])
    assert is_valid_diff([DiffEntry(op="removerange", key=0, length=0)])
    assert not is_valid_diff([DiffEntry(op="patch", key=0, diff=[])])


def test_diff_json_round_trip():
    a = list("ABCABBA")
    b = list("CBABAC")
    d = diff_sequence(a, b)
    loaded = to_diffentry_dicts(json.loads(json.dumps(d)))
    assert is_valid_diff(loaded)
    assert loaded == d
    assert patch(a, loaded) == b


def test_to_diffentry_dicts_invalid():
    with pytest.raises(DiffFormatError):
        to_diffentry_dicts("addrange")
