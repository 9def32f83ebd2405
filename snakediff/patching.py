# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import operator

from .diff_format import DiffOp, Operation
from .log import DiffFormatError


__all__ = ["apply_edit_script", "patch_sequence", "sequences_match", "patch"]


def apply_edit_script(script, on_insert, on_remove):
    """Replay an edit script through a pair of callbacks.

    on_insert(position, new_position) is expected to insert element
    new_position of the new sequence at position in the working copy,
    and on_remove(position) to delete the element at position of the
    working copy. Both positions refer to the working copy as modified
    by all previous callbacks.

    Callbacks are invoked in script order. An exception raised by a
    callback stops the replay, the remaining operations are not applied.
    """
    # Position in the working copy
    pos = 0
    # Position in the new sequence, the source of inserted elements
    new_pos = 0
    for op in script:
        if op == Operation.SKIP:
            pos += 1
            new_pos += 1
        elif op == Operation.INSERT:
            on_insert(pos, new_pos)
            pos += 1
            new_pos += 1
        elif op == Operation.REMOVE:
            # The next element slides into pos
            on_remove(pos)
        else:
            raise DiffFormatError("Invalid edit script operation {!r}.".format(op))


def patch_sequence(a, b, script):
    """Produce b by replaying script on a copy of a.

    Inserted elements are taken from b. Returns a string if a is a
    string, otherwise a list.
    """
    items = list(a)

    def on_insert(position, new_position):
        items.insert(position, b[new_position])

    def on_remove(position):
        del items[position]

    apply_edit_script(script, on_insert, on_remove)
    if isinstance(a, str):
        return "".join(items)
    return items


def sequences_match(items, b, compare=operator.__eq__):
    "Check that items and b have equal length and pairwise compare equal."
    return len(items) == len(b) and all(compare(x, y) for x, y in zip(items, b))


def patch_list(obj, diff):
    # The patched sequence to build and return
    newobj = []
    # Index into obj, the next item to take unless diff says otherwise
    take = 0
    for e in diff:
        op = e.op
        index = e.key
        if isinstance(index, bool) or not isinstance(index, int):
            raise DiffFormatError("List key must be an integer, not {!r}.".format(index))
        if index < 0 or index > len(obj):
            raise DiffFormatError(
                "Diff key {} is out of range for a sequence of length {}.".format(
                    index, len(obj)))

        # Take values from obj not mentioned in diff, up to not including index
        newobj.extend(copy.deepcopy(value) for value in obj[take:index])

        if op == DiffOp.ADDRANGE:
            # Extend with new values directly
            newobj.extend(e.valuelist)
            skip = 0
        elif op == DiffOp.REMOVERANGE:
            # Delete a number of values by skipping
            skip = e.length
            if isinstance(skip, bool) or skip < 0 or index + skip > len(obj):
                raise DiffFormatError(
                    "Cannot remove {} values at {} from a sequence of length {}.".format(
                        skip, index, len(obj)))
        else:
            raise DiffFormatError("Invalid op {}.".format(op))

        # Skip the specified number of elements, but never decrement take.
        # Note that take can pass index in diffs with repeated +/- on the
        # same index, i.e. [op_addrange(index, values), op_removerange(index, n)]
        take = max(take, index + skip)

    # Take values at end not mentioned in diff
    newobj.extend(copy.deepcopy(value) for value in obj[take:len(obj)])

    return newobj


def patch_string(obj, diff):
    "Patch a string, assuming diff is character based."
    return "".join(patch_list(list(obj), diff))


def patch(obj, diff):
    """Produce a patched version of obj with given sequence diff.

    A valid input object is a list or a string. For strings the diff
    is assumed to be character based, for line based diffs patch
    obj.splitlines(True) instead.
    """
    if isinstance(obj, list):
        return patch_list(obj, diff)
    elif isinstance(obj, str):
        return patch_string(obj, diff)
    else:
        raise ValueError("Invalid object type to patch: {}".format(type(obj).__name__))
