# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffFormatError


class Operation:
    "Collection of valid values for the steps of an edit script."
    SKIP = "skip"
    INSERT = "insert"
    REMOVE = "remove"

    ALL = (SKIP, INSERT, REMOVE)


def count_consumed_elements(script):
    """Count how many elements an edit script consumes from the old and new sequence.

    Returns a tuple (old_count, new_count).
    """
    old_count = 0
    new_count = 0
    for op in script:
        if op == Operation.SKIP:
            old_count += 1
            new_count += 1
        elif op == Operation.INSERT:
            new_count += 1
        elif op == Operation.REMOVE:
            old_count += 1
        else:
            raise DiffFormatError("Invalid edit script operation {!r}.".format(op))
    return old_count, new_count


def validate_edit_script(script, old_len=None, new_len=None):
    """Check whether an edit script is well formed.

    When the sequence lengths are given, the script must also consume
    exactly that many elements from each sequence.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(script, (list, tuple)):
        raise DiffFormatError("Edit script must be a list, not {}.".format(
            type(script).__name__))
    old_count, new_count = count_consumed_elements(script)
    if old_len is not None and old_count != old_len:
        raise DiffFormatError(
            "Edit script consumes {} old elements, expected {}.".format(old_count, old_len))
    if new_len is not None and new_count != new_len:
        raise DiffFormatError(
            "Edit script consumes {} new elements, expected {}.".format(new_count, new_len))


def is_valid_edit_script(script, old_len=None, new_len=None):
    try:
        validate_edit_script(script, old_len, new_len)
    except DiffFormatError:
        return False
    return True


class DiffEntry(dict):
    """Minimal class providing attribute access to diff entry keys.

    Entries stay plain dicts so they can be dumped to json directly.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffOp:
    "Collection of valid values for the action field in sequence diff entries."
    ADDRANGE = "addrange"
    REMOVERANGE = "removerange"


def op_addrange(key, valuelist):
    "Create a diff entry to add given list of values before key."
    return DiffEntry(op=DiffOp.ADDRANGE, key=key, valuelist=valuelist)

def op_removerange(key, length):
    "Create a diff entry to remove values in range key:key+length."
    return DiffEntry(op=DiffOp.REMOVERANGE, key=key, length=length)


class SequenceDiffBuilder(object):

    # Valid values for the action field in sequence diff entries
    OPS = (
        DiffOp.ADDRANGE,
        DiffOp.REMOVERANGE,
        )

    def __init__(self):
        self._diff = []

    def validated(self):
        return self._diff

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, DiffEntry)
        assert "op" in entry
        assert entry.op in SequenceDiffBuilder.OPS
        assert "key" in entry

        # Insert new entry at sorted position
        n = len(self._diff)
        pos = n
        if entry.op == DiffOp.ADDRANGE:
            # Insert addrange before removerange
            while pos > 0 and self._diff[pos-1].key >= entry.key:
                pos -= 1
        else:
            while pos > 0 and self._diff[pos-1].key > entry.key:
                pos -= 1
        self._diff.insert(pos, entry)

    def addrange(self, key, valuelist):
        if valuelist:
            self.append(op_addrange(key, valuelist))

    def removerange(self, key, length):
        if length:
            self.append(op_removerange(key, length))


def is_valid_diff(diff):
    """Checks wheter a diff (list of diff entries) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
        result = True
    except DiffFormatError:
        result = False
    return result


def validate_diff(diff):
    """Check wheter a diff (list of diff entries) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise DiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_entry(e)


sequence_types = (str, list)


def _is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_diff_entry(e):
    """Check that e is a well formed sequence diff entry.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise DiffFormatError("Diff entry '{}' is not a diff type.".format(e))

    op = e.get("op")
    key = e.get("key")
    if not _is_index(key) or key < 0:
        raise DiffFormatError("Invalid diff entry key '{}'.".format(key))

    if op == DiffOp.ADDRANGE:
        if not isinstance(e.get("valuelist"), sequence_types):
            raise DiffFormatError(
                "addrange expects a sequence of values to insert, not '{}'.".format(
                    e.get("valuelist")))
    elif op == DiffOp.REMOVERANGE:
        length = e.get("length")
        if not _is_index(length) or length < 0:
            raise DiffFormatError(
                "removerange expects a number of values to delete, not '{}'.".format(
                    length))
    else:
        raise DiffFormatError("Unknown diff op '{}'.".format(op))


def to_diffentry_dicts(di):
    "Recursively convert dict objects to DiffEntry objects with attribute access."
    if isinstance(di, dict):
        return DiffEntry(**di)
    if isinstance(di, list):
        return [to_diffentry_dicts(e) for e in di]
    raise DiffFormatError("Cannot convert {} to diff entries.".format(type(di).__name__))
