# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import operator
import os
import sys

from . import log
from .args import (
    add_generic_args, add_sequence_args, add_diff_args, ConfigBackedParser,
    )
from .diff_format import Operation
from .diffing import sequences
from .diffing.lcs import diff_from_lcs, lcs_indices_from_script
from .diffing.sequences import compare_casefold, edit_script
from .patching import patch_sequence, sequences_match
from .prettyprint import pretty_print_replay, PrettyPrintConfig
from .profiling import timer
from .utils import (
    EXPLICIT_MISSING_FILE, read_text, write_text, split_sequence, setup_std_streams,
)


_description = "Compute a minimal edit script between two files or strings."


def main_diff(args):
    """Main handler of diff CLI"""
    if args.strings:
        old_text, new_text = args.old, args.new
    else:
        # Check that filenames either exist, or are explicitly marked as missing
        for fn in (args.old, args.new):
            if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
                print("Missing file {}".format(fn))
                return 1
        old_text = read_text(args.old)
        new_text = read_text(args.new)

    a = split_sequence(old_text, args.mode)
    b = split_sequence(new_text, args.mode)
    compare = compare_casefold if args.ignore_case else operator.__eq__

    timer.reset()
    with timer.enable() if args.profile else timer.disable():
        script, result = _compute_and_replay(a, b, compare, args)

    # With a custom comparison skipped elements keep their old value
    reproduced = sequences_match(result, b, compare)
    if not reproduced:
        log.error("Replaying the edit script did not reproduce the new sequence.")

    data = {
        "script": script,
        "diff": diff_from_lcs(a, b, *lcs_indices_from_script(script)),
    }
    if args.out:
        write_text(args.out, json.dumps(data, indent=2, separators=(",", ": ")))
    else:
        print(json.dumps(data, indent=2, separators=(",", ": ")))

    if args.profile:
        print(timer)

    return 0 if reproduced else 1


def _compute_and_replay(a, b, compare, args):
    previous = sequences.diff_sequence_algorithm
    sequences.diff_sequence_algorithm = args.algorithm
    try:
        with timer.time('compute_edit_script'):
            script = edit_script(a, b, compare)
    finally:
        sequences.diff_sequence_algorithm = previous
    log.info("Edit script with %d edits for %d old and %d new elements",
             sum(1 for op in script if op != Operation.SKIP), len(a), len(b))

    with timer.time('apply_edit_script'):
        if args.trace:
            # This printer is to keep the unit tests passing,
            # some tests capture output with capsys which doesn't
            # pick up on sys.stdout.write()
            class Printer:
                def write(self, text):
                    print(text, end="")
            config = PrettyPrintConfig(out=Printer(), use_color=args.use_color)
            result = pretty_print_replay(a, b, script, config, compare)
        else:
            result = patch_sequence(a, b, script)
    return script, result


def _build_arg_parser(prog='snakediff diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_sequence_args(parser)
    add_diff_args(parser)

    parser.add_argument(
        "old", help="the old filename, or the old string with --strings.")
    parser.add_argument(
        "new", help="the new filename, or the new string with --strings.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
