# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import add_generic_args, add_sequence_args, ConfigBackedParser
from .diff_format import to_diffentry_dicts, validate_diff
from .patching import patch
from .utils import (
    EXPLICIT_MISSING_FILE, read_text, write_text, split_sequence, join_sequence,
    setup_std_streams,
)


_description = "Apply a diff from 'snakediff diff' to a file."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.out

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = split_sequence(read_text(base_filename), args.mode)
    with io.open(patch_filename, encoding="utf8") as patch_file:
        data = json.load(patch_file)
    # Accept the full output of 'snakediff diff' as well as a bare diff
    if isinstance(data, dict):
        data = data["diff"]
    diff = to_diffentry_dicts(data)
    validate_diff(diff)

    after = join_sequence(patch(before, diff))

    if output_filename:
        write_text(output_filename, after)
    else:
        print(after, end="")

    return 0


def _build_arg_parser(prog='snakediff patch'):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_sequence_args(parser)

    parser.add_argument(
        "base", help="the base filename.")
    parser.add_argument(
        "patch", help="the diff json filename.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
