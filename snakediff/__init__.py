# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Operation
from .diffing import compute_edit_script, edit_script, diff_sequence
from .patching import apply_edit_script, patch_sequence, patch


__all__ = [
    "__version__",
    "Operation",
    "compute_edit_script", "edit_script", "diff_sequence",
    "apply_edit_script", "patch_sequence", "patch",
    ]
