# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .snakes import compute_edit_script
from .sequences import edit_script, diff_sequence

__all__ = ["compute_edit_script", "edit_script", "diff_sequence"]
