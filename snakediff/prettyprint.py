# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import operator
import sys

import colorama

from .patching import apply_edit_script, sequences_match


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


def format_state(items, as_text):
    if as_text:
        return repr("".join(items))
    return repr(items)


def pretty_print_replay(a, b, script, config=None, compare=operator.__eq__):
    """Replay script on a copy of a, printing every intermediate state.

    The final state is checked against b element by element with compare.
    Returns the final state as a list.
    """
    if config is None:
        config = PrettyPrintConfig()
    out = config.out
    as_text = isinstance(a, str)
    items = list(a)

    def emit(prefix, message):
        out.write('{}{}{}\n'.format(prefix, message, config.RESET))

    def on_insert(position, new_position):
        items.insert(position, b[new_position])
        emit(config.ADD, '{} (insert {!r} at {})'.format(
            format_state(items, as_text), b[new_position], position))

    def on_remove(position):
        value = items.pop(position)
        emit(config.REMOVE, '{} (remove {!r} at {})'.format(
            format_state(items, as_text), value, position))

    emit(config.INFO, 'start {}'.format(format_state(items, as_text)))
    apply_edit_script(script, on_insert, on_remove)
    emit(config.KEEP, 'result {}'.format(format_state(items, as_text)))
    emit(config.INFO, 'result equals new sequence: {}'.format(
        sequences_match(items, b, compare)))
    return items
