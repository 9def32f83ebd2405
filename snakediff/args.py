# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diffing.sequences import legal_diff_sequence_algorithms
from .log import LOG_LEVELS, init_logging, level_from_name, set_snakediff_log_level


def entrypoint_name(prog):
    "Map a parser prog like 'snakediff diff' to its config entrypoint name."
    return '-'.join(prog.split())


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = entrypoint_name(self.prog)
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = level_from_name(default or 'INFO')
        init_logging(level=level)
        set_snakediff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = level_from_name(values)
        set_snakediff_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(header, config, out=None):
    if out is None:
        out = sys.stderr
    print('%s:' % header, file=out)
    for k, v in sorted(modify_config_for_print(config).items()):
        print('  %s: %s' % (k, v), file=out)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        entrypoint = entrypoint_name(parser.prog)
        header = entrypoint_configurables[entrypoint].__name__
        print_config(header, build_config(entrypoint, True))
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all snakediff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_sequence_args(parser):
    """Adds a set of arguments for commands that read sequences from files.
    """
    parser.add_argument(
        '--mode',
        default='chars',
        choices=('chars', 'lines'),
        help="treat the inputs as sequences of characters or of lines.")
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the result is written to this file. "
             "Otherwise it is printed to the terminal.")


def add_diff_args(parser):
    """Adds a set of arguments for commands that compute edit scripts.
    """
    parser.add_argument(
        '--algorithm',
        default='wavefront',
        choices=legal_diff_sequence_algorithms,
        help="specify the edit script algorithm to use.")
    parser.add_argument(
        '--ignore-case',
        action='store_true',
        default=False,
        help="compare elements ignoring case.")
    parser.add_argument(
        '--strings',
        action='store_true',
        default=False,
        help="treat the two positional arguments as literal strings "
             "rather than filenames.")
    parser.add_argument(
        '--trace',
        action='store_true',
        default=False,
        help="replay the edit script printing every intermediate state.")
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action='store_false',
        default=True,
        help="do not use ANSI colors in the replay trace.")
    parser.add_argument(
        '--profile',
        action='store_true',
        default=False,
        help="print the time spent computing and replaying the edit script.")
