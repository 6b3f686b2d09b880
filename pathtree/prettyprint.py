# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import pprint
import sys

import colorama

from .change_format import ChangeAction, validate_changes


# Max line width used when formatting values
MAXWIDTH = 78

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'CHANGE',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        CHANGE = '{color}~  '.format(color=colorama.Fore.YELLOW),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        CHANGE = '~  ',
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
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def CHANGE(self):
        return col_const[self.use_color].CHANGE

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple leaves with repr, anything larger with pprint."
    if isinstance(v, (int, float, str, bool)) or v is None:
        return repr(v)
    return pprint.pformat(v, width=MAXWIDTH)


def pretty_print_change(c, config=DefaultConfig):
    if c.action == ChangeAction.REMOVE:
        line = "{}{}{}".format(config.REMOVE, c.path, config.RESET)
    elif c.action == ChangeAction.ADD:
        line = "{}{}: {}{}".format(config.ADD, c.path, format_value(c.value), config.RESET)
    else:
        line = "{}{}: {}{}".format(config.CHANGE, c.path, format_value(c.value), config.RESET)
    config.out.write(line + "\n")


def pretty_print_changes(changes, config=DefaultConfig):
    """Write one line per change record to config.out.

    Added leaves are marked '+', removed '-' and changed '~'.
    """
    validate_changes(changes)
    for c in changes:
        pretty_print_change(c, config)
