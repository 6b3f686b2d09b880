# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pathtree.log
from .accessing import copy_tree, delete_by_path, is_branch, set_by_path
from .change_format import ChangeAction, validate_changes
from .merging import merge


__all__ = ["apply_changes", "upgrade"]


def apply_changes(tree, changes):
    """Apply a changelog produced by diff to tree, in place.

    All remove records are applied first, pruning branches they
    leave empty, then add and change records are set in order.
    Removing first lets a leaf turn into a branch (or back) when
    both records target overlapping paths.

    Returns tree for convenience.
    """
    if not is_branch(tree):
        raise TypeError("Can only apply changes to dicts, not {}.".format(type(tree).__name__))
    validate_changes(changes)

    removed = 0
    for c in changes:
        if c.action == ChangeAction.REMOVE:
            if delete_by_path(tree, c.path, prune=True):
                removed += 1
            else:
                pathtree.log.debug("Nothing to remove at '%s'.", c.path)

    for c in changes:
        if c.action in (ChangeAction.ADD, ChangeAction.CHANGE):
            set_by_path(tree, c.path, copy_tree(c.value))

    pathtree.log.debug("Applied %d changes, %d removals.", len(changes), removed)
    return tree


def upgrade(save, defaults, changes=(), strategy=None):
    """Bring old save data up to date.

    Fills in what save lacks from defaults with merge, keeping the
    values save already has, then replays changes on the result.
    Neither save nor defaults is modified.
    """
    upgraded = merge(defaults, save, strategy=strategy)
    return apply_changes(upgraded, list(changes))
