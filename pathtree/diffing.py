# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pathtree.log
from .accessing import copy_tree, is_branch, iter_leaves
from .change_format import Missing, op_add, op_change, op_remove, validate_changes
from .log import ChangeFormatError
from .paths import join_path


__all__ = ["diff", "leaves_equal", "leaf_map"]


def leaves_equal(a, b):
    """Default leaf comparison: same type and equal value.

    Two empty dicts are equal. 1, 1.0 and True are all different.
    """
    if is_branch(a) or is_branch(b):
        return is_branch(a) and is_branch(b) and not a and not b
    return type(a) is type(b) and a == b


def leaf_map(tree, max_depth=None):
    """Map the dotted path of every leaf of tree to its value, depth first.

    An empty root has no leaf paths. Raises ChangeFormatError when two
    leaves share a path, as with sibling keys 1 and "1".
    """
    leaves = {}
    for keys, value in iter_leaves(tree, max_depth=max_depth):
        if not keys:
            continue
        path = join_path(keys)
        if path in leaves:
            raise ChangeFormatError("Leaf path '{}' is reached by more than one key.".format(path))
        leaves[path] = value
    return leaves


def diff(old, new, predicate=None, max_depth=None):
    """Compute the changelog from old to new.

    Both trees are reduced to their leaf paths. Records are emitted
    in this order:

    - add and change records in the leaf order of new
    - remove records in the leaf order of old

    Leaves are compared with predicate(a, b), by default leaves_equal.
    Record values are copies, never the leaves of new themselves.
    Returns a list of ChangeRecord.
    """
    if not is_branch(old) or not is_branch(new):
        raise TypeError('Arguments to diff need to be dicts, got %r and %r' % (
            type(old).__name__, type(new).__name__))
    if predicate is None:
        predicate = leaves_equal

    old_leaves = leaf_map(old, max_depth=max_depth)
    new_leaves = leaf_map(new, max_depth=max_depth)

    changes = []
    for path, value in new_leaves.items():
        old_value = old_leaves.get(path, Missing)
        if old_value is Missing:
            changes.append(op_add(path, copy_tree(value)))
        elif not predicate(old_value, value):
            changes.append(op_change(path, copy_tree(value)))

    for path in old_leaves:
        if path not in new_leaves:
            changes.append(op_remove(path))

    pathtree.log.debug("Diff found %d changes between %d and %d leaves.",
                       len(changes), len(old_leaves), len(new_leaves))

    # We can turn this off for performance after the library has been well tested:
    validate_changes(changes)

    return changes
