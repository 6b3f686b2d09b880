# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pathtree.log
from .accessing import (
    copy_tree, default_max_depth, is_branch, iter_leaves, lookup_key, walk_keys)
from .change_format import Missing
from .config import Merging, config_instance
from .paths import join_path


__all__ = ["merge", "merge_fieldwise", "merge_replace_on_new_key"]


# =============================================================================
#
# Branch merge strategies
#
# =============================================================================

def _assign(tree, keys, value):
    "Assign value at keys known to exist in tree."
    node = tree
    for key in keys[:-1]:
        node = node[key]
    node[keys[-1]] = value


def merge_fieldwise(pattern, override, max_depth=None):
    """Merge two branches leaf by leaf over the leaves of pattern.

    For every leaf path of pattern, the value override holds at the
    same relative path wins if override resolves the full path,
    otherwise the pattern leaf is kept. Paths only found in override
    are not added.
    """
    if max_depth is None:
        max_depth = default_max_depth()
    merged = copy_tree(pattern, max_depth=max_depth)
    for keys, _ in iter_leaves(pattern, max_depth=max_depth):
        value, depth = walk_keys(override, keys)
        if depth < len(keys):
            continue
        if not keys:
            # Pattern is itself a leaf (an empty dict)
            return copy_tree(value, max_depth=max_depth)
        _assign(merged, keys, copy_tree(value, max_depth=max_depth - len(keys)))
    return merged


def merge_replace_on_new_key(pattern, override, max_depth=None):
    """Replace pattern by override if override has leaves pattern lacks.

    Otherwise merge the two branches field by field.
    """
    if max_depth is None:
        max_depth = default_max_depth()
    known = set(join_path(keys) for keys, _ in iter_leaves(pattern, max_depth=max_depth))
    for keys, _ in iter_leaves(override, max_depth=max_depth):
        if join_path(keys) not in known:
            pathtree.log.debug("Override introduces new leaf '%s', replacing branch.",
                               join_path(keys))
            return copy_tree(override, max_depth=max_depth)
    return merge_fieldwise(pattern, override, max_depth=max_depth)


branch_strategies = {
    "fieldwise": merge_fieldwise,
    "replace-on-new-key": merge_replace_on_new_key,
}


# =============================================================================
#
# Top level merge
#
# =============================================================================

def merge(pattern, override, strategy=None, max_depth=None):
    """Combine pattern with override into a new tree.

    The result has the keys of pattern. For each top-level key:

    - absent from override: the pattern value is kept
    - either value is not a dict: the override value replaces it
    - both values are dicts: the branches are combined with the
      named strategy ("fieldwise" unless configured otherwise)

    Neither argument is modified. Values in the result are copies.
    """
    if not is_branch(pattern) or not is_branch(override):
        raise TypeError('Arguments to merge need to be dicts, got %r and %r' % (
            type(pattern).__name__, type(override).__name__))

    if strategy is None:
        strategy = config_instance(Merging).strategy
    try:
        merge_branches = branch_strategies[strategy]
    except KeyError:
        raise ValueError("Unknown merge strategy %r. Accepted values are %r." % (
            strategy, list(branch_strategies.keys())))

    if max_depth is None:
        max_depth = default_max_depth()
    # Nested branches start one level below the top
    sub_depth = max_depth - 1

    merged = copy_tree(pattern, max_depth=max_depth)
    for key, pvalue in pattern.items():
        actual = lookup_key(override, key)
        if actual is Missing:
            continue
        ovalue = override[actual]
        if is_branch(pvalue) and is_branch(ovalue):
            pathtree.log.debug("Merging branches at '%s' with strategy %s.", key, strategy)
            merged[key] = merge_branches(pvalue, ovalue, max_depth=sub_depth)
        else:
            pathtree.log.debug("Replacing value at '%s'.", key)
            merged[key] = copy_tree(ovalue, max_depth=sub_depth)
    return merged
