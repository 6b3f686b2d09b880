# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .change_format import Missing
from .config import Traversal, config_instance
from .log import TooDeep
from .paths import parse_path, join_path, alternate_key


__all__ = [
    "is_branch", "get_size", "iter_leaves", "enumerate_leaf_paths", "copy_tree",
    "get_by_path", "set_by_path", "delete_by_path",
    ]


def is_branch(obj):
    "Dicts are branches, every other value is a leaf."
    return isinstance(obj, dict)


def is_leaf(obj):
    "Non-dict values and empty dicts terminate traversal."
    return not isinstance(obj, dict) or not obj


def default_max_depth():
    return config_instance(Traversal).max_depth


def lookup_key(branch, key):
    """Return the key under which branch stores key, or Missing.

    Falls back to the alternate spelling of index keys,
    so that 1 finds an entry stored under "1" and vice versa.
    """
    if key in branch:
        return key
    alt = alternate_key(key)
    if alt is not None and alt in branch:
        return alt
    return Missing


def get_size(tree):
    "Number of direct entries in a branch, 0 for leaves."
    if is_branch(tree):
        return len(tree)
    return 0


def iter_leaves(tree, max_depth=None):
    """Yield (keys, value) for every leaf of tree, depth first.

    Children are visited in the branch's iteration order. Empty
    dicts are reported as leaves at their own path and never
    expanded. A leaf root yields a single entry with empty keys.

    Walks with an explicit stack; nesting deeper than max_depth
    keys (default from the Traversal config) raises TooDeep.
    """
    if max_depth is None:
        max_depth = default_max_depth()

    if is_leaf(tree):
        yield (), tree
        return
    if max_depth < 1:
        raise TooDeep("Tree nests deeper than {} keys.".format(max_depth))

    # Each stack entry holds the keys leading to a branch
    # and the iterator over that branch's remaining items
    stack = [((), iter(tree.items()))]
    while stack:
        prefix, items = stack[-1]
        for key, value in items:
            keys = prefix + (key,)
            if is_leaf(value):
                yield keys, value
            else:
                if len(keys) >= max_depth:
                    raise TooDeep(
                        "Tree nests deeper than {} keys at '{}'.".format(
                            max_depth, join_path(keys)))
                stack.append((keys, iter(value.items())))
                break
        else:
            stack.pop()


def enumerate_leaf_paths(tree):
    "List the dotted path of every leaf of tree, depth first."
    return [join_path(keys) for keys, _ in iter_leaves(tree)]


def walk_keys(tree, keys, max_depth=None):
    """Follow keys from tree as far as possible.

    Returns (value, depth) where depth counts the keys consumed.
    Stops early at a leaf, at a missing key, or after max_depth keys.
    """
    node = tree
    depth = 0
    for key in keys:
        if max_depth is not None and depth >= max_depth:
            break
        if not is_branch(node):
            break
        actual = lookup_key(node, key)
        if actual is Missing:
            break
        node = node[actual]
        depth += 1
    return node, depth


def get_by_path(tree, path, max_depth=None):
    """Resolve path in tree, returning (value, depth_reached).

    If depth_reached equals the number of keys in path, value is the
    value at path. A smaller depth means traversal stopped at value,
    either because the next key was missing or value is not a branch,
    or because max_depth keys were consumed.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("max_depth must be non-negative, got {}.".format(max_depth))
    return walk_keys(tree, parse_path(path), max_depth=max_depth)


def set_by_path(tree, path, value):
    """Assign value at path, creating branches along the way.

    Missing intermediate keys get a new empty dict. An existing
    non-dict value met before the final key is overwritten with
    a new empty dict. The final key is overwritten with value.
    """
    keys = parse_path(path)
    if not is_branch(tree):
        raise TypeError("Can only set paths in dicts, not {}.".format(type(tree).__name__))

    node = tree
    for key in keys[:-1]:
        actual = lookup_key(node, key)
        if actual is Missing:
            actual = key
        child = node.get(actual)
        if not is_branch(child):
            child = node[actual] = {}
        node = child

    actual = lookup_key(node, keys[-1])
    if actual is Missing:
        actual = keys[-1]
    node[actual] = value


def delete_by_path(tree, path, prune=False):
    """Remove the entry at path, returning whether anything was removed.

    A path that does not resolve is left alone. With prune, parents
    left empty by the removal are removed as well, up to but not
    including the root.
    """
    keys = parse_path(path)

    trail = []
    node = tree
    for key in keys:
        if not is_branch(node):
            return False
        actual = lookup_key(node, key)
        if actual is Missing:
            return False
        trail.append((node, actual))
        node = node[actual]

    parent, actual = trail.pop()
    del parent[actual]
    if prune:
        while trail and not parent:
            parent, actual = trail.pop()
            del parent[actual]
    return True


def copy_tree(tree, max_depth=None):
    """Copy tree, building new dicts for every branch.

    Leaves are deep copied. Walks with an explicit stack, so the
    nesting limit is max_depth rather than the interpreter's.
    """
    if not is_branch(tree):
        return copy.deepcopy(tree)
    if max_depth is None:
        max_depth = default_max_depth()
    if tree and max_depth < 1:
        raise TooDeep("Tree nests deeper than {} keys.".format(max_depth))

    root = {}
    stack = [(tree, root, 0)]
    while stack:
        source, target, depth = stack.pop()
        for key, value in source.items():
            if is_leaf(value):
                target[key] = copy.deepcopy(value)
                continue
            if depth + 1 >= max_depth:
                raise TooDeep("Tree nests deeper than {} keys.".format(max_depth))
            target[key] = {}
            stack.append((value, target[key], depth + 1))
    return root
