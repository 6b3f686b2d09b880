# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from pathtree import apply_changes, diff
from pathtree.change_format import is_valid_changes


def check_diff_and_apply(a, b):
    "Check that apply_changes(a, diff(a,b)) reproduces b without touching a."
    original = copy.deepcopy(a)
    d = diff(a, b)
    assert is_valid_changes(d)
    assert apply_changes(copy.deepcopy(a), d) == b
    assert a == original


def check_symmetric_diff_and_apply(a, b):
    "Check that apply_changes(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_apply(a, b)
    check_diff_and_apply(b, a)


def nested_tree(depth, leaf=0):
    "Build {'k': {'k': ... leaf}} with depth keys, without recursion."
    tree = leaf
    for _ in range(depth):
        tree = {"k": tree}
    return tree
