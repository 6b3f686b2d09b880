# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from pytest import fixture, skip

from pathtree.config import reset_config


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def default_config():
    """Every test starts from trait defaults."""
    reset_config()
    yield
    reset_config()


@fixture
def old_save():
    return {"gold": 100, "pets": {"cat": {"level": 3}}}


@fixture
def new_save():
    return {
        "gold": 200,
        "energy": 50,
        "pets": {"cat": {"level": 5}, "dog": {"name": "Rex"}},
    }


@fixture
def defaults():
    return {
        "gold": 0,
        "energy": 10,
        "options": {"sound": True, "music": 0.5, "language": "en"},
        "weapons": {1: {"name": "stick", "damage": 1}},
        "pets": {},
    }
