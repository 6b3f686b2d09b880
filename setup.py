#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

PATHTREE_PATH = HERE / "pathtree"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(PATHTREE_PATH / '_version.py')


if __name__ == '__main__':
    setup(
      name="pathtree",
      version=VERSION,
      description="Path addressing, merge and diff for nested key-value trees",
      license="BSD-3-Clause",
      packages=find_packages(include=["pathtree", "pathtree.*"]),
      python_requires=">=3.8",
      install_requires=[
          "traitlets>=5",
          "colorama",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
