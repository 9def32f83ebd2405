#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

SNAKEDIFF_PATH = HERE / "snakediff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(SNAKEDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="snakediff",
      version=VERSION,
      description="Minimal edit scripts between sequences, and their replay",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      packages=find_packages(include=["snakediff", "snakediff.*"]),
      python_requires=">=3.8",
      install_requires=[
          "colorama",
          "jupyter_core",
          "tabulate",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "snakediff = snakediff.__main__:main_dispatch",
              "snakediff-diff = snakediff.sdiffapp:main",
              "snakediff-patch = snakediff.spatchapp:main",
          ],
      },
    )
