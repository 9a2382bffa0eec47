#!/usr/bin/env python
"""Setup script for the sugario package."""

import logging
import sys

import setuptools
import setuptools.errors


class FormatCode(setuptools.Command):
    """Command to run yapf on all Python code."""

    user_options = []

    def initialize_options(self):  # pylint: disable=missing-docstring
        pass

    def finalize_options(self):  # pylint: disable=missing-docstring
        pass

    def run(self):  # pylint: disable=missing-docstring
        import yapf  # pylint: disable=import-error

        try:
            yapf.main([
                None,
                "--in-place",
                "--recursive",
                "--verbose",
                "setup.py",
                "tests/",
                "sugario/",
            ])
        except yapf.errors.YapfError as err:
            msg = "yapf: {}".format(err)
            self.announce(msg, logging.ERROR)
            raise setuptools.errors.BaseError(msg)


class LintCode(setuptools.Command):
    """Command to run pylint on all Python code."""

    user_options = []

    def initialize_options(self):  # pylint: disable=missing-docstring
        pass

    def finalize_options(self):  # pylint: disable=missing-docstring
        pass

    def run(self):  # pylint: disable=missing-docstring
        import pylint.lint  # pylint: disable=import-error

        pylint.lint.Run(["setup.py", "tests/", "sugario/"], exit=False)


SETUP_REQUIRES = []

if {"format"}.intersection(sys.argv):
    SETUP_REQUIRES.append("yapf >= 0.40.0")

if {"lint"}.intersection(sys.argv):
    SETUP_REQUIRES.append("pylint >= 3.0")

setuptools.setup(
    setup_requires=SETUP_REQUIRES,
    cmdclass=dict(format=FormatCode, lint=LintCode),
)
