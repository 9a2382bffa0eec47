"""Unit tests for the setup.py script."""

import os.path
import unittest

SETUP_PY = os.path.join(os.path.dirname(__file__), "..", "setup.py")

# Messages removed from pylint that would now be reported as unknown options.
REMOVED_PYLINT_MESSAGES = ("no-self-use", "bad-whitespace", "bad-continuation")


class TestPylintPragmas(unittest.TestCase):
    """Unit tests for the pylint pragmas in setup.py."""

    def test_no_removed_messages_are_disabled(self):  # pylint: disable=missing-docstring
        with open(SETUP_PY) as fileobj:
            source = fileobj.read()

        for message in REMOVED_PYLINT_MESSAGES:
            self.assertNotIn(message, source)
