"""Common exception classes."""

import re


class BaseError(Exception):
    """Generic exception class which other exceptions should inherit from."""

    @property
    def roll_up(self) -> str:
        """
        Messages of this error and its chained causes, joined on one line.

        For display on a single line of terminal output.
        """
        parts = []
        err = self
        while err:
            text = str(err.args[0]).strip() if err.args else err.__class__.__name__
            parts.append(re.sub(r"\n\s*", ". ", text).rstrip("."))
            err = err.__cause__
        return ". ".join(parts) + "."
