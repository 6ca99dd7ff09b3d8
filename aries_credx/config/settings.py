"""Settings implementation."""

from typing import Any, Mapping

from .base import BaseSettings


class Settings(BaseSettings):
    """Settings gathered from the command line, keyed by dotted names."""

    def __init__(self, values: Mapping[str, Any] = None):
        """Initialize a Settings object from an optional mapping."""
        self._values = dict(values or {})

    def get_value(self, *var_names, default=None):
        """Fetch the first defined setting among alternative names."""
        for name in var_names:
            if name in self._values:
                return self._values[name]
        return default

    def __iter__(self):
        """Iterate settings keys."""
        return iter(self._values)

    def __len__(self):
        """Fetch the number of settings."""
        return len(self._values)
