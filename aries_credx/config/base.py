"""Configuration base classes."""

from abc import abstractmethod
from typing import Any, Iterator, Mapping, Optional

from ..core.error import BaseError


class ConfigError(BaseError):
    """A base exception for all configuration errors."""


class BaseSettings(Mapping[str, Any]):
    """Base settings class."""

    @abstractmethod
    def get_value(self, *var_names, default: Optional[Any] = None) -> Any:
        """Fetch a setting.

        Args:
            var_names: A list of variable name alternatives
            default: The default value to return if none are defined

        Returns:
            The setting value, if defined, otherwise the default value

        """

    def get_bool(self, *var_names, default: Optional[bool] = None) -> Optional[bool]:
        """Fetch a setting as a boolean, treating "false" and "0" as false."""
        value = self.get_value(*var_names, default=default)
        if value is None:
            return None
        return bool(value) and value not in ("false", "False", "0")

    def get_str(self, *var_names, default: Optional[str] = None) -> Optional[str]:
        """Fetch a setting as a string."""
        value = self.get_value(*var_names, default=default)
        return None if value is None else str(value)

    def __getitem__(self, index):
        """Fetch a setting by name."""
        if not isinstance(index, str):
            raise TypeError(f"Index {index} must be a string")
        missing = object()
        result = self.get_value(index, default=missing)
        if result is missing:
            raise KeyError(f"Undefined index: {index}")
        return result

    @abstractmethod
    def __iter__(self) -> Iterator:
        """Iterate settings keys."""

    @abstractmethod
    def __len__(self):
        """Fetch the number of settings."""

    def __repr__(self) -> str:
        """Provide a human readable representation of this object."""
        items = ", ".join(f"{key}={self[key]}" for key in self)
        return f"<{self.__class__.__name__}({items})>"
