"""Dynamic loading of encoding backends by dotted path."""

import inspect
import sys

from importlib import import_module
from importlib.util import find_spec
from types import ModuleType
from typing import Optional, Type

from ..core.error import BaseError


class ModuleLoadError(BaseError):
    """Module load error."""


class ClassNotFoundError(BaseError):
    """Class not found error."""


class ClassLoader:
    """Class used to load classes from modules dynamically."""

    @classmethod
    def load_module(cls, mod_path: str) -> Optional[ModuleType]:
        """
        Load a module by its absolute dotted path.

        Returns:
            The resolved module or `None` if the module cannot be found

        Raises:
            ModuleLoadError: If the module exists but fails to import

        """
        if mod_path in sys.modules:
            return sys.modules[mod_path]

        # find_spec imports the parent package and fails if it is missing
        if "." in mod_path and not cls.load_module(mod_path.rsplit(".", 1)[0]):
            return None
        if not find_spec(mod_path):
            return None

        try:
            return import_module(mod_path)
        except ModuleNotFoundError as e:
            raise ModuleLoadError(f"Unable to import module {mod_path}: {e}") from e

    @classmethod
    def load_class(cls, class_path: str) -> type:
        """
        Resolve a complete class path (ie. typing.Dict) to the class itself.

        Raises:
            ClassNotFoundError: If the class could not be resolved at path
            ModuleLoadError: If there was an error loading the module

        """
        if "." not in class_path:
            raise ClassNotFoundError(f"Not a module qualified class path: {class_path}")
        mod_path, class_name = class_path.rsplit(".", 1)

        mod = cls.load_module(mod_path)
        if not mod:
            raise ClassNotFoundError(f"Module '{mod_path}' not found")

        resolved = getattr(mod, class_name, None)
        if not resolved:
            raise ClassNotFoundError(
                f"Class '{class_name}' not defined in module: {mod_path}"
            )
        if not isinstance(resolved, type):
            raise ClassNotFoundError(f"Resolved value is not a class: {class_path}")
        return resolved

    @classmethod
    def load_subclass_of(cls, base_class: Type, mod_path: str) -> type:
        """
        Resolve the first concrete implementation of a base class within a module.

        Abstract classes and the base class itself are skipped.

        Raises:
            ClassNotFoundError: If the module or class implementation could not be found
            ModuleLoadError: If there was an error loading the module

        """
        mod = cls.load_module(mod_path)
        if not mod:
            raise ClassNotFoundError(f"Module '{mod_path}' not found")

        for _, obj in inspect.getmembers(mod, inspect.isclass):
            if (
                issubclass(obj, base_class)
                and obj is not base_class
                and not inspect.isabstract(obj)
            ):
                return obj
        raise ClassNotFoundError(
            f"Could not resolve a class that inherits from {base_class}"
        )
