"""Utilities related to logging."""

import io
import logging
from importlib import resources
from logging.config import dictConfig, fileConfig

import yaml
from pythonjsonlogger import jsonlogger

DEFAULT_LOGGING_CONFIG_PATH_INI = "aries_credx.config:default_logging_config.ini"
LOG_FORMAT_PATTERN = "%(asctime)s %(levelname)s %(pathname)s:%(lineno)d %(message)s"


def load_resource(path: str, encoding: str = None):
    """Open a resource file located in a python package or the local filesystem.

    Args:
        path: The resource path in the form of `dir/file` or `package:dir/file`
        encoding: Text encoding; a binary stream is returned when omitted

    Returns:
        A file-like object representing the resource, or `None` if not found

    """
    components = path.rsplit(":", 1)
    try:
        if len(components) == 1:
            # Local filesystem resource
            return open(components[0], encoding=encoding)
        else:
            # Package resource
            package, resource = components
            bstream = resources.files(package).joinpath(resource).open("rb")
            if encoding:
                return io.TextIOWrapper(bstream, encoding=encoding)
            return bstream
    except (IOError, ModuleNotFoundError):
        return None


class LoggingConfigurator:
    """Utility class used to configure logging."""

    default_config_path_ini = DEFAULT_LOGGING_CONFIG_PATH_INI

    @classmethod
    def configure(
        cls,
        log_config_path: str = None,
        log_level: str = None,
        log_file: str = None,
        log_json: bool = False,
    ):
        """Configure logger.

        Args:
            log_config_path: Optional path to a custom `.ini` or `.yml` logging config
            log_level: Optional level applied to the root logger
            log_file: Optional file name to additionally write logs to
            log_json: Emit log records as JSON objects
        """
        cls._setup_log_config_file(log_config_path or cls.default_config_path_ini)

        # Set custom file handler
        if log_file:
            logging.root.handlers.append(
                logging.FileHandler(log_file, encoding="utf-8")
            )

        if log_json:
            for handler in logging.root.handlers:
                handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT_PATTERN))

        # Set custom log level
        if log_level:
            logging.root.setLevel(log_level.upper())

    @classmethod
    def _setup_log_config_file(cls, log_config_path: str):
        log_config, is_dict_config = cls._load_log_config(log_config_path)

        if not log_config:
            logging.basicConfig(level=logging.WARNING)
            logging.root.warning(f"Logging config file not found: {log_config_path}")
        elif is_dict_config:
            dictConfig(log_config)
        else:
            with log_config:
                fileConfig(log_config, disable_existing_loggers=False)

    @classmethod
    def _load_log_config(cls, log_config_path: str):
        if ".yml" in log_config_path or ".yaml" in log_config_path:
            with open(log_config_path, "r") as stream:
                return yaml.safe_load(stream), True
        return load_resource(log_config_path, "utf-8"), False
