import logging

from configparser import ConfigParser
from tempfile import NamedTemporaryFile
from unittest import TestCase, mock

from pythonjsonlogger import jsonlogger

from .. import logging as test_module


class TestLoggingConfigurator(TestCase):
    def setUp(self):
        self.root_level = logging.root.level

    def tearDown(self):
        logging.root.setLevel(self.root_level)

    @mock.patch.object(test_module, "load_resource", autospec=True)
    @mock.patch.object(test_module, "fileConfig", autospec=True)
    def test_configure_default(self, mock_file_config, mock_load_resource):
        test_module.LoggingConfigurator.configure()

        mock_load_resource.assert_called_once_with(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI, "utf-8"
        )
        mock_file_config.assert_called_once_with(
            mock_load_resource.return_value,
            disable_existing_loggers=False,
        )

    @mock.patch.object(test_module, "load_resource", autospec=True)
    @mock.patch.object(test_module, "fileConfig", autospec=True)
    def test_configure_default_with_path(self, mock_file_config, mock_load_resource):
        path = "a path"
        test_module.LoggingConfigurator.configure(path, log_level="INFO")

        mock_load_resource.assert_called_once_with(path, "utf-8")
        mock_file_config.assert_called_once()
        assert logging.root.level == logging.INFO

    def test_configure_missing_config(self):
        with mock.patch.object(
            test_module, "load_resource", mock.MagicMock(return_value=None)
        ), mock.patch.object(test_module.logging, "basicConfig") as mock_basic:
            test_module.LoggingConfigurator.configure("missing.ini")
            mock_basic.assert_called_once_with(level=logging.WARNING)

    def test_configure_log_file_and_json(self):
        stream_handler = logging.StreamHandler()
        with NamedTemporaryFile(suffix=".log") as log_file, mock.patch.object(
            test_module, "fileConfig", autospec=True
        ), mock.patch.object(logging.root, "handlers", [stream_handler]):
            test_module.LoggingConfigurator.configure(
                log_level="error", log_file=log_file.name, log_json=True
            )
            file_handler = logging.root.handlers[-1]
            assert isinstance(file_handler, logging.FileHandler)
            for handler in logging.root.handlers:
                assert isinstance(handler.formatter, jsonlogger.JsonFormatter)
            assert logging.root.level == logging.ERROR
            file_handler.close()

    def test_configure_yaml(self):
        with NamedTemporaryFile("w", suffix=".yml") as config_file, mock.patch.object(
            test_module, "dictConfig", autospec=True
        ) as mock_dict_config:
            config_file.write("version: 1\nroot:\n  level: DEBUG\n")
            config_file.flush()
            test_module.LoggingConfigurator.configure(config_file.name)
            mock_dict_config.assert_called_once_with(
                {"version": 1, "root": {"level": "DEBUG"}}
            )

    def test_load_resource(self):
        with mock.patch("builtins.open", mock.MagicMock()) as mock_open:
            test_module.load_resource("abc", encoding="utf-8")
            mock_open.side_effect = IOError("insufficient privilege")
            assert test_module.load_resource("abc", encoding="utf-8") is None

        with test_module.load_resource(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI, "utf-8"
        ) as stream:
            parser = ConfigParser()
            parser.read_file(stream)
            assert parser.get("logger_root", "handlers") == "stream_handler"
        with test_module.load_resource(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI
        ) as stream:
            assert b"[loggers]" in stream.read()
        assert test_module.load_resource("not_a_package:file.ini") is None
