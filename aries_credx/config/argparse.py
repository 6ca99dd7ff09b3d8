"""Command line option parsing."""

import abc

from typing import Type

from configargparse import ArgumentParser, Namespace, YAMLConfigFileParser

from ..encoding.encoder import ATTRIBUTE_KINDS, BACKENDS, DEFAULT_BACKEND
from .error import ArgsParseError

CAT_ENCODE = "encode"

OUTPUT_FORMATS = ("dec", "hex")


class ArgumentGroup(abc.ABC):
    """A class representing a group of related command line arguments."""

    GROUP_NAME = None

    @abc.abstractmethod
    def add_arguments(self, parser: ArgumentParser):
        """Add arguments to the provided argument parser."""

    @abc.abstractmethod
    def get_settings(self, args: Namespace) -> dict:
        """Extract settings from the parsed arguments."""


class group:
    """Decorator for registering argument groups."""

    _registered = []

    def __init__(self, *categories):
        """Initialize the decorator."""
        self.categories = tuple(categories)

    def __call__(self, group_cls: ArgumentGroup):
        """Register a class in the given categories."""
        setattr(group_cls, "CATEGORIES", self.categories)
        self._registered.append((self.categories, group_cls))
        return group_cls

    @classmethod
    def get_registered(cls, category: str = None):
        """Fetch the set of registered classes in a category."""
        return (
            grp
            for (cats, grp) in cls._registered
            if category is None or category in cats
        )


def create_argument_parser(*, prog: str = None):
    """Create an instance of an arg parser, force yaml format for external config."""
    return ArgumentParser(config_file_parser_class=YAMLConfigFileParser, prog=prog)


def load_argument_groups(parser: ArgumentParser, *groups: Type[ArgumentGroup]):
    """
    Load a set of argument groups into a parser.

    Returns:
        A callable to convert loaded arguments into a settings dictionary

    """
    group_inst = []
    for group in groups:
        g_parser = parser.add_argument_group(group.GROUP_NAME)
        inst = group()
        inst.add_arguments(g_parser)
        group_inst.append(inst)

    def get_settings(args: Namespace):
        settings = {}
        try:
            for group in group_inst:
                settings.update(group.get_settings(args))
        except ArgsParseError as e:
            parser.print_help()
            raise e
        return settings

    return get_settings


@group(CAT_ENCODE)
class EncodingGroup(ArgumentGroup):
    """Attribute encoding settings."""

    GROUP_NAME = "Encoding"

    def add_arguments(self, parser: ArgumentParser):
        """Add encoding-specific command line arguments to the parser."""
        parser.add_argument(
            "--arg-file",
            is_config_file=True,
            help=(
                "Load arguments from the specified file.  Note that "
                "this file *must* be in YAML format."
            ),
        )
        parser.add_argument(
            "--backend",
            dest="backend",
            type=str,
            metavar="<backend>",
            default=DEFAULT_BACKEND,
            env_var="ARIES_CREDX_BACKEND",
            help=(
                "Integer domain to encode attributes into: one of "
                f"{', '.join(BACKENDS)}, or the class path of a DomainInt "
                f"implementation. Default: {DEFAULT_BACKEND}."
            ),
        )
        parser.add_argument(
            "--kind",
            dest="kind",
            type=str,
            choices=list(ATTRIBUTE_KINDS),
            metavar="<kind>",
            env_var="ARIES_CREDX_KIND",
            help=(
                "Kind of the attribute value to encode: one of "
                f"{', '.join(ATTRIBUTE_KINDS)}."
            ),
        )
        parser.add_argument(
            "--attributes",
            dest="attributes",
            type=str,
            metavar="<json-file>",
            env_var="ARIES_CREDX_ATTRIBUTES",
            help=(
                "Encode every attribute in the JSON file, an object mapping "
                'attribute names to {"kind": <kind>, "value": <value>}.'
            ),
        )
        parser.add_argument(
            "value",
            nargs="?",
            metavar="<value>",
            help="Raw attribute value, when encoding a single attribute.",
        )

    def get_settings(self, args: Namespace) -> dict:
        """Extract encoding settings."""
        settings = {"encoding.backend": args.backend}
        if args.attributes:
            if args.value is not None or args.kind:
                raise ArgsParseError(
                    "Parameter --attributes cannot be combined with --kind or <value>"
                )
            settings["encoding.attributes"] = args.attributes
        elif args.value is not None:
            if not args.kind:
                raise ArgsParseError("Parameter --kind is required to encode <value>")
            settings["encoding.kind"] = args.kind
            settings["encoding.value"] = args.value
        else:
            raise ArgsParseError("One of --attributes or <value> must be specified")
        return settings


@group(CAT_ENCODE)
class OutputGroup(ArgumentGroup):
    """Output settings."""

    GROUP_NAME = "Output"

    def add_arguments(self, parser: ArgumentParser):
        """Add output-specific command line arguments to the parser."""
        parser.add_argument(
            "--format",
            dest="output_format",
            type=str,
            choices=OUTPUT_FORMATS,
            default="dec",
            env_var="ARIES_CREDX_FORMAT",
            help=(
                "Print encoded values as decimal integers (dec) or as fixed-width "
                "big-endian hex (hex). Default: dec."
            ),
        )

    def get_settings(self, args: Namespace) -> dict:
        """Extract output settings."""
        return {"output.format": args.output_format}


@group(CAT_ENCODE)
class LoggingGroup(ArgumentGroup):
    """Logging settings."""

    GROUP_NAME = "Logging"

    def add_arguments(self, parser: ArgumentParser):
        """Add logging-specific command line arguments to the parser."""
        parser.add_argument(
            "--log-config",
            dest="log_config",
            type=str,
            metavar="<path-to-config>",
            default=None,
            env_var="ARIES_CREDX_LOG_CONFIG",
            help="Specifies a custom logging configuration file",
        )
        parser.add_argument(
            "--log-file",
            dest="log_file",
            type=str,
            metavar="<log-file>",
            default=None,
            env_var="ARIES_CREDX_LOG_FILE",
            help="Additionally writes log output to the named <log-file>.",
        )
        parser.add_argument(
            "--log-level",
            dest="log_level",
            type=str,
            metavar="<log-level>",
            default=None,
            env_var="ARIES_CREDX_LOG_LEVEL",
            help=(
                "Specifies a custom logging level as one of: "
                "('debug', 'info', 'warning', 'error', 'critical')"
            ),
        )
        parser.add_argument(
            "--log-json",
            action="store_true",
            env_var="ARIES_CREDX_LOG_JSON",
            help="Emit log records as JSON objects.",
        )

    def get_settings(self, args: Namespace) -> dict:
        """Extract logging settings."""
        settings = {}
        if args.log_config:
            settings["log.config"] = args.log_config
        if args.log_file:
            settings["log.file"] = args.log_file
        if args.log_level:
            settings["log.level"] = args.log_level
        if args.log_json:
            settings["log.json"] = True
        return settings
