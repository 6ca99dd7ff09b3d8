"""Encode command for converting attribute values into signable integers."""

import json
import logging
import sys

from typing import Sequence

from configargparse import ArgumentParser
from marshmallow import ValidationError

from ..config import argparse as arg
from ..config.error import ArgsParseError
from ..config.settings import Settings
from ..config.util import common_config
from ..core.error import BaseError
from ..encoding.domain import DomainInt
from ..encoding.encoder import (
    KIND_DAYS,
    KIND_FLOAT,
    KIND_TIMESTAMP,
    KIND_UNSIGNED,
    AttributeEncoder,
)
from ..encoding.valid import AttributesSchema

from . import PROG

LOGGER = logging.getLogger(__name__)


class EncodeCommandError(BaseError):
    """Base exception for encode command errors."""


def init_argument_parser(parser: ArgumentParser):
    """Initialize an argument parser with the module's arguments."""
    return arg.load_argument_groups(parser, *arg.group.get_registered(arg.CAT_ENCODE))


def parse_value(kind: str, raw: str):
    """Convert a command line value to the source type of an attribute kind."""
    if kind in (KIND_TIMESTAMP, KIND_DAYS):
        return raw
    try:
        value = float(raw) if kind == KIND_FLOAT else int(raw)
    except ValueError as err:
        raise EncodeCommandError(f"Invalid {kind} value: {raw}") from err
    if kind == KIND_UNSIGNED and value < 0:
        raise EncodeCommandError(f"Invalid {kind} value: {raw}")
    return value


def format_value(value: DomainInt, output_format: str = "dec") -> str:
    """Render an encoded value for output."""
    if output_format == "hex":
        return value.to_bytes().hex()
    return str(int(value))


def load_attributes(path: str) -> dict:
    """Load and validate a JSON file of named attribute values."""
    try:
        with open(path, "r", encoding="utf-8") as stream:
            data = json.load(stream)
    except (OSError, ValueError) as err:
        raise EncodeCommandError(f"Unable to read attributes file: {path}") from err
    try:
        return AttributesSchema().load({"attributes": data})["attributes"]
    except ValidationError as err:
        raise EncodeCommandError(
            f"Invalid attributes file {path}: {json.dumps(err.messages)}"
        ) from err


def encode(settings: Settings) -> str:
    """Encode the attribute value(s) named by the settings."""
    encoder = AttributeEncoder.from_settings(settings)
    output_format = settings.get_str("output.format", default="dec")

    attributes_path = settings.get_str("encoding.attributes")
    if attributes_path:
        encoded = encoder.encode_attributes(load_attributes(attributes_path))
        LOGGER.info("Encoded %d attributes from %s", len(encoded), attributes_path)
        rendered = {
            name: format_value(value, output_format)
            for name, value in encoded.items()
        }
        return json.dumps(rendered, indent=2)

    kind = settings.get_str("encoding.kind")
    value = parse_value(kind, settings.get_str("encoding.value"))
    return format_value(encoder.encode_as(kind, value), output_format)


def execute(argv: Sequence[str] = None):
    """Entrypoint."""
    parser = arg.create_argument_parser(prog=PROG)
    parser.prog += " encode"
    get_settings = init_argument_parser(parser)
    args = parser.parse_args(argv)
    try:
        settings = Settings(get_settings(args))
    except ArgsParseError as err:
        parser.exit(2, f"{parser.prog}: error: {err.roll_up}\n")
    common_config(settings)

    try:
        print(encode(settings))
    except BaseError as err:
        print(f"Error: {err.roll_up}", file=sys.stderr)
        sys.exit(1)


def main():
    """Execute the main line."""
    if __name__ == "__main__":
        execute()


main()
