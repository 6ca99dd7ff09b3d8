"""aries_credx package entry point."""

import sys


def run(args):
    """Dispatch `aries-credx <command> [options]` to the named command."""
    from .commands import run_command  # noqa

    command, argv = None, args[1:]
    if argv and argv[0] and not argv[0].startswith("-"):
        command, argv = argv[0], argv[1:]

    run_command(command, argv)


def main(args):
    """Execute default entry point."""
    if __name__ == "__main__":
        run(args)


main(sys.argv)
