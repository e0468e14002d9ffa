import logging
import sys

from rich.pretty import pprint

from docbot import *

__prog__ = "tinygit"


class Git(CommandSet):
    """Version control, the tiny edition."""

    class Push(Command):
        """
        `push <branch> [--force]` Push a branch.

        # Arguments
        branch: The branch to push.
        --force: Anything non-empty forces the push.
        """
        branch = Argument()
        force = Argument()

    class Status(Command):
        """`(status|st)` Show the working tree status."""


class Help(Command):
    """
    `help [command...]` Show help for a command.

    # Arguments
    command: The command to describe.
    """
    command = Argument(Git, path=True)


class Cli(CommandSet, commands=(*Git.__commands__, Help)):
    """Version control, the tiny edition."""


def run(arguments):
    if arguments[:1] in (["-v"], ["--verbose"]):
        configure(logging.DEBUG)
        arguments = arguments[1:]

    try:
        value = Cli.parse(arguments or ["help"])
    except CommandParseError as error:
        report(error)
        return 1

    match value:
        case Help(command):
            display(Git, command)
        case _:
            pprint(value)
    return 0


if __name__ == '__main__':
    sys.exit(run(sys.argv[1:]))
