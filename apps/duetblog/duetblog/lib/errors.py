"""Shared error handling for duetblog.

CLI exit codes follow the HTTP status a render error would get from the
server, one digit per status class:

    0  success
    1  unexpected error
    4  content not found (404)
    5  render failure (500)
"""

import sys
from typing import NoReturn

import typer

from duet import DuetError

EXIT_UNEXPECTED = 1


def exit_code_for(error: BaseException) -> int:
    """Get the process exit code for an error."""
    if isinstance(error, DuetError):
        return error.status_code // 100
    return EXIT_UNEXPECTED


def exit_with_error(message: str, exit_code: int = EXIT_UNEXPECTED) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report a render error and exit with its status class."""
    if isinstance(error, DuetError):
        exit_with_error(str(error), exit_code_for(error))
    exit_with_error(f"Unexpected {type(error).__name__}: {error}", EXIT_UNEXPECTED)
