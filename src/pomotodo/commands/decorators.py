"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomotodo.core.intents import IntentError
from pomotodo.ui.formatters import format_error
from pomotodo.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    get_exit_code_name,
)
from pomotodo.utils.logger import get_logger


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Wrap a command with logging and uniform error reporting."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, IntentError) as e:
            exit_code = getattr(e, "exit_code", ERROR_INVALID_ARGS)
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                elapsed,
                get_exit_code_name(exit_code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
