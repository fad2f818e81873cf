"""Command line parsing and logging setup."""

import logging
import os
import sys
from collections.abc import Sequence

from mosh_srv.config import Settings
from mosh_srv.models import Invocation
from mosh_srv.utils.console import ColorfulFormatter
from mosh_srv.utils.hostname import validate_host

USAGE_EXIT_CODE = 255

USAGE = """Mosh SRV
{program} hostname [mosh arguments...]

The hostname argument is required.
"""


class UsageError(Exception):
    """Command line is missing the hostname or has a malformed one."""

    def __init__(self, program: str, reason: str = ""):
        """Initialize usage error.

        Args:
            program: Program name as invoked
            reason: What was wrong, empty when the hostname is just missing
        """
        self.program = program
        self.reason = reason
        super().__init__(reason or "hostname is required")

    @property
    def usage(self) -> str:
        """Usage text naming the program."""
        return USAGE.format(program=self.program)


def parse_args(argv: Sequence[str]) -> Invocation:
    """Split ``argv`` into the hostname and the client's arguments.

    Everything after the hostname is forwarded untouched, flags included,
    so no option parsing happens here.

    Args:
        argv: Full argument vector, program name first

    Returns:
        Parsed invocation

    Raises:
        UsageError: If no hostname was given or it is not a valid name
    """
    program = os.path.basename(argv[0]) if argv else "mosh-srv"
    if len(argv) < 2 or not argv[1]:
        raise UsageError(program)

    try:
        hostname = validate_host(argv[1])
    except ValueError as e:
        raise UsageError(program, str(e)) from e

    return Invocation(program=program, hostname=hostname, shell_args=list(argv[2:]))


def configure_logging(settings: Settings) -> None:
    """Attach the colorful stderr handler to the mosh_srv logger.

    Safe to call more than once; the handler is only added the first time.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("mosh_srv")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not any(isinstance(h.formatter, ColorfulFormatter) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    # Suppress noisy third-party loggers
    logging.getLogger("dns").setLevel(logging.WARNING)
