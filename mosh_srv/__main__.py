"""Entry point for mosh-srv."""

import logging
import sys
from collections.abc import Sequence

from mosh_srv.cli import USAGE_EXIT_CODE, UsageError, configure_logging, parse_args
from mosh_srv.config import Settings
from mosh_srv.models import ConnectionType
from mosh_srv.services import (
    ResolutionError,
    UnsupportedConnectionError,
    dispatch,
    query_srv,
)

logger = logging.getLogger("mosh_srv.main")

# SSH is declared but has no lookup yet
CONNECTION = ConnectionType.MOSH

FATAL_EXIT_CODE = 1


def exit_status(returncode: int) -> int:
    """Translate a child return code into a shell-style exit status.

    subprocess reports death by signal N as -N; shells report it as 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def main(argv: Sequence[str] | None = None, connection: object = CONNECTION) -> int:
    """Resolve the hostname's endpoints and connect to the first that works.

    This is the only place errors become exit statuses.

    Args:
        argv: Argument vector, sys.argv if None
        connection: Connection type to use

    Returns:
        Process exit status
    """
    settings = Settings.from_env()
    configure_logging(settings)

    try:
        invocation = parse_args(sys.argv if argv is None else argv)
    except UsageError as e:
        if e.reason:
            print(f"error: {e.reason}", file=sys.stderr)
        print(e.usage, end="")
        return USAGE_EXIT_CODE

    logger.debug("Arguments: hostname=%s shell_args=%s", invocation.hostname, invocation.shell_args)

    try:
        records = query_srv(connection, invocation.hostname, lifetime=settings.dns_lifetime)
    except UnsupportedConnectionError as e:
        logger.critical("%s", e)
        return FATAL_EXIT_CODE
    except ResolutionError as e:
        logger.error("Error querying SRV records: %s", e)
        return FATAL_EXIT_CODE

    try:
        result = dispatch(connection, records, invocation.shell_args)
    except OSError as e:
        logger.error("Cannot start shell: %s", e)
        return FATAL_EXIT_CODE

    if not result.succeeded:
        logger.error(
            "All %d endpoint(s) for %s failed (%d attempted)",
            len(records),
            invocation.hostname,
            result.attempts,
        )
        return exit_status(result.returncode) or FATAL_EXIT_CODE

    logger.debug("Session on %s ended after %d attempt(s)", result.hostname, result.attempts)
    return exit_status(result.returncode)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
