"""Remote shell client invocation."""

import logging
import shlex
import subprocess
from collections.abc import Sequence

from mosh_srv.models import ConnectionType, ServiceRecord

logger = logging.getLogger(__name__)

# Both mosh and ssh take -p for the port
PORT_FLAG = "-p"
NO_PTY_FLAG = "--no-ssh-pty"


class ShellExitError(Exception):
    """Client ran but exited with a non-zero status."""

    def __init__(self, hostname: str, returncode: int):
        """Initialize shell exit error.

        Args:
            hostname: Host the client was pointed at
            returncode: Client exit status
        """
        self.hostname = hostname
        self.returncode = returncode
        super().__init__(f"Shell to {hostname} exited with status {returncode}")


def build_shell_args(
    connection: ConnectionType,
    record: ServiceRecord,
    shell_args: Sequence[str] = (),
) -> list[str]:
    """Build the client command line for one endpoint.

    Layout: ``<binary> [shell_args...] -p <port>:<port+1000> --no-ssh-pty <host>``.

    Args:
        connection: Connection type selecting the client binary
        record: Endpoint to connect to
        shell_args: Arguments forwarded verbatim, ahead of the generated ones

    Returns:
        Argument vector, binary first

    Raises:
        PortRangeError: If the record's port leaves no room for the range
    """
    return [
        connection.binary,
        *shell_args,
        PORT_FLAG,
        record.port_range,
        NO_PTY_FLAG,
        record.hostname,
    ]


def call_shell(
    connection: ConnectionType,
    record: ServiceRecord,
    shell_args: Sequence[str] = (),
) -> int:
    """Run the client against one endpoint and wait for it.

    The client inherits stdin, stdout and stderr, so the session is fully
    interactive while it lasts.

    Args:
        connection: Connection type selecting the client binary
        record: Endpoint to connect to
        shell_args: Arguments forwarded verbatim to the client

    Returns:
        0 once the client has exited cleanly

    Raises:
        ShellExitError: If the client exits with a non-zero status
        PortRangeError: If no valid port range can be built
        OSError: If the client cannot be started at all
    """
    argv = build_shell_args(connection, record, shell_args)
    logger.info("Executing %s", shlex.join(argv))

    completed = subprocess.run(argv, check=False)
    if completed.returncode != 0:
        raise ShellExitError(record.hostname, completed.returncode)

    logger.debug("Shell to %s exited cleanly", record.hostname)
    return 0
