"""Try each resolved endpoint until one session ends cleanly."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from mosh_srv.models import ConnectionType, PortRangeError, ServiceRecord
from mosh_srv.services.shell import ShellExitError, call_shell

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Outcome of walking the endpoint list."""

    attempts: int = 0
    returncode: int = 0
    succeeded: bool = False
    hostname: str | None = None


def dispatch(
    connection: ConnectionType,
    records: Iterable[ServiceRecord],
    shell_args: Sequence[str] = (),
    invoke: Callable[[ConnectionType, ServiceRecord, Sequence[str]], int] | None = None,
) -> DispatchResult:
    """Invoke the client for each record in order, stopping at the first success.

    A client that exits non-zero, or a record whose port cannot form a
    range, moves on to the next record. Any other exception propagates
    and the remaining records are not tried.

    Args:
        connection: Connection type passed through to the invoker
        records: Endpoints in the order to try them
        shell_args: Arguments forwarded to every client invocation
        invoke: Invoker for one endpoint, defaults to call_shell

    Returns:
        DispatchResult with the last status seen
    """
    if invoke is None:
        invoke = call_shell
    result = DispatchResult()

    for record in records:
        logger.info("Trying host %s:%d", record.hostname, record.port)
        result.hostname = record.hostname

        try:
            result.returncode = invoke(connection, record, shell_args)
        except PortRangeError as e:
            logger.warning("Skipping %s: %s", record.hostname, e)
            continue
        except ShellExitError as e:
            result.attempts += 1
            result.returncode = e.returncode
            logger.warning("%s, trying next endpoint", e)
            continue

        result.attempts += 1
        result.succeeded = True
        return result

    return result
