"""SRV lookup for remote shell endpoints."""

import logging

import dns.exception
import dns.resolver

from mosh_srv.models import ConnectionType, ServiceRecord

logger = logging.getLogger(__name__)


class UnsupportedConnectionError(Exception):
    """Connection type has no lookup implementation."""

    def __init__(self, connection: object, reason: str):
        """Initialize unsupported connection error.

        Args:
            connection: Selector that was requested
            reason: Human readable explanation
        """
        self.connection = connection
        super().__init__(reason)


class ResolutionError(Exception):
    """SRV lookup failed or produced no usable record."""

    def __init__(self, hostname: str, original_error: Exception | None = None, reason: str = ""):
        """Initialize resolution error.

        Args:
            hostname: Hostname that was looked up
            original_error: Resolver exception, if any
            reason: Explanation used when there is no resolver exception
        """
        self.hostname = hostname
        self.original_error = original_error
        detail = original_error if original_error is not None else reason
        super().__init__(f"Cannot resolve SRV records for {hostname}: {detail}")


def check_connection(connection: object) -> ConnectionType:
    """Ensure a connection type can be looked up.

    Args:
        connection: Requested selector

    Returns:
        The selector, once known to be implemented

    Raises:
        UnsupportedConnectionError: For SSH or anything that is not a ConnectionType
    """
    if not isinstance(connection, ConnectionType):
        raise UnsupportedConnectionError(connection, "Unknown connection type")
    if not connection.implemented:
        raise UnsupportedConnectionError(
            connection,
            f"{connection.name} connection is not implemented yet",
        )
    return connection


def query_srv(
    connection: ConnectionType,
    hostname: str,
    resolver: dns.resolver.Resolver | None = None,
    lifetime: float | None = None,
) -> list[ServiceRecord]:
    """Look up the SRV records advertising a remote shell on a domain.

    The connection type is checked before anything touches the network.
    Records come back in the processing order dnspython derives from
    priority and weight; they are not sorted again here. Short names
    are tried against the system search domains, as getaddrinfo would.

    Args:
        connection: Connection type selecting the service/protocol labels
        hostname: Domain to look under
        resolver: Resolver to use (defaults to one built from system config)
        lifetime: Total time allowed for the lookup, resolver default if None

    Returns:
        Records in the order they should be tried

    Raises:
        UnsupportedConnectionError: If the connection type cannot be looked up
        ResolutionError: If the lookup fails or yields no usable record
    """
    connection = check_connection(connection)
    qname = connection.srv_name(hostname)

    try:
        if resolver is None:
            resolver = dns.resolver.Resolver()
        logger.debug("Querying SRV %s", qname)
        answer = resolver.resolve(qname, "SRV", lifetime=lifetime, search=True)
    except dns.exception.DNSException as e:
        raise ResolutionError(hostname, e) from e

    records = []
    for rdata in answer.rrset.processing_order():
        record = ServiceRecord(
            target=rdata.target.to_text(),
            port=rdata.port,
            priority=rdata.priority,
            weight=rdata.weight,
        )
        if record.is_unavailable:
            logger.warning("Skipping %s: service explicitly unavailable", qname)
            continue
        records.append(record)

    if not records:
        raise ResolutionError(hostname, reason="no usable SRV record")

    logger.info("Resolved %d endpoint(s) for %s", len(records), qname)
    for record in records:
        logger.debug("SRV %s", record)
    return records
