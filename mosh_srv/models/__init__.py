"""Data models for mosh-srv."""

from mosh_srv.models.connection import ConnectionType
from mosh_srv.models.invocation import Invocation
from mosh_srv.models.srv import PORT_OFFSET, PortRangeError, ServiceRecord

__all__ = [
    "ConnectionType",
    "Invocation",
    "PORT_OFFSET",
    "PortRangeError",
    "ServiceRecord",
]
