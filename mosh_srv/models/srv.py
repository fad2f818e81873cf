"""SRV record data models."""

from dataclasses import dataclass
from typing import Final

from mosh_srv.utils.hostname import strip_root_dot

# Offset from the advertised port to the top of the client's UDP port range
PORT_OFFSET: Final[int] = 1000
MAX_PORT: Final[int] = 65535


class PortRangeError(ValueError):
    """Advertised port leaves no room for the port range."""

    def __init__(self, port: int):
        """Initialize port range error.

        Args:
            port: Port advertised by the SRV record
        """
        self.port = port
        super().__init__(
            f"Port {port} + {PORT_OFFSET} exceeds the highest port {MAX_PORT}"
        )


@dataclass(frozen=True)
class ServiceRecord:
    """One SRV answer: where the service lives and how preferred it is."""

    target: str
    port: int
    priority: int = 0
    weight: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= MAX_PORT:
            raise ValueError(f"Invalid port: {self.port}")

    @property
    def hostname(self) -> str:
        """Target with the root-zone dot removed.

        Returns:
            Hostname suitable for handing to the client
        """
        return strip_root_dot(self.target)

    @property
    def port_range(self) -> str:
        """Port range for the client's ``-p`` flag.

        Returns:
            ``"<port>:<port + 1000>"``

        Raises:
            PortRangeError: If the upper bound is not a valid port
        """
        upper = self.port + PORT_OFFSET
        if upper > MAX_PORT:
            raise PortRangeError(self.port)
        return f"{self.port}:{upper}"

    @property
    def is_unavailable(self) -> bool:
        """Target ``.`` means the service is decidedly not offered here."""
        return self.target == "."

    def __str__(self) -> str:
        return (
            f"{self.hostname}:{self.port} "
            f"priority={self.priority} weight={self.weight}"
        )
