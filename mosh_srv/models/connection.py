"""Connection type selector."""

from enum import Enum


class ConnectionType(Enum):
    """Remote shell flavour to look up and launch.

    Only MOSH is implemented. SSH is declared so the lookup and launch
    paths have somewhere to grow, but resolving it always fails.
    """

    MOSH = "mosh"
    SSH = "ssh"

    @property
    def service(self) -> str:
        """SRV service label, without the leading underscore."""
        return self.value

    @property
    def protocol(self) -> str:
        """SRV transport label, without the leading underscore."""
        return "udp" if self is ConnectionType.MOSH else "tcp"

    @property
    def binary(self) -> str:
        """Client executable, looked up on PATH."""
        return self.value

    @property
    def implemented(self) -> bool:
        """Whether a lookup for this type is supported."""
        return self is ConnectionType.MOSH

    def srv_name(self, hostname: str) -> str:
        """Build the SRV owner name, e.g. ``_mosh._udp.example.com``."""
        return f"_{self.service}._{self.protocol}.{hostname}"
