"""Parsed command line."""

from dataclasses import dataclass, field


@dataclass
class Invocation:
    """Hostname to look up plus arguments forwarded to the client."""

    program: str
    hostname: str
    shell_args: list[str] = field(default_factory=list)
