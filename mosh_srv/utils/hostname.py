"""Hostname helpers."""


def strip_root_dot(name: str) -> str:
    """Remove the DNS root-zone terminator from a name.

    Only one trailing dot is removed; ``"host.."`` becomes ``"host."``.

    <parameters>
    name: Name as it appears in a DNS answer
    </parameters>

    <returns>
    Name without its final dot, or unchanged if there is none
    </returns>
    """
    if name.endswith("."):
        return name[:-1]
    return name


def validate_host(host: str) -> str:
    """Validate a hostname given on the command line.

    Args:
        host: The host name to validate

    Returns:
        Validated host name

    Raises:
        ValueError: If host name is invalid
    """
    if not host:
        raise ValueError("Host cannot be empty")

    if len(host) > 253:
        raise ValueError(f"Host name too long: {len(host)} chars")

    # Characters that can never appear in a DNS name
    suspicious_chars = ["/", "\\", ";", "&", "|", "$", "`", " ", "\n", "\r", "\x00"]
    for char in suspicious_chars:
        if char in host:
            raise ValueError(f"Host contains invalid characters: {host!r}")

    return host
