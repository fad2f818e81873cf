"""Utilities for mosh-srv."""

from mosh_srv.utils.console import ColorfulFormatter
from mosh_srv.utils.hostname import strip_root_dot, validate_host

__all__ = [
    "ColorfulFormatter",
    "strip_root_dot",
    "validate_host",
]
