"""Services for mosh-srv."""

from mosh_srv.services.dispatch import DispatchResult, dispatch
from mosh_srv.services.resolver import (
    ResolutionError,
    UnsupportedConnectionError,
    check_connection,
    query_srv,
)
from mosh_srv.services.shell import ShellExitError, build_shell_args, call_shell

__all__ = [
    "DispatchResult",
    "ResolutionError",
    "ShellExitError",
    "UnsupportedConnectionError",
    "build_shell_args",
    "call_shell",
    "check_connection",
    "dispatch",
    "query_srv",
]
