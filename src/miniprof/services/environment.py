"""Clock and host identity used in text report headers."""

import socket
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class HostEnvironment:
    """Supplies the machine name and current UTC time.

    Tests pass fixed callables to get deterministic headers.
    """

    machine_name: Callable[[], str] = field(default=socket.gethostname)
    utcnow: Callable[[], datetime] = field(default=_utcnow)


DEFAULT_ENVIRONMENT = HostEnvironment()
