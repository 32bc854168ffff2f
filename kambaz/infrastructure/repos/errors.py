from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError

from kambaz.application.errors import StorageUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Re-raise driver connectivity failures as ``StorageUnavailable``."""
    try:
        yield
    except (OperationalError, InterfaceError, ConnectionError) as exc:
        logger.error("Storage unavailable while %s: %s", action, exc)
        raise StorageUnavailable(f"Storage unavailable while {action}") from exc
