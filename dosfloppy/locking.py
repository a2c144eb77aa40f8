"""Advisory locking of a device to keep concurrent writers apart."""

from __future__ import annotations

import errno
import fcntl
import time
from enum import Enum

DEFAULT_LOCK_TIMEOUT = 30
"""Seconds to keep retrying before giving up on a lock."""

_RETRY_INTERVAL = 0.1
_RETRYABLE = {errno.EWOULDBLOCK, errno.EAGAIN, errno.EINTR}


class LockResult(Enum):
    """Outcome of :func:`lock_device`."""

    ACQUIRED = "acquired"
    BUSY = "busy"


def lock_device(fd: int, exclusive: bool = False,
                timeout: float = DEFAULT_LOCK_TIMEOUT,
                nolock: bool = False) -> LockResult:
    """Lock ``fd``, shared or exclusive, retrying for about ``timeout`` seconds.

    Returns ``LockResult.BUSY`` when someone else still holds the lock once
    the time is up.  Errors other than the lock being held raise OSError.
    With ``nolock`` the device is considered locked without touching it.
    """
    if nolock:
        return LockResult.ACQUIRED
    operation = (fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH) | fcntl.LOCK_NB
    max_retries = timeout * 10
    retries = 0
    while True:
        try:
            fcntl.flock(fd, operation)
        except OSError as exc:
            if exc.errno not in _RETRYABLE:
                raise
        else:
            return LockResult.ACQUIRED
        if retries >= max_retries:
            return LockResult.BUSY
        retries += 1
        time.sleep(_RETRY_INTERVAL)