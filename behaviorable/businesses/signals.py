"""Result type returned by save/delete interceptors."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Signal(str, Enum):
    # Keep going; the operation may still succeed.
    CONTINUE = "continue"
    # Stop the whole operation now and report failure.
    ABORT = "abort"
    # Skip persistence but run the rest of the chain; the operation reports failure.
    SOFT_STOP = "soft_stop"

    @classmethod
    def coerce(cls, value: "SignalLike") -> "Signal":
        """Map ``True``/``False``/``None`` onto the matching signal."""
        if isinstance(value, cls):
            return value
        if value is True:
            return cls.CONTINUE
        if value is False:
            return cls.ABORT
        if value is None:
            return cls.SOFT_STOP
        raise TypeError(f"Interceptor returned {value!r}; expected a Signal, bool or None")


SignalLike = Union[Signal, Optional[bool]]
