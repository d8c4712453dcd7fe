"""Error reporting sink.

Errors detected by the configuration store or the router are handed to
:func:`report_error`.  The error is logged and forwarded to every registered
sink (crash reporters, test recorders, ...).  An error instance is only
delivered once, so a router passing along an error already reported by its
store does not produce a duplicate.
"""

from __future__ import annotations

from typing import Callable, List

from lib.contracts.errors import NetworkError

from .logger import get_logger


ErrorSink = Callable[[NetworkError], None]

logger = get_logger(__name__)
_SINKS: List[ErrorSink] = []


def register_sink(sink: ErrorSink) -> None:
    if sink not in _SINKS:
        _SINKS.append(sink)


def unregister_sink(sink: ErrorSink) -> None:
    if sink in _SINKS:
        _SINKS.remove(sink)


def clear_sinks() -> None:
    _SINKS.clear()


def report_error(error: NetworkError) -> None:
    if error.reported:
        return
    error.reported = True
    logger.warning("%s reported at %s", error, error.location)
    for sink in list(_SINKS):
        try:
            sink(error)
        except Exception:
            logger.exception("error sink %r failed", sink)


__all__ = ["ErrorSink", "clear_sinks", "register_sink", "report_error", "unregister_sink"]
