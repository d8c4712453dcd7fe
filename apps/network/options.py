"""Thread safe option flags."""

from __future__ import annotations

import threading
from typing import Iterable, List


class OptionSet:
    """Set of enabled option names guarded by a lock.

    Presence means enabled.  Each store and router owns its own instance.
    """

    def __init__(self, options: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._options: List[str] = []
        for option in options:
            self.enable(option)

    def check(self, option: str) -> bool:
        with self._lock:
            return option in self._options

    def enable(self, option: str) -> None:
        with self._lock:
            if option not in self._options:
                self._options.append(option)

    def disable(self, option: str) -> None:
        with self._lock:
            self._options = [o for o in self._options if o != option]

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._options)

    def __len__(self) -> int:
        with self._lock:
            return len(self._options)
