"""Blank network configuration store.

The store maps string codes to :class:`EndpointDescriptor` values and keeps
a set of option flags.  It builds outbound requests by attaching the headers
registered for a code to a caller supplied URL.  Everything an application
needs to customise (initial endpoints, headers, lifecycle reactions) lives in
the injected :class:`~apps.network.behavior.ConfigBehavior`.

Every fallible operation returns a :class:`Result`; errors are reported to the
error sink where they are detected.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from lib.contracts.endpoint import EndpointDescriptor, HeaderMap, NetworkRequest
from lib.contracts.errors import CodeLocation, InvalidParameter, NotFound
from lib.contracts.result import Result
from lib.telemetry.errors import report_error
from lib.telemetry.logger import get_logger
from lib.utils import locale

from .behavior import BlankConfigBehavior, ConfigBehavior
from .options import OptionSet


logger = get_logger(__name__)


class ConfigStore:
    """Code keyed endpoint configuration.

    Parameters
    ----------
    behavior:
        Customisation hooks.  ``behavior.configure(store)`` runs once at the
        end of construction.

    The endpoint mapping itself is not synchronised; share a store between
    threads only for reading.
    """

    def __init__(self, behavior: Optional[ConfigBehavior] = None) -> None:
        self.behavior: ConfigBehavior = behavior or BlankConfigBehavior()
        self.options = OptionSet()
        self._endpoints: Dict[str, EndpointDescriptor] = {}
        self.behavior.configure(self)

    @staticmethod
    def language_code() -> str:
        return locale.language_code()

    # ─── Options ──────────────────────────────────────────────────────────
    def check_option(self, option: str) -> bool:
        return self.options.check(option)

    def enable_option(self, option: str) -> None:
        self.options.enable(option)

    def disable_option(self, option: str) -> None:
        self.options.disable(option)

    # ─── Lifecycle ────────────────────────────────────────────────────────
    def did_become_active(self) -> None:
        self.behavior.did_become_active()

    def will_resign_active(self) -> None:
        self.behavior.will_resign_active()

    def will_enter_foreground(self) -> None:
        self.behavior.will_enter_foreground()

    def did_enter_background(self) -> None:
        self.behavior.did_enter_background()

    # ─── Endpoints ────────────────────────────────────────────────────────
    def endpoint_keys(self) -> List[str]:
        return list(self._endpoints)

    def _default_key(self) -> str:
        # The first registered code, whether or not a "default" code exists.
        return next(iter(self._endpoints), "")

    def lookup_default(self) -> Result[EndpointDescriptor]:
        return self.lookup(self._default_key())

    def lookup(self, key: str) -> Result[EndpointDescriptor]:
        descriptor = self._endpoints.get(key)
        if descriptor is None:
            error = NotFound(
                f"no endpoint registered for code {key!r}",
                CodeLocation.capture(self, 1),
                key=key,
            )
            report_error(error)
            return Result.failure(error)
        return Result.success(descriptor)

    def set_endpoint(self, descriptor: EndpointDescriptor, key: str) -> Result[None]:
        if not key:
            error = InvalidParameter(
                "endpoint code must not be empty",
                CodeLocation.capture(self, 1),
                parameter="key",
            )
            report_error(error)
            return Result.failure(error)
        self._endpoints[key] = descriptor
        logger.debug("endpoint %r set to %s", key, descriptor.url)
        return Result.success()

    # ─── Headers ──────────────────────────────────────────────────────────
    def headers_default(self) -> Result[HeaderMap]:
        return self.headers_for(self._default_key())

    def headers_for(self, key: str) -> Result[HeaderMap]:
        return self.behavior.headers_for(self, key)

    # ─── Requests ─────────────────────────────────────────────────────────
    def build_request(self, url: str, key: Optional[str] = None) -> Result[NetworkRequest]:
        """Attach the headers of ``key`` (or the default code) to ``url``.

        The descriptor must exist even though ``url`` is used verbatim; the
        caller is expected to have derived ``url`` from it.
        """

        if key is None:
            found = self.lookup_default()
            headers = self.headers_default() if found.ok else None
        else:
            found = self.lookup(key)
            headers = self.headers_for(key) if found.ok else None
        if not found.ok:
            return Result.failure(found.error)
        if not headers.ok:
            report_error(headers.error)
            return Result.failure(headers.error)
        return Result.success(NetworkRequest(url=url, headers=headers.value))


__all__ = ["ConfigStore"]
