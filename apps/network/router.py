"""Blank request router.

:class:`Router` turns the endpoints held by a :class:`ConfigStore` into
outbound requests.  It never mutates the store; several routers may share
one.  Its option flags are its own and independent of the store's.
"""

from __future__ import annotations

from typing import Optional

import requests

from lib.contracts.endpoint import NetworkRequest
from lib.contracts.errors import CodeLocation, InvalidURL
from lib.contracts.result import Result
from lib.telemetry.errors import report_error
from lib.telemetry.logger import get_logger
from lib.utils import locale

from .behavior import BlankRouterBehavior, RouterBehavior
from .config_store import ConfigStore
from .options import OptionSet
from .protocols import ConfigProvider


logger = get_logger(__name__)


class Router:
    def __init__(
        self,
        config: Optional[ConfigProvider] = None,
        behavior: Optional[RouterBehavior] = None,
    ) -> None:
        self.config: ConfigProvider = config if config is not None else ConfigStore()
        self.behavior: RouterBehavior = behavior or BlankRouterBehavior()
        self.options = OptionSet()
        self.behavior.configure(self)

    @staticmethod
    def language_code() -> str:
        return locale.language_code()

    def check_option(self, option: str) -> bool:
        return self.options.check(option)

    def enable_option(self, option: str) -> None:
        self.options.enable(option)

    def disable_option(self, option: str) -> None:
        self.options.disable(option)

    def did_become_active(self) -> None:
        self.behavior.did_become_active()

    def will_resign_active(self) -> None:
        self.behavior.will_resign_active()

    def will_enter_foreground(self) -> None:
        self.behavior.will_enter_foreground()

    def did_enter_background(self) -> None:
        self.behavior.did_enter_background()

    def _fail(self, result: Result) -> Result:
        report_error(result.error)
        return result

    def build_request(self, url: str, key: Optional[str] = None) -> Result[NetworkRequest]:
        """Return a request for the literal ``url`` with the headers of ``key``.

        Without ``key`` the store's default endpoint is used.
        """

        result = self.config.build_request(url, key)
        if not result.ok:
            return self._fail(result)
        return result

    def url_request(self, key: Optional[str] = None) -> Result[NetworkRequest]:
        """Compose a request from the URL stored for ``key``.

        Fails with :class:`InvalidURL` when the descriptor's components do
        not make up a URL.
        """

        found = self.config.lookup_default() if key is None else self.config.lookup(key)
        if not found.ok:
            return self._fail(found)
        url = found.value.url
        if url is None:
            error = InvalidURL(
                f"endpoint {key or 'default'!r} does not form a valid URL",
                CodeLocation.capture(self, 1),
            )
            return self._fail(Result.failure(error))
        headers = self.config.headers_default() if key is None else self.config.headers_for(key)
        if not headers.ok:
            return self._fail(headers)
        return Result.success(NetworkRequest(url=url, headers=headers.value))

    def data_request(
        self, key: Optional[str] = None, method: str = "GET"
    ) -> Result[requests.PreparedRequest]:
        """Prepare a :mod:`requests` request for the endpoint of ``key``.

        Nothing is sent; pass the result to ``requests.Session.send``.
        """

        built = self.url_request(key)
        if not built.ok:
            return Result.failure(built.error)
        request = built.value
        try:
            prepared = requests.Request(
                method=method, url=request.url, headers=dict(request.headers)
            ).prepare()
        except requests.exceptions.RequestException as exc:
            # relative endpoints compose fine but cannot be sent
            error = InvalidURL(
                f"cannot prepare {request.url!r}: {exc}",
                CodeLocation.capture(self, 1),
            )
            return self._fail(Result.failure(error))
        logger.debug("prepared %s %s", method, prepared.url)
        return Result.success(prepared)


__all__ = ["Router"]
