"""Capability sets implemented by the blank services and their replacements."""

from __future__ import annotations

from typing import Optional, Protocol

import requests

from lib.contracts.endpoint import EndpointDescriptor, HeaderMap, NetworkRequest
from lib.contracts.result import Result


class ConfigProvider(Protocol):
    @staticmethod
    def language_code() -> str: ...

    def check_option(self, option: str) -> bool: ...

    def enable_option(self, option: str) -> None: ...

    def disable_option(self, option: str) -> None: ...

    def did_become_active(self) -> None: ...

    def will_resign_active(self) -> None: ...

    def will_enter_foreground(self) -> None: ...

    def did_enter_background(self) -> None: ...

    def lookup_default(self) -> Result[EndpointDescriptor]: ...

    def lookup(self, key: str) -> Result[EndpointDescriptor]: ...

    def set_endpoint(self, descriptor: EndpointDescriptor, key: str) -> Result[None]: ...

    def headers_default(self) -> Result[HeaderMap]: ...

    def headers_for(self, key: str) -> Result[HeaderMap]: ...

    def build_request(self, url: str, key: Optional[str] = None) -> Result[NetworkRequest]: ...


class RequestRouter(Protocol):
    config: ConfigProvider

    @staticmethod
    def language_code() -> str: ...

    def check_option(self, option: str) -> bool: ...

    def enable_option(self, option: str) -> None: ...

    def disable_option(self, option: str) -> None: ...

    def did_become_active(self) -> None: ...

    def will_resign_active(self) -> None: ...

    def will_enter_foreground(self) -> None: ...

    def did_enter_background(self) -> None: ...

    def build_request(self, url: str, key: Optional[str] = None) -> Result[NetworkRequest]: ...

    def url_request(self, key: Optional[str] = None) -> Result[NetworkRequest]: ...

    def data_request(
        self, key: Optional[str] = None, method: str = "GET"
    ) -> Result[requests.PreparedRequest]: ...


__all__ = ["ConfigProvider", "RequestRouter"]
