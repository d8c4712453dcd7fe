"""Pluggable behaviours for the configuration store and the router.

Applications customise the blank services by passing a behaviour at
construction time instead of subclassing them.  A behaviour populates the
store (``configure``), contributes request headers (``headers_for``) and
receives the host application's lifecycle notifications.  The ``Blank*``
classes implement every hook as a no-op and are the defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Union

from lib.config.network_loader import load_network_config
from lib.contracts.endpoint import HeaderMap
from lib.contracts.result import Result
from lib.telemetry.logger import get_logger

if TYPE_CHECKING:  # avoid import cycles with the services themselves
    from .config_store import ConfigStore
    from .router import Router


logger = get_logger(__name__)


class LifecycleHooks(Protocol):
    def did_become_active(self) -> None: ...

    def will_resign_active(self) -> None: ...

    def will_enter_foreground(self) -> None: ...

    def did_enter_background(self) -> None: ...


class ConfigBehavior(LifecycleHooks, Protocol):
    def configure(self, store: "ConfigStore") -> None: ...

    def headers_for(self, store: "ConfigStore", key: str) -> Result[HeaderMap]: ...


class RouterBehavior(LifecycleHooks, Protocol):
    def configure(self, router: "Router") -> None: ...


class BlankLifecycle:
    """No-op lifecycle hooks."""

    # Scene became active; restart paused work.
    def did_become_active(self) -> None:
        pass

    # Scene is about to become inactive (e.g. an incoming call).
    def will_resign_active(self) -> None:
        pass

    # Background -> foreground; undo what entering the background did.
    def will_enter_foreground(self) -> None:
        pass

    # Foreground -> background; release shared resources.
    def did_enter_background(self) -> None:
        pass


class BlankConfigBehavior(BlankLifecycle):
    """Registers nothing and contributes no headers."""

    def configure(self, store: "ConfigStore") -> None:
        pass

    def headers_for(self, store: "ConfigStore", key: str) -> Result[HeaderMap]:
        return Result.success(HeaderMap())


class BlankRouterBehavior(BlankLifecycle):
    def configure(self, router: "Router") -> None:
        pass


class YamlConfigBehavior(BlankConfigBehavior):
    """Populate the store from a ``network.yaml`` file.

    A missing file leaves the store empty, matching the way the services
    fall back to their built-in defaults when ``config/*.yaml`` is absent.
    """

    def __init__(self, config_path: Union[str, Path] = "config/network.yaml") -> None:
        self.config_path = Path(config_path)

    def configure(self, store: "ConfigStore") -> None:
        if not self.config_path.exists():
            logger.info("no network configuration at %s", self.config_path)
            return
        cfg = load_network_config(self.config_path)
        for key, descriptor in cfg.endpoints.items():
            store.set_endpoint(descriptor, key).unwrap()
        for option in cfg.options:
            store.enable_option(option)
        logger.debug(
            "loaded %d endpoint(s) from %s", len(cfg.endpoints), self.config_path
        )


__all__ = [
    "BlankConfigBehavior",
    "BlankLifecycle",
    "BlankRouterBehavior",
    "ConfigBehavior",
    "LifecycleHooks",
    "RouterBehavior",
    "YamlConfigBehavior",
]
