"""Blank network configuration and routing services.

:class:`ConfigStore` holds code keyed endpoint descriptors and option flags;
:class:`Router` builds outbound requests from a store.  Both are usable as
they are (they register nothing and add no headers) and are customised by
passing behaviours from :mod:`apps.network.behavior`.
"""

from .behavior import (
    BlankConfigBehavior,
    BlankRouterBehavior,
    ConfigBehavior,
    RouterBehavior,
    YamlConfigBehavior,
)
from .config_store import ConfigStore
from .options import OptionSet
from .protocols import ConfigProvider, RequestRouter
from .router import Router


__all__ = [
    "BlankConfigBehavior",
    "BlankRouterBehavior",
    "ConfigBehavior",
    "ConfigProvider",
    "ConfigStore",
    "OptionSet",
    "RequestRouter",
    "Router",
    "RouterBehavior",
    "YamlConfigBehavior",
]
