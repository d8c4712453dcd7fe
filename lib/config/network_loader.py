from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from lib.contracts.endpoint import EndpointDescriptor
from lib.utils.validation import ensure, ensure_mapping

from .yaml_loader import load_yaml


@dataclass
class NetworkConfig:
    """Typed view over ``network.yaml``.

    ``endpoints`` keeps the order of the file, which matters because the
    configuration store treats its first endpoint as the default one.  The
    raw mapping is retained for application specific keys.
    """

    raw: Dict[str, Any] = field(default_factory=dict)
    endpoints: Dict[str, EndpointDescriptor] = field(default_factory=dict)
    options: List[str] = field(default_factory=list)


def _descriptor(key: str, value: Any) -> EndpointDescriptor:
    if isinstance(value, str):
        return EndpointDescriptor.from_url(value)
    ensure(isinstance(value, dict), f"endpoint {key!r} must be a URL or a mapping")
    return EndpointDescriptor(**value)


def parse_network_config(raw: Dict[str, Any]) -> NetworkConfig:
    """Build a :class:`NetworkConfig` from an already loaded mapping."""

    network = ensure_mapping(raw.get("network"), "network")
    endpoints = ensure_mapping(network.get("endpoints"), "network.endpoints")
    options = network.get("options") or []
    ensure(isinstance(options, list), "network.options must be a list")
    parsed: Dict[str, EndpointDescriptor] = {}
    for key, value in endpoints.items():
        ensure(isinstance(key, str) and bool(key), f"endpoint key {key!r} must be a non-empty string")
        parsed[key] = _descriptor(key, value)
    return NetworkConfig(
        raw=raw,
        endpoints=parsed,
        options=[str(o) for o in options],
    )


def load_network_config(path: Union[str, Path]) -> NetworkConfig:
    """Load ``network.yaml`` and return a :class:`NetworkConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.
    """

    return parse_network_config(load_yaml(path))
