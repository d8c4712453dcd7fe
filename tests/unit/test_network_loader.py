import pytest

from apps.network import ConfigStore, YamlConfigBehavior
from lib.config.network_loader import load_network_config, parse_network_config


CONFIG = """
network:
  options: [verbose, verbose]
  endpoints:
    api: "https://api.example.com/v1"
    auth:
      scheme: https
      host: auth.example.com
      port: 8443
      path: /token
"""


def test_load_network_config(tmp_path):
    path = tmp_path / "network.yaml"
    path.write_text(CONFIG)
    cfg = load_network_config(path)
    assert list(cfg.endpoints) == ["api", "auth"]
    assert cfg.endpoints["api"].host == "api.example.com"
    assert cfg.endpoints["auth"].url == "https://auth.example.com:8443/token"
    assert cfg.options == ["verbose", "verbose"]


def test_empty_file_gives_empty_config(tmp_path):
    path = tmp_path / "network.yaml"
    path.write_text("")
    cfg = load_network_config(path)
    assert cfg.endpoints == {}
    assert cfg.options == []


@pytest.mark.parametrize(
    "raw",
    [
        {"network": []},
        {"network": {"endpoints": ["https://example.com"]}},
        {"network": {"endpoints": {"api": 42}}},
        {"network": {"options": "verbose"}},
        {"network": {"endpoints": {"api": {"hostname": "example.com"}}}},
    ],
)
def test_malformed_config_raises(raw):
    with pytest.raises(ValueError):
        parse_network_config(raw)


def test_yaml_behavior_populates_store(tmp_path):
    path = tmp_path / "network.yaml"
    path.write_text(CONFIG)
    store = ConfigStore(YamlConfigBehavior(path))
    assert store.endpoint_keys() == ["api", "auth"]
    assert store.lookup_default().value.path == "/v1"
    assert store.check_option("verbose")


def test_yaml_behavior_with_missing_file(tmp_path):
    store = ConfigStore(YamlConfigBehavior(tmp_path / "absent.yaml"))
    assert store.endpoint_keys() == []


def test_null_endpoint_key_is_rejected():
    with pytest.raises(ValueError):
        parse_network_config({"network": {"endpoints": {None: "https://example.com"}}})
