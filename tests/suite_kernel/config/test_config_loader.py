from __future__ import annotations

from pathlib import Path

import pytest

from suite_kernel.config.loader import ConfigError, load_config, load_yaml_config, parse_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "suite.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_yaml_config_returns_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "registry:\n  parsers: [native]\n")
    assert load_yaml_config(path) == {"registry": {"parsers": ["native"]}}


def test_load_yaml_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "[]\n")
    with pytest.raises(ConfigError):
        load_yaml_config(path)


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, ""))
    assert config.registry.parsers is None
    assert config.registry.mock_base_class is None
    assert config.registry.ignore == []
    assert config.tracing.prefixes == ["assert"]
    assert config.logging.kind == "none"


def test_full_config_is_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "registry:\n"
        "  parsers: [native, php]\n"
        "  mock_base_class: SimpleMock\n"
        "  ignore: [AbstractCase, BaseWebCase]\n"
        "  proxy:\n"
        "    url: http://proxy:8080\n"
        "    username: me\n"
        "tracing:\n"
        "  prefixes: [assert, expect]\n"
        "logging:\n"
        "  kind: jsonl\n"
        "  path: logs/suite.jsonl\n",
    )
    config = load_config(path)
    assert config.registry.parsers == ["native", "php"]
    assert config.registry.ignore == ["AbstractCase", "BaseWebCase"]
    assert config.registry.proxy is not None
    assert config.registry.proxy.url == "http://proxy:8080"
    assert config.registry.proxy.password is None
    assert config.tracing.prefixes == ["assert", "expect"]
    assert config.logging.path == "logs/suite.jsonl"


def test_unknown_keys_fail_fast() -> None:
    with pytest.raises(ConfigError):
        parse_config({"registry": {"parser": ["native"]}})


def test_empty_prefixes_rejected() -> None:
    with pytest.raises(ConfigError):
        parse_config({"tracing": {"prefixes": []}})


def test_jsonl_logging_requires_path() -> None:
    with pytest.raises(ConfigError):
        parse_config({"logging": {"kind": "jsonl"}})


def test_path_only_valid_for_jsonl() -> None:
    with pytest.raises(ConfigError):
        parse_config({"logging": {"kind": "stdout", "path": "x.jsonl"}})
