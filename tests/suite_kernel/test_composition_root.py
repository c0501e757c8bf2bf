from __future__ import annotations

import json
from pathlib import Path

import pytest

from suite_kernel.composition_root import (
    build_log_sink,
    build_runtime,
    get_context,
    get_runtime,
    reset_runtime,
)
from suite_kernel.config.models import LoggingConfig, SuiteConfig
from suite_kernel.context import ResourceFactories
from suite_kernel.observability.adapters.logging import JsonlLogSink, MemoryLogSink, StdoutLogSink
from suite_kernel.reflection import MappingReflector


@pytest.fixture(autouse=True)
def _fresh_default_runtime():
    reset_runtime()
    yield
    reset_runtime()


def test_build_runtime_wires_shared_collaborators() -> None:
    runtime = build_runtime()
    assert runtime.facade.registry is runtime.registry
    assert runtime.facade.get_context() is runtime.context
    assert runtime.tracer.prefixes == ("assert",)
    assert runtime.log_sink is None
    assert runtime.registry.preferred("HtmlReporter") is not None


def test_build_runtime_applies_config() -> None:
    config = SuiteConfig.model_validate(
        {
            "registry": {
                "parsers": ["native"],
                "mock_base_class": "LegacyMock",
                "ignore": ["AbstractCase"],
                "proxy": {"url": "http://proxy:8080", "username": "u", "password": "p"},
            },
            "tracing": {"prefixes": ["assert", "expect"]},
        }
    )
    runtime = build_runtime(config, reflector=MappingReflector({"AbstractCase": "UnitCase"}))
    facade = runtime.facade
    assert facade.get_parsers() == ["native"]
    assert runtime.registry.mock_base_class == "LegacyMock"
    assert facade.get_default_proxy() == "http://proxy:8080"
    assert facade.get_default_proxy_username() == "u"
    assert facade.get_default_proxy_password() == "p"
    assert facade.is_ignored("abstractcase")
    facade.ignore_parents_if_ignored(["AbstractCase"])
    assert facade.is_ignored("UnitCase")
    assert runtime.tracer.prefixes == ("assert", "expect")


def test_build_runtime_uses_given_resources_and_sink() -> None:
    resources = ResourceFactories()
    resources.register("clock", lambda: "frozen")
    sink = MemoryLogSink()
    runtime = build_runtime(resources=resources, log_sink=sink)
    assert runtime.context.get("clock") == "frozen"
    runtime.facade.ignore("Foo")
    assert "registry.ignore" in sink.texts()


def test_separate_runtimes_are_isolated() -> None:
    first = build_runtime()
    second = build_runtime()
    first.facade.ignore("Foo")
    assert not second.facade.is_ignored("Foo")
    assert first.context is not second.context


def test_default_runtime_is_built_once() -> None:
    runtime = get_runtime()
    assert get_runtime() is runtime
    assert get_context() is runtime.context


def test_reset_runtime_builds_a_fresh_default() -> None:
    runtime = get_runtime()
    runtime.facade.ignore("Foo")
    reset_runtime()
    assert get_runtime() is not runtime
    assert not get_runtime().facade.is_ignored("Foo")


def test_build_log_sink_kinds(tmp_path: Path) -> None:
    assert build_log_sink(LoggingConfig()) is None
    assert isinstance(build_log_sink(LoggingConfig(kind="stdout")), StdoutLogSink)
    sink = build_log_sink(LoggingConfig(kind="jsonl", path=str(tmp_path / "logs" / "suite.jsonl")))
    assert isinstance(sink, JsonlLogSink)
    sink.close()


def test_jsonl_logging_from_config(tmp_path: Path) -> None:
    path = tmp_path / "suite.jsonl"
    runtime = build_runtime(SuiteConfig.model_validate({"logging": {"kind": "jsonl", "path": str(path)}}))
    runtime.facade.ignore("Foo")
    assert isinstance(runtime.log_sink, JsonlLogSink)
    runtime.close()
    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert records[-1]["message"] == "registry.ignore"
    assert records[-1]["fields"] == {"class_name": "foo"}


def test_runtime_close_releases_jsonl_sink(tmp_path: Path) -> None:
    path = tmp_path / "suite.jsonl"
    runtime = build_runtime(SuiteConfig.model_validate({"logging": {"kind": "jsonl", "path": str(path)}}))
    runtime.facade.ignore("Foo")
    runtime.close()
    assert runtime.log_sink._file.closed
    assert path.read_text(encoding="utf-8").strip()


def test_runtime_close_without_closable_sink() -> None:
    # No sink, or a sink without close(), makes close() a no-op.
    build_runtime().close()
    build_runtime(log_sink=MemoryLogSink()).close()
