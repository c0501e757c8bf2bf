from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from suite_kernel.config.models import LoggingConfig, SuiteConfig
from suite_kernel.context import ResourceFactories, RunContext
from suite_kernel.facade import SuiteFacade
from suite_kernel.observability.adapters.logging import JsonlLogSink, StdoutLogSink
from suite_kernel.observability.domain.logging import LogSink
from suite_kernel.reflection import ClassIndex, Reflector
from suite_kernel.registry import Registry
from suite_kernel.stack_trace import StackTracer


@dataclass(frozen=True, slots=True)
class SuiteRuntime:
    # Bundle of the wired collaborators for one test process.
    facade: SuiteFacade
    registry: Registry
    context: RunContext
    tracer: StackTracer
    log_sink: LogSink | None = None

    def close(self) -> None:
        # Release the log sink's resources when it holds any (e.g. a JSONL file).
        close = getattr(self.log_sink, "close", None)
        if callable(close):
            close()


def build_runtime(
    config: SuiteConfig | None = None,
    *,
    reflector: Reflector | None = None,
    resources: ResourceFactories | None = None,
    log_sink: LogSink | None = None,
) -> SuiteRuntime:
    # Composition root: one registry, one run context, one tracer, wired explicitly.
    cfg = config if config is not None else SuiteConfig()
    sink = log_sink if log_sink is not None else build_log_sink(cfg.logging)

    registry = Registry.init_defaults(log_sink=sink)
    registry_cfg = cfg.registry
    if registry_cfg.parsers is not None:
        registry.set_parsers(registry_cfg.parsers)
    if registry_cfg.mock_base_class is not None:
        registry.set_mock_base_class(registry_cfg.mock_base_class)
    if registry_cfg.proxy is not None:
        proxy = registry_cfg.proxy
        registry.use_proxy(proxy.url, proxy.username, proxy.password)
    for class_name in registry_cfg.ignore:
        registry.ignore(class_name)

    context = RunContext(resources, log_sink=sink)
    facade = SuiteFacade(
        registry,
        context,
        reflector if reflector is not None else ClassIndex(),
        log_sink=sink,
    )
    tracer = StackTracer(cfg.tracing.prefixes)
    return SuiteRuntime(facade=facade, registry=registry, context=context, tracer=tracer, log_sink=sink)


def build_log_sink(config: LoggingConfig) -> LogSink | None:
    if config.kind == "none":
        return None
    if config.kind == "stdout":
        return StdoutLogSink()
    if config.kind == "jsonl":
        assert config.path is not None  # validated by config model
        return JsonlLogSink(Path(config.path))
    raise ValueError(f"Unsupported log sink kind: {config.kind}")


_default_runtime: SuiteRuntime | None = None


def get_runtime() -> SuiteRuntime:
    # Process-wide default for callers that cannot have the runtime injected.
    global _default_runtime
    if _default_runtime is None:
        _default_runtime = build_runtime()
    return _default_runtime


def get_context() -> RunContext:
    return get_runtime().context


def reset_runtime() -> None:
    # Drop the process default; the next get_runtime() builds a fresh one.
    global _default_runtime
    _default_runtime = None
