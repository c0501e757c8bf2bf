from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; unknown keys fail fast.


class ProxyConfig(BaseModel):
    # Proxy settings are passed through to the registry without validation.
    model_config = ConfigDict(extra="forbid")
    url: str
    username: str | None = None
    password: str | None = None


class RegistryConfig(BaseModel):
    # Cross-run registry options; omitted fields keep the registry defaults.
    model_config = ConfigDict(extra="forbid")
    parsers: list[str] | None = None
    mock_base_class: str | None = None
    ignore: list[str] = Field(default_factory=list)
    proxy: ProxyConfig | None = None


class TracingConfig(BaseModel):
    # Function-name prefixes the stack tracer treats as assertion calls.
    model_config = ConfigDict(extra="forbid")
    prefixes: list[str] = Field(default_factory=lambda: ["assert"])

    @model_validator(mode="after")
    def _validate_prefixes(self) -> "TracingConfig":
        if not self.prefixes:
            raise ValueError("tracing.prefixes must not be empty")
        if any(not prefix for prefix in self.prefixes):
            raise ValueError("tracing.prefixes entries must be non-empty strings")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _validate_path(self) -> "LoggingConfig":
        # jsonl needs a target file; other kinds must not carry one.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.path is required when kind is jsonl")
        if self.kind != "jsonl" and self.path is not None:
            raise ValueError("logging.path is only valid when kind is jsonl")
        return self


class SuiteConfig(BaseModel):
    # Root config object consumed by the composition root.
    model_config = ConfigDict(extra="forbid")
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
