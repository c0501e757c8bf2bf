from .loader import ConfigError, load_config, load_yaml_config, parse_config
from .models import LoggingConfig, ProxyConfig, RegistryConfig, SuiteConfig, TracingConfig

__all__ = [
    "ConfigError",
    "load_config",
    "load_yaml_config",
    "parse_config",
    "SuiteConfig",
    "RegistryConfig",
    "ProxyConfig",
    "TracingConfig",
    "LoggingConfig",
]
