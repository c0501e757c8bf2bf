from .composition_root import SuiteRuntime, build_runtime, get_context, get_runtime, reset_runtime
from .context import ResourceFactories, ResourceFactoryError, RunContext, UnknownResourceError
from .facade import SuiteFacade
from .reflection import ClassIndex, MappingReflector, Reflector
from .registry import REGISTRY_DEFAULTS, PreferredPool, Registry, capability_tags
from .reporters import HtmlReporter, Reporter, TextReporter, XmlReporter
from .stack_trace import StackFrame, StackTracer
from .version import get_version

__all__ = [
    "SuiteRuntime",
    "build_runtime",
    "get_context",
    "get_runtime",
    "reset_runtime",
    "ResourceFactories",
    "ResourceFactoryError",
    "RunContext",
    "UnknownResourceError",
    "SuiteFacade",
    "ClassIndex",
    "MappingReflector",
    "Reflector",
    "REGISTRY_DEFAULTS",
    "PreferredPool",
    "Registry",
    "capability_tags",
    "HtmlReporter",
    "Reporter",
    "TextReporter",
    "XmlReporter",
    "StackFrame",
    "StackTracer",
    "get_version",
]
