"""
stencil Common Package

Shared primitives used across all stencil packages.

This package provides:
- Exception classes for consistent error handling
- Constants for supported engine versions and defaults
- A structured logger

Usage:
    from stencil_common import RenderError, get_logger, EngineVersions
"""

# Error classes
from .errors import (
    StencilError,
    CompileError,
    FormatError,
    RenderError,
    DecoratorError,
    TemplateNotFoundError,
    ConfigError,
)

# Constants
from .constants import (
    STENCIL_VERSION,
    EngineVersions,
    EnvVars,
    SUPPORTED_ENGINE_VERSIONS,
    DEFAULT_ENGINE_VERSION,
    PRECOMPILED_PATTERN,
    DEFAULT_TEMPLATE_EXTENSION,
    LOG_LEVELS,
)

# Logger
from .logger import (
    StencilLogger,
    get_logger,
    configure_logging,
    set_request_id,
    get_request_id,
    clear_request_id,
)

__version__ = STENCIL_VERSION

__all__ = [
    # Errors
    "StencilError",
    "CompileError",
    "FormatError",
    "RenderError",
    "DecoratorError",
    "TemplateNotFoundError",
    "ConfigError",
    # Constants
    "STENCIL_VERSION",
    "EngineVersions",
    "EnvVars",
    "SUPPORTED_ENGINE_VERSIONS",
    "DEFAULT_ENGINE_VERSION",
    "PRECOMPILED_PATTERN",
    "DEFAULT_TEMPLATE_EXTENSION",
    "LOG_LEVELS",
    # Logger
    "StencilLogger",
    "get_logger",
    "configure_logging",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
]
