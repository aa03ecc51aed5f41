"""
stencil Shared Constants

Single source of truth for supported engine versions, defaults and
environment variable names.

Usage:
    from stencil_common.constants import SUPPORTED_ENGINE_VERSIONS

    if version not in SUPPORTED_ENGINE_VERSIONS:
        version = DEFAULT_ENGINE_VERSION
"""

import re

# =============================================================================
# VERSION INFORMATION
# =============================================================================

STENCIL_VERSION = "1.0.0"
"""Current stencil package version"""


class EngineVersions:
    """Template engine builds the renderer can run."""

    V3 = "v3"
    V4 = "v4"
    DEFAULT = V3
    SUPPORTED = [V3, V4]


SUPPORTED_ENGINE_VERSIONS = EngineVersions.SUPPORTED
DEFAULT_ENGINE_VERSION = EngineVersions.DEFAULT


# =============================================================================
# PRECOMPILED TEMPLATES
# =============================================================================

PRECOMPILED_PATTERN = re.compile(
    r'\A\s*\{\s*"compiler"\s*:\s*\[[^\]]*\]\s*,\s*"main"\s*:\s*"'
)
"""Opening of every precompiled artifact: an object whose first field is the
``compiler`` array, immediately followed by the ``main`` field. Use with
``match``; strings that do not match are raw template source. Matching is
linear in the input length."""


# =============================================================================
# TEMPLATE FILES
# =============================================================================

DEFAULT_TEMPLATE_EXTENSION = ".html"
"""Extension of template files in a theme directory"""


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]
"""Valid log levels for configuration"""

DEFAULT_LOG_LEVEL = "info"


class EnvVars:
    """Environment variables read by stencil."""

    ENGINE_VERSION = "STENCIL_ENGINE_VERSION"
    LOG_LEVEL = "STENCIL_LOG_LEVEL"
    LOG_JSON = "STENCIL_LOG_JSON"
