"""Version command."""

from stencil_common.constants import STENCIL_VERSION, SUPPORTED_ENGINE_VERSIONS, DEFAULT_ENGINE_VERSION

from .utils import console


def version():
    """Show stencil version and supported engine builds."""
    console.print(f"stencil {STENCIL_VERSION}")
    console.print(f"engines: {', '.join(SUPPORTED_ENGINE_VERSIONS)} (default {DEFAULT_ENGINE_VERSION})")
