"""
stencil Error Classes

Every failure the renderer reports is one of the classes below. They share a
common base so callers can catch ``StencilError`` and still inspect the
specific ``code`` and structured ``details`` (for example the offending
template path).

Usage:
    from stencil_common.errors import TemplateNotFoundError

    try:
        await renderer.render("pages/home", context)
    except TemplateNotFoundError as e:
        print(e.code, e.details)
"""

from typing import Any, Dict


class StencilError(Exception):
    """
    Base class for all stencil errors.

    Attributes:
        message: Human-readable description
        code: Stable machine-readable error code
        details: Structured metadata (e.g. ``path``)
    """

    code = "STENCIL_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    @property
    def path(self) -> Any:
        """Template path the error relates to, if known."""
        return self.details.get("path")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for logs and API responses."""
        payload: Dict[str, Any] = {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class CompileError(StencilError):
    """Raw template source failed to compile, or precompilation failed."""

    code = "COMPILE_ERROR"


class FormatError(StencilError):
    """A precompiled template could not be restored."""

    code = "FORMAT_ERROR"


class RenderError(StencilError):
    """Template execution failed at render time."""

    code = "RENDER_ERROR"


class DecoratorError(StencilError):
    """A decorator in the output chain raised."""

    code = "DECORATOR_ERROR"


class TemplateNotFoundError(StencilError):
    """Render requested for a path that was never registered."""

    code = "TEMPLATE_NOT_FOUND"


class ConfigError(StencilError):
    """Renderer configuration is invalid or unreadable."""

    code = "CONFIG_ERROR"
