"""Shared state handed to every helper factory."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

if TYPE_CHECKING:
    from .engine import TemplateEngine
    from .translator import Translator


@dataclass
class HelperContext:
    """
    Accessors and storage shared by all helpers of one renderer.

    The accessors are bound to the renderer, so helpers always see the
    current settings, translator and content regions at render time.
    ``storage`` is intentionally shared: it is the one place helpers keep
    state across calls for the lifetime of the renderer.
    """

    engine: "TemplateEngine"
    get_site_settings: Callable[[], Dict[str, Any]]
    get_theme_settings: Callable[[], Dict[str, Any]]
    get_translator: Callable[[], Optional["Translator"]]
    get_content: Callable[[], Dict[str, Any]]
    storage: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HelperSpec:
    """A named helper and the factory that builds it from a HelperContext."""

    name: str
    factory: Callable[[HelperContext], Callable[..., Any]]
