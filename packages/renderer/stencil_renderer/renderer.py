"""
stencil Renderer
================

Facade the storefront uses for all its rendering needs:

- register templates (raw source or precompiled artifacts)
- render them against a per-request context
- post-process output through decorators

Example:
    >>> renderer = StencilRenderer({"cdn_url": "https://cdn.example.com"}, {}, "v4")
    >>> renderer.add_templates({"pages/home": "Hello {{ name }}"})
    >>> asyncio.run(renderer.render("pages/home", {"name": "Pat"}))
    'Hello Pat'
"""

from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from stencil_common import errors as _errors
from stencil_common.logger import get_logger

from .config import RendererConfig
from .decorators import Decorator, DecoratorChain
from .engine import TemplateEngine, create_engine
from .helper_context import HelperContext, HelperSpec
from .helpers import HELPERS
from .pipeline import RenderPipeline
from .registry import TemplateRegistry
from .translator import CatalogTranslator, Translator

logger = get_logger(__name__)


class StencilRenderer:
    """
    Template renderer for storefront themes.

    One instance owns one engine build for its whole lifetime; the build is
    picked from ``engine_version`` ("v3" or "v4", anything else means "v3").
    """

    errors = SimpleNamespace(
        CompileError=_errors.CompileError,
        FormatError=_errors.FormatError,
        RenderError=_errors.RenderError,
        DecoratorError=_errors.DecoratorError,
        TemplateNotFoundError=_errors.TemplateNotFoundError,
    )

    def __init__(
        self,
        site_settings: Optional[Dict[str, Any]] = None,
        theme_settings: Optional[Dict[str, Any]] = None,
        engine_version: Optional[str] = None,
        helpers: Optional[Iterable[HelperSpec]] = None,
    ):
        """
        Initialize the renderer.

        Args:
            site_settings: Global site settings, passed to helpers
            theme_settings: Theme configuration, passed to helpers
            engine_version: Engine build to use, "v3" (default) or "v4"
            helpers: Extra helpers registered after the built-in ones
        """
        self.engine: TemplateEngine = create_engine(engine_version)

        self.set_site_settings(site_settings or {})
        self.set_theme_settings(theme_settings or {})
        self.set_translator(None)
        self.set_content({})

        self._decorators = DecoratorChain()
        self._registry = TemplateRegistry(self.engine)
        self._pipeline = RenderPipeline(
            self.engine, self._registry, self._decorators, self.get_translator
        )

        self.helper_context = HelperContext(
            engine=self.engine,
            get_site_settings=self.get_site_settings,
            get_theme_settings=self.get_theme_settings,
            get_translator=self.get_translator,
            get_content=self.get_content,
        )

        for spec in [*HELPERS, *(helpers or [])]:
            self.engine.register_helper(spec.name, spec.factory(self.helper_context))

        logger.debug("Renderer initialized", engine=self.engine.VERSION)

    @classmethod
    def from_config(
        cls, config: RendererConfig, helpers: Optional[Iterable[HelperSpec]] = None
    ) -> "StencilRenderer":
        """Build a renderer (and its translator, if a locale is set) from config."""
        renderer = cls(
            config.site_settings, config.theme_settings, config.engine_version, helpers=helpers
        )
        if config.locale:
            renderer.set_translator(CatalogTranslator(config.locale, config.translations))
        return renderer

    @property
    def engine_version(self) -> str:
        return self.engine.VERSION

    @property
    def registry(self) -> TemplateRegistry:
        return self._registry

    def set_translator(self, translator: Optional[Translator]) -> None:
        """Set the translator used by helpers and for ``locale_name``."""
        self._translator = translator

    def get_translator(self) -> Optional[Translator]:
        return self._translator

    def set_site_settings(self, settings: Dict[str, Any]) -> None:
        self._site_settings = settings

    def get_site_settings(self) -> Dict[str, Any]:
        return self._site_settings

    def set_theme_settings(self, settings: Dict[str, Any]) -> None:
        self._theme_settings = settings

    def get_theme_settings(self) -> Dict[str, Any]:
        return self._theme_settings

    def set_content(self, regions: Dict[str, Any]) -> None:
        """Set content regions (region name -> widgets) for the ``region`` helper."""
        self._content_regions = regions

    def get_content(self) -> Dict[str, Any]:
        return self._content_regions

    def reset_decorators(self) -> None:
        self._decorators.reset()

    def add_decorator(self, decorator: Decorator) -> None:
        """Add a decorator applied to the output of every ``render`` call."""
        self._decorators.add(decorator)

    def add_templates(self, templates: Mapping[str, Any]) -> None:
        """
        Register templates. Values are raw source or the output of the
        pre-processor; the first registration of a path wins.

        Raises:
            FormatError: a precompiled template could not be restored
            CompileError: raw source failed to compile
        """
        self._registry.add_many(templates)

    def is_template_loaded(self, path: str) -> bool:
        return self._registry.is_loaded(path)

    def get_pre_processor(self) -> Callable[[Mapping[str, str]], Dict[str, str]]:
        """
        Return a function that precompiles raw templates into artifacts
        ``add_templates`` can restore.
        """
        return self._registry.pre_process

    async def render(self, path: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render a registered template.

        Raises:
            TemplateNotFoundError, RenderError, DecoratorError
        """
        return await self._pipeline.render(path, context)

    async def render_string(self, template: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render template source without registering it. Decorators are not applied.

        Raises:
            CompileError, RenderError
        """
        return await self._pipeline.render_string(template, context)
