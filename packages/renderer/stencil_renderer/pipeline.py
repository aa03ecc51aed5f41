"""
Render Pipeline
===============

render(path, context):
    1. copy the context (the caller's mapping is never mutated)
    2. add ``template`` (the path) and, with a translator, ``locale_name``
    3. look the path up in the registry  -> TemplateNotFoundError
    4. execute the template              -> RenderError
    5. fold through the decorator chain  -> DecoratorError

render_string(source, context) compiles ``source`` fresh and never applies
decorators.

Both are coroutines so callers can gather many renders; the work itself is
synchronous and nothing is spawned. Renders only read the registry, so
concurrent renders of different paths are safe. Mutating the decorator chain
or helper state while renders are in flight needs external synchronization.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import TemplateError

from stencil_common.errors import CompileError, RenderError, TemplateNotFoundError
from stencil_common.logger import get_logger

from .decorators import DecoratorChain
from .engine import CompiledTemplate, TemplateEngine
from .registry import TemplateRegistry
from .translator import Translator

logger = get_logger(__name__)


class RenderPipeline:
    """Looks up, executes and decorates templates."""

    def __init__(
        self,
        engine: TemplateEngine,
        registry: TemplateRegistry,
        decorators: DecoratorChain,
        get_translator: Callable[[], Optional[Translator]],
    ):
        self._engine = engine
        self._registry = registry
        self._decorators = decorators
        self._get_translator = get_translator

    def _build_context(self, context: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        render_context = dict(context or {})
        translator = self._get_translator()
        if translator is not None:
            render_context["locale_name"] = translator.get_locale()
        return render_context

    def _execute(self, template: CompiledTemplate, context: Dict[str, Any], **details: Any) -> str:
        try:
            return template(context)
        except Exception as e:
            logger.error("Template execution failed", error=str(e), **details)
            raise RenderError(str(e), **details) from e

    async def render(self, path: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render a registered template.

        Raises:
            TemplateNotFoundError: ``path`` was never registered
            RenderError: the template raised while executing
            DecoratorError: a decorator raised
        """
        render_context = self._build_context(context)
        render_context["template"] = path

        template = self._registry.get(path)
        if template is None:
            raise TemplateNotFoundError(f"template not found: {path}", path=path)

        result = self._execute(template, render_context, path=path)
        result = self._decorators.apply(result)

        logger.debug("Rendered template", path=path)
        return result

    async def render_string(self, source: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Compile and render ``source``. Decorators are not applied.

        Raises:
            CompileError: ``source`` failed to compile
            RenderError: the template raised while executing
        """
        render_context = self._build_context(context)

        try:
            template = self._engine.compile(source)
        except TemplateError as e:
            raise CompileError(str(e)) from e

        return self._execute(template, render_context)
