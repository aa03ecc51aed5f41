"""
Versioned Template Engine
=========================

Two incompatible engine builds ("v3" and "v4") behind one capability
interface:

- compile(source)       -> CompiledTemplate
- precompile(source)    -> serialized artifact (JSON text)
- template(artifact)    -> CompiledTemplate
- register_helper(name, fn)
- register_partial(path, template)
- partials              -> path -> CompiledTemplate

Both builds are Jinja2 environments. They differ in compiler revision and
compile options, so an artifact produced by one build is rejected by the
other. The build is chosen once at construction by ``create_engine``.
"""

import json
from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional

from jinja2 import BaseLoader, Environment, Template, TemplateNotFound

from stencil_common.constants import EngineVersions
from stencil_common.errors import FormatError
from stencil_common.logger import get_logger

logger = get_logger(__name__)


class CompiledTemplate:
    """
    Callable wrapper around a compiled Jinja2 template.

    Calling it with a context mapping returns the rendered string.
    """

    __slots__ = ("template", "name")

    def __init__(self, template: Template, name: Optional[str] = None):
        self.template = template
        self.name = name

    def __call__(self, context: Optional[Mapping[str, Any]] = None) -> str:
        return self.template.render(dict(context or {}))

    def __repr__(self) -> str:
        return f"CompiledTemplate(name={self.name!r})"


class PartialLoader(BaseLoader):
    """Resolves ``{% include %}`` and ``{% extends %}`` against the partials table."""

    has_source_access = False

    def __init__(self, partials: Mapping[str, CompiledTemplate]):
        self._partials = partials

    def get_source(self, environment: Environment, template: str):
        raise TemplateNotFound(template)

    def load(
        self,
        environment: Environment,
        name: str,
        globals: Optional[MutableMapping[str, Any]] = None,
    ) -> Template:
        try:
            return self._partials[name].template
        except KeyError:
            raise TemplateNotFound(name) from None

    def list_templates(self):
        return sorted(self._partials)


class TemplateEngine:
    """
    Base class for an engine build.

    Subclasses set VERSION, COMPILER_REVISION, RELEASE and may extend
    ``environment_options``.
    """

    VERSION = ""
    COMPILER_REVISION = 0
    RELEASE = ""

    def __init__(self) -> None:
        self.partials: Dict[str, CompiledTemplate] = {}
        self.env = Environment(loader=PartialLoader(self.partials), **self.environment_options())

    def environment_options(self) -> Dict[str, Any]:
        return {
            "autoescape": True,
            "keep_trailing_newline": True,
        }

    def compile(self, source: str, name: Optional[str] = None) -> CompiledTemplate:
        """Compile raw source. Raises jinja2.TemplateSyntaxError on bad syntax."""
        code = self.env.compile(source, name=name)
        template = self.env.template_class.from_code(self.env, code, self.env.make_globals(None))
        return CompiledTemplate(template, name)

    def precompile(self, source: str, name: Optional[str] = None) -> str:
        """
        Compile raw source into a serialized artifact.

        The artifact is JSON text whose ``compiler`` field precedes ``main``.
        ``main`` holds the generated Python module defining the render
        function.
        """
        module_source = self.env.compile(source, name=name, raw=True)
        return json.dumps(
            {
                "compiler": [self.COMPILER_REVISION, f">= {self.RELEASE}"],
                "main": module_source,
                "name": name,
            }
        )

    def template(self, spec: Any) -> CompiledTemplate:
        """
        Turn a decoded artifact back into a callable template.

        WARNING: this executes the generated module stored in ``spec["main"]``.
        Artifacts must come from a trusted build step; an attacker controlled
        artifact is arbitrary code execution.

        Raises:
            FormatError: structure is wrong or the compiler revision does not
                match this build
        """
        if not isinstance(spec, Mapping) or not isinstance(spec.get("main"), str):
            raise FormatError(f"Unknown template object: {type(spec).__name__}")
        if "def root(" not in spec["main"]:
            raise FormatError("Unknown template object: main does not define a root render function")

        compiler_info = spec.get("compiler")
        if not isinstance(compiler_info, (list, tuple)) or not compiler_info:
            raise FormatError("Unknown template object: missing compiler information")

        self._check_revision(compiler_info)

        name = spec.get("name")
        code = compile(spec["main"], name or "<precompiled>", "exec")
        template = self.env.template_class.from_code(self.env, code, self.env.make_globals(None))
        return CompiledTemplate(template, name)

    def _check_revision(self, compiler_info) -> None:
        compiler_revision = compiler_info[0]
        if compiler_revision == self.COMPILER_REVISION:
            return

        compiler_release = compiler_info[1] if len(compiler_info) > 1 else "unknown"
        if not isinstance(compiler_revision, int) or compiler_revision < self.COMPILER_REVISION:
            raise FormatError(
                "Template was precompiled with an older version of the engine than the current "
                f"runtime. Please update your precompiler to a newer version (>= {self.RELEASE}) "
                f"or downgrade your runtime to an older version ({compiler_release})."
            )
        raise FormatError(
            "Template was precompiled with a newer version of the engine than the current "
            f"runtime. Please update your runtime to a newer version ({compiler_release})."
        )

    def register_helper(self, name: str, helper: Callable[..., Any]) -> None:
        self.env.globals[name] = helper

    def register_partial(self, path: str, template: Any) -> None:
        """Register raw source or a CompiledTemplate under ``path``."""
        if isinstance(template, str):
            template = self.compile(template, name=path)
        elif not isinstance(template, CompiledTemplate):
            raise TypeError(f"Partial '{path}' must be a string or CompiledTemplate")
        self.partials[path] = template


class V3Engine(TemplateEngine):
    """Engine build v3 (default)."""

    VERSION = EngineVersions.V3
    COMPILER_REVISION = 6
    RELEASE = "3.0.0"


class V4Engine(TemplateEngine):
    """Engine build v4: trims block whitespace and enables loop controls."""

    VERSION = EngineVersions.V4
    COMPILER_REVISION = 8
    RELEASE = "4.3.0"

    def environment_options(self) -> Dict[str, Any]:
        options = super().environment_options()
        options.update(
            trim_blocks=True,
            lstrip_blocks=True,
            extensions=["jinja2.ext.loopcontrols"],
        )
        return options


ENGINES = {
    EngineVersions.V3: V3Engine,
    EngineVersions.V4: V4Engine,
}


def create_engine(version: Optional[str] = None) -> TemplateEngine:
    """Create the engine build for ``version``; unknown or missing tags yield v3."""
    engine_cls = ENGINES.get(version or "", ENGINES[EngineVersions.DEFAULT])
    if version not in ENGINES:
        logger.debug("Falling back to default engine", requested=version, version=engine_cls.VERSION)
    return engine_cls()
