"""
Template Registry
=================

Registers named templates ("partials") into the engine. Registration is
idempotent: the first registration of a path wins and later attempts for the
same path are skipped without error.

Batches are not transactional. If one entry of ``add_many`` fails, entries
registered before it in the same call stay registered.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from jinja2 import TemplateError

from stencil_common.constants import DEFAULT_TEMPLATE_EXTENSION
from stencil_common.errors import CompileError, FormatError
from stencil_common.logger import get_logger

from .engine import CompiledTemplate, TemplateEngine
from .precompiled import PrecompiledBridge

logger = get_logger(__name__)


class TemplateRegistry:
    """
    Path -> template table backed by the engine's partials.

    Example:
        >>> registry = TemplateRegistry(create_engine("v4"))
        >>> registry.add_many({"pages/home": "Hello {{ name }}"})
        >>> registry.is_loaded("pages/home")
        True
    """

    def __init__(self, engine: TemplateEngine, bridge: Optional[PrecompiledBridge] = None):
        self._engine = engine
        self._bridge = bridge or PrecompiledBridge(engine)

    def add_many(self, templates: Mapping[str, Any]) -> None:
        """
        Register every entry of ``templates`` in iteration order.

        Values may be raw source or artifacts produced by ``pre_process``.

        Raises:
            FormatError: an artifact could not be restored (``path`` in details)
            CompileError: raw source failed to compile (``path`` in details)
        """
        for path, template in templates.items():
            if self.is_loaded(path):
                logger.debug("Template already registered, skipping", path=path)
                continue

            try:
                restored = self._bridge.restore(template)
            except FormatError as e:
                raise FormatError(e.message, **{**e.details, "path": path}) from e

            try:
                self._engine.register_partial(path, restored)
            except TemplateError as e:
                raise CompileError(str(e), path=path) from e

            logger.debug(
                "Registered template",
                path=path,
                precompiled=isinstance(restored, CompiledTemplate),
            )

    def is_loaded(self, path: str) -> bool:
        return path in self._engine.partials

    def get(self, path: str) -> Optional[CompiledTemplate]:
        return self._engine.partials.get(path)

    def paths(self) -> List[str]:
        return list(self._engine.partials)

    def pre_process(self, templates: Mapping[str, str]) -> Dict[str, str]:
        """
        Precompile raw sources into artifacts for a later ``add_many``.

        Every entry is attempted. If any failed, a single CompileError is
        raised naming the first failing path, with all failures under
        ``errors`` in its details.
        """
        processed: Dict[str, str] = {}
        errors: Dict[str, str] = {}

        for path, template in templates.items():
            if not isinstance(template, str):
                errors[path] = f"Template source must be a string, got {type(template).__name__}"
                logger.warning("Failed to precompile template", path=path, error=errors[path])
                continue
            try:
                processed[path] = self._engine.precompile(template, name=path)
            except TemplateError as e:
                logger.warning("Failed to precompile template", path=path, error=str(e))
                errors[path] = str(e)

        if errors:
            first_path = next(iter(errors))
            raise CompileError(errors[first_path], path=first_path, errors=errors)

        return processed

    def __len__(self) -> int:
        return len(self._engine.partials)

    def __contains__(self, path: object) -> bool:
        return path in self._engine.partials


def load_template_dir(
    root: Union[str, Path], extension: str = DEFAULT_TEMPLATE_EXTENSION
) -> Dict[str, str]:
    """
    Read a theme template tree into a registry mapping.

    ``<root>/components/card.html`` becomes key ``components/card``. Keys are
    sorted so registration order is stable across platforms.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"Template directory not found: {root_path}")

    templates: Dict[str, str] = {}
    for file_path in sorted(root_path.rglob(f"*{extension}")):
        if not file_path.is_file():
            continue
        key = file_path.relative_to(root_path).with_suffix("").as_posix()
        templates[key] = file_path.read_text(encoding="utf-8")

    logger.debug("Loaded template directory", root=str(root_path), count=len(templates))
    return templates
