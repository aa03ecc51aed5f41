"""
Precompiled Template Bridge
===========================

Decides whether a registry value is raw template source or a precompiled
artifact, and restores artifacts into callable templates.

Trust boundary
--------------
Restoring an artifact executes the Python module stored in its ``main``
field. Artifacts are assumed to come from a trusted build step (the
``stencil precompile`` command or ``get_pre_processor()``); an attacker
controlled artifact is arbitrary code execution. The structural check in
``looks_precompiled`` is a gate, not a parser: text that does not carry the
``compiler``/``main`` markers is never decoded or executed.
"""

import json
from typing import Any, Union

from stencil_common.constants import PRECOMPILED_PATTERN
from stencil_common.errors import FormatError
from stencil_common.logger import get_logger

from .engine import CompiledTemplate, TemplateEngine

logger = get_logger(__name__)


def looks_precompiled(value: str) -> bool:
    """Return True if ``value`` carries the markers of a precompiled artifact."""
    return PRECOMPILED_PATTERN.match(value) is not None


class PrecompiledBridge:
    """Restores precompiled artifacts through the engine's ``template()`` capability."""

    def __init__(self, engine: TemplateEngine):
        self._engine = engine

    def restore(self, value: Any) -> Union[str, CompiledTemplate]:
        """
        Restore ``value`` if it is a precompiled artifact.

        Args:
            value: Raw template source, artifact text, or an already
                compiled template

        Returns:
            The raw source unchanged, or a CompiledTemplate

        Raises:
            FormatError: the artifact could not be decoded or was produced
                by an incompatible engine build
        """
        if isinstance(value, CompiledTemplate):
            return value
        if not isinstance(value, str):
            raise FormatError(f"Unsupported template value of type {type(value).__name__}")

        if not looks_precompiled(value):
            return value

        logger.debug("Restoring precompiled template", engine=self._engine.VERSION)
        try:
            spec = json.loads(value)
            return self._engine.template(spec)
        except FormatError:
            raise
        except Exception as e:
            raise FormatError(str(e)) from e
