"""Render command - Render one template from a directory or bundle."""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from stencil_common.constants import DEFAULT_TEMPLATE_EXTENSION
from stencil_common.logger import configure_logging
from stencil_renderer import RendererConfig, StencilRenderer, load_config, load_template_dir

from .utils import error, handle_error, info


def _load_templates(source: Path, ext: str) -> Dict[str, Any]:
    if source.is_dir():
        return load_template_dir(source, extension=ext)
    bundle = json.loads(source.read_text(encoding="utf-8"))
    if not isinstance(bundle, dict):
        raise ValueError(f"Template bundle must be a JSON object: {source}")
    return bundle


def _load_context(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    context = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(context, dict):
        raise ValueError(f"Context file must contain a JSON object: {path}")
    return context


def render(
    template: str = typer.Argument(..., help="Template path, e.g. pages/home"),
    templates: str = typer.Option(
        ..., "--templates", "-t", help="Template directory or precompiled bundle (.json)"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="JSON file with the render context"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", help="stencil.yaml with settings, locale and translations"
    ),
    engine: Optional[str] = typer.Option(
        None, "--engine", help="Engine build: v3 or v4 (overrides config)"
    ),
    ext: str = typer.Option(
        DEFAULT_TEMPLATE_EXTENSION, "--ext", help="Template file extension"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """
    Render TEMPLATE and print the result.

    Examples:
        stencil render pages/home --templates templates/
        stencil render pages/home -t bundle.json -c context.json --config stencil.yaml
    """
    try:
        renderer_config = load_config(config)
        if engine:
            renderer_config = RendererConfig.model_validate(
                {**renderer_config.model_dump(), "engine_version": engine}
            )
        configure_logging(level="debug" if verbose else renderer_config.log_level)

        source = Path(templates)
        if not source.exists():
            error(f"Templates not found: {templates}")
            raise typer.Exit(1)

        renderer = StencilRenderer.from_config(renderer_config)
        renderer.add_templates(_load_templates(source, ext))
        if verbose:
            info(f"Loaded {len(renderer.registry)} template(s) with engine {renderer.engine_version}")

        output = asyncio.run(renderer.render(template, _load_context(context)))
        typer.echo(output, nl=False)

    except typer.Exit:
        raise
    except (ValueError, OSError) as e:
        error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        handle_error(e, verbose)
