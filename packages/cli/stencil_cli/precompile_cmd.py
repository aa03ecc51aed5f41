"""Precompile command - Turn a template directory into a bundle of artifacts."""

import json
from pathlib import Path
from typing import Optional

import typer

from stencil_common.constants import DEFAULT_TEMPLATE_EXTENSION
from stencil_common.errors import CompileError
from stencil_renderer import StencilRenderer, load_template_dir

from .utils import error, handle_error, info, success


def precompile(
    templates_dir: str = typer.Argument(..., help="Directory of raw templates"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Bundle file to write (stdout if omitted)"
    ),
    engine: str = typer.Option("v3", "--engine", help="Engine build: v3 or v4"),
    ext: str = typer.Option(
        DEFAULT_TEMPLATE_EXTENSION, "--ext", help="Template file extension"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """
    Precompile every template under TEMPLATES_DIR.

    The bundle is a JSON object mapping template path to artifact; pass it to
    `stencil render --templates` or to `add_templates()`. Artifacts only load
    into a renderer using the same engine build.

    Examples:
        stencil precompile templates/ -o bundle.json
        stencil precompile templates/ --engine v4 --ext .hbs
    """
    try:
        templates = load_template_dir(templates_dir, extension=ext)
        if verbose:
            info(f"Found {len(templates)} template(s) in {templates_dir}")

        renderer = StencilRenderer(engine_version=engine)
        try:
            bundle = renderer.get_pre_processor()(templates)
        except CompileError as e:
            for path, message in e.details.get("errors", {}).items():
                error(f"{path}: {message}")
            raise typer.Exit(1)

        payload = json.dumps(bundle, indent=2)
        if output:
            Path(output).write_text(payload, encoding="utf-8")
            success(f"Precompiled {len(bundle)} template(s) with engine {renderer.engine_version} → {output}")
        else:
            typer.echo(payload)

    except typer.Exit:
        raise
    except OSError as e:
        error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        handle_error(e, verbose)
