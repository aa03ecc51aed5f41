"""
stencil Renderer Package
========================

Template rendering for storefront themes: a registry of named templates,
two engine builds, precompiled template restoration, helpers and output
decorators.
"""

from .config import RendererConfig, load_config
from .decorators import DecoratorChain
from .engine import CompiledTemplate, TemplateEngine, V3Engine, V4Engine, create_engine
from .helper_context import HelperContext, HelperSpec
from .helpers import HELPERS
from .pipeline import RenderPipeline
from .precompiled import PrecompiledBridge, looks_precompiled
from .registry import TemplateRegistry, load_template_dir
from .renderer import StencilRenderer
from .translator import CatalogTranslator, Translator

__all__ = [
    "StencilRenderer",
    "RendererConfig",
    "load_config",
    "TemplateEngine",
    "V3Engine",
    "V4Engine",
    "CompiledTemplate",
    "create_engine",
    "PrecompiledBridge",
    "looks_precompiled",
    "TemplateRegistry",
    "load_template_dir",
    "RenderPipeline",
    "DecoratorChain",
    "HelperContext",
    "HelperSpec",
    "HELPERS",
    "Translator",
    "CatalogTranslator",
]
