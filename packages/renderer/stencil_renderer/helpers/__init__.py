"""
Built-in helper library.

Each entry is a HelperSpec; the renderer calls every factory once with its
HelperContext and registers the result under the helper's name.
"""

from typing import List

from ..helper_context import HelperSpec
from . import inject, lang, region, settings

HELPERS: List[HelperSpec] = [
    lang.spec,
    region.spec,
    inject.inject_spec,
    inject.js_context_spec,
    settings.setting_spec,
    settings.cdn_spec,
    settings.template_name_spec,
]

__all__ = ["HELPERS"]
