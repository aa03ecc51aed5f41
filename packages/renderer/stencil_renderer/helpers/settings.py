"""Helpers reading site and theme settings and the active render context."""

from typing import Any, Callable, Optional

from jinja2 import pass_context
from jinja2.runtime import Context

from ..helper_context import HelperContext, HelperSpec


def setting_factory(helper_context: HelperContext) -> Callable[..., Any]:
    def setting(name: str, default: Any = None) -> Any:
        return helper_context.get_theme_settings().get(name, default)

    return setting


def cdn_factory(helper_context: HelperContext) -> Callable[[str], str]:
    def cdn(path: str) -> str:
        if path.startswith(("http://", "https://", "//")):
            return path
        cdn_url: Optional[str] = helper_context.get_site_settings().get("cdn_url")
        if not cdn_url:
            return path
        return f"{cdn_url.rstrip('/')}/{path.lstrip('/')}"

    return cdn


def template_name_factory(helper_context: HelperContext) -> Callable[[Context], Any]:
    @pass_context
    def template_name(context: Context) -> Any:
        return context.get("template")

    return template_name


setting_spec = HelperSpec("setting", setting_factory)
cdn_spec = HelperSpec("cdn", cdn_factory)
template_name_spec = HelperSpec("template_name", template_name_factory)
