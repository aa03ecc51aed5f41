"""``region`` helper: emit the widgets placed in a content region."""

from typing import Any, Callable, Iterable, Mapping

from markupsafe import Markup, escape

from ..helper_context import HelperContext, HelperSpec


def _widget_content(widget: Any) -> str:
    if isinstance(widget, Mapping):
        return str(widget.get("content", ""))
    return str(getattr(widget, "content", ""))


def factory(helper_context: HelperContext) -> Callable[[str], Markup]:
    def region(name: str) -> Markup:
        widgets: Iterable[Any] = helper_context.get_content().get(name) or []
        # Widget content is trusted markup produced by the page builder
        content = "".join(_widget_content(widget) for widget in widgets)
        return Markup('<div data-content-region="{}">{}</div>').format(
            escape(name), Markup(content)
        )

    return region


spec = HelperSpec("region", factory)
