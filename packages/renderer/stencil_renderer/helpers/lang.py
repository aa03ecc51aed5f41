"""``lang`` helper: translate a key through the renderer's translator."""

from typing import Any, Callable

from ..helper_context import HelperContext, HelperSpec


def factory(helper_context: HelperContext) -> Callable[..., str]:
    def lang(key: str, **params: Any) -> str:
        translator = helper_context.get_translator()
        if translator is None:
            return key
        return translator.translate(key, params)

    return lang


spec = HelperSpec("lang", factory)
