"""
``inject`` / ``js_context`` helpers.

``inject(key, value)`` records a value in the shared helper storage during
render; ``js_context()`` later emits everything injected so far as a
JavaScript expression, so templates can hand data to front-end code.
"""

import json
from typing import Any, Callable, Dict

from markupsafe import Markup

from ..helper_context import HelperContext, HelperSpec

STORAGE_KEY = "inject"


def _injected(helper_context: HelperContext) -> Dict[str, Any]:
    return helper_context.storage.setdefault(STORAGE_KEY, {})


def inject_factory(helper_context: HelperContext) -> Callable[[str, Any], str]:
    def inject(key: str, value: Any) -> str:
        _injected(helper_context)[key] = value
        return ""

    return inject


def js_context_factory(helper_context: HelperContext) -> Callable[[], Markup]:
    def js_context() -> Markup:
        payload = json.dumps(_injected(helper_context), default=str)
        # Encode twice: the outer dumps yields a JS string literal for JSON.parse
        literal = json.dumps(payload).replace("</", "<\\/")
        return Markup(f"JSON.parse({literal})")

    return js_context


inject_spec = HelperSpec("inject", inject_factory)
js_context_spec = HelperSpec("js_context", js_context_factory)
