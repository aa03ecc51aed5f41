"""
Translators used by the ``lang`` helper and for ``locale_name``.

Any object with ``get_locale()`` and ``translate(key, params)`` works; the
catalog translator below covers flat or nested JSON message files.
"""

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class Translator(Protocol):
    """Translation lookup for one locale."""

    def get_locale(self) -> str:
        """Return the active locale, e.g. ``en-US``."""

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Return the message for ``key`` with ``params`` substituted."""


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _flatten(messages: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in messages.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = str(value)
    return flat


class CatalogTranslator:
    """
    Translator backed by an in-memory message catalog.

    Nested catalogs are addressed with dotted keys. Parameters use
    ``{name}`` placeholders; unknown placeholders are left as is and unknown
    keys translate to themselves.

    Example:
        >>> t = CatalogTranslator("en-US", {"cart": {"items": "{count} items"}})
        >>> t.translate("cart.items", {"count": 3})
        '3 items'
    """

    def __init__(self, locale: str, messages: Optional[Mapping[str, Any]] = None):
        self._locale = locale
        self._messages = _flatten(messages or {})

    def get_locale(self) -> str:
        return self._locale

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        message = self._messages.get(key)
        if message is None:
            return key
        if not params:
            return message
        return message.format_map(_KeepMissing(params))
