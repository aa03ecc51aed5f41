"""
Basic tests for stencil-common package

Covers error classes, constants and the structured logger.
"""

import json
import logging

import pytest

from stencil_common import (
    # Errors
    StencilError,
    CompileError,
    FormatError,
    RenderError,
    DecoratorError,
    TemplateNotFoundError,
    ConfigError,
    # Constants
    SUPPORTED_ENGINE_VERSIONS,
    DEFAULT_ENGINE_VERSION,
    PRECOMPILED_PATTERN,
    EngineVersions,
    # Logger
    get_logger,
    configure_logging,
    set_request_id,
    get_request_id,
)
from stencil_common.logger import JsonLogFormatter, TextLogFormatter


def _record(message="hello", **attrs):
    record = logging.LogRecord("stencil.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestErrors:
    """Test error classes"""

    @pytest.mark.parametrize(
        "error_cls, code",
        [
            (CompileError, "COMPILE_ERROR"),
            (FormatError, "FORMAT_ERROR"),
            (RenderError, "RENDER_ERROR"),
            (DecoratorError, "DECORATOR_ERROR"),
            (TemplateNotFoundError, "TEMPLATE_NOT_FOUND"),
            (ConfigError, "CONFIG_ERROR"),
        ],
    )
    def test_error_codes(self, error_cls, code):
        error = error_cls("boom")
        assert isinstance(error, StencilError)
        assert error.code == code
        assert error.message == "boom"
        assert str(error) == "boom"

    def test_error_details(self):
        error = CompileError("Unexpected end of template", path="pages/home")
        assert error.path == "pages/home"
        assert error.details == {"path": "pages/home"}

    def test_error_without_path(self):
        assert RenderError("boom").path is None

    def test_error_to_dict(self):
        error = TemplateNotFoundError("template not found: x", path="x")
        error_dict = error.to_dict()
        assert error_dict["error"] == "TemplateNotFoundError"
        assert error_dict["code"] == "TEMPLATE_NOT_FOUND"
        assert error_dict["message"] == "template not found: x"
        assert error_dict["details"] == {"path": "x"}

    def test_to_dict_omits_empty_details(self):
        assert "details" not in FormatError("bad").to_dict()


class TestConstants:
    """Test constants"""

    def test_engine_versions(self):
        assert SUPPORTED_ENGINE_VERSIONS == ["v3", "v4"]
        assert DEFAULT_ENGINE_VERSION == EngineVersions.V3

    def test_precompiled_pattern_matches_structure(self):
        text = '{"compiler": [6, ">= 3.0.0"], "main": "name = None\\ndef root(context):"}'
        assert PRECOMPILED_PATTERN.match(text)

    def test_precompiled_pattern_allows_whitespace(self):
        text = '{\n  "compiler" :  [6],\n  "main"  :\n "def root(context)"\n}'
        assert PRECOMPILED_PATTERN.match(text)

    def test_precompiled_pattern_requires_order(self):
        text = '{"main": "def root(context)", "compiler": [6]}'
        assert PRECOMPILED_PATTERN.match(text) is None


class TestLogger:
    """Test structured logger"""

    def test_get_logger_namespaces(self):
        assert get_logger("stencil_renderer.registry").name == "stencil.stencil_renderer.registry"
        assert get_logger("stencil.cli").name == "stencil.cli"
        assert get_logger().name == "stencil"

    def test_structured_context(self, captured_logger, clean_request_id):
        name, handler = captured_logger
        get_logger(name).debug("Registered template", path="pages/home")

        record = handler.records[-1]
        assert record.getMessage() == "Registered template"
        assert record.context == {"path": "pages/home"}
        assert record.request_id is None

    def test_request_id_attached(self, captured_logger, clean_request_id):
        name, handler = captured_logger
        set_request_id("req-123")
        get_logger(name).info("Rendering")

        assert get_request_id() == "req-123"
        assert handler.records[-1].request_id == "req-123"

    def test_json_formatter(self):
        record = _record(context={"path": "pages/home"}, request_id="req-1")
        payload = json.loads(JsonLogFormatter().format(record))
        assert payload["level"] == "INFO"
        assert payload["msg"] == "hello"
        assert payload["module"] == "stencil.test"
        assert payload["ctx"] == {"path": "pages/home"}
        assert payload["request_id"] == "req-1"
        assert payload["ts"].endswith("Z")

    def test_text_formatter_appends_context(self):
        line = TextLogFormatter().format(_record(context={"path": "pages/home"}))
        assert line.endswith("| path='pages/home'")

    def test_text_formatter_without_context(self):
        line = TextLogFormatter().format(_record())
        assert "|" not in line

    def test_configure_logging_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="verbose")
