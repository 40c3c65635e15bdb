#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for option dataclasses and logging configuration."""
import dataclasses
import logging

import pytest
from bs4 import BeautifulSoup

from cardkit.exceptions import ValidationError
from cardkit.logging_utils import configure_logging, resolve_log_level
from cardkit.nodes.elements import ParagraphNode, RootNode, TextNode
from cardkit.options import ImageOptimization, ImportOptions, RenderOptions
from cardkit.renderers.html import HtmlDocumentRenderer


@pytest.mark.unit
class TestRenderOptions:
    """Test render option defaults and validation."""

    def test_defaults(self) -> None:
        options = RenderOptions()
        assert options.target == "web"
        assert options.image_optimization is None
        assert dict(options.render_data) == {}
        assert options.fail_on_render_errors is False

    def test_options_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderOptions().target = "email"

    def test_create_updated(self) -> None:
        options = RenderOptions(site_url="https://example.com")
        updated = options.create_updated(target="email")
        assert (updated.target, updated.site_url) == ("email", "https://example.com")
        assert options.target == "web"

    def test_create_updated_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RenderOptions().create_updated(colour="red")
        assert exc_info.value.parameter_name == "colour"

    def test_invalid_target(self) -> None:
        with pytest.raises(ValidationError):
            RenderOptions(target="print")

    def test_invalid_image_sizes(self) -> None:
        with pytest.raises(ValidationError):
            ImageOptimization(content_image_sizes={"w0": {"width": 0}})
        with pytest.raises(ValidationError):
            ImageOptimization(default_max_width=-1)

    def test_create_document_factory_is_used(self) -> None:
        created = []

        def factory():
            document = BeautifulSoup("", "html.parser")
            created.append(document)
            return document

        root = RootNode(children=[ParagraphNode(children=[TextNode("x")])])
        assert HtmlDocumentRenderer(RenderOptions(create_document=factory)).render(root) == "<p>x</p>"
        assert created


@pytest.mark.unit
class TestImportOptions:
    """Test import option defaults."""

    def test_defaults(self) -> None:
        options = ImportOptions()
        assert options.parser == "html.parser"
        assert options.keep_empty_paragraphs is False
        assert options.strict is False


@pytest.mark.unit
class TestConfigureLogging:
    """Test root logging configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_by_name(self) -> None:
        root = configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("bs4").level == logging.WARNING

    def test_log_file(self, tmp_path) -> None:
        log_file = tmp_path / "cardkit.log"
        root = configure_logging(logging.INFO, log_file=str(log_file))
        assert len(root.handlers) == 2
        logging.getLogger("cardkit.test").info("hello from the tests")
        for handler in root.handlers:
            handler.flush()
        assert "hello from the tests" in log_file.read_text(encoding="utf-8")
        root.handlers[1].close()

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        assert resolve_log_level("chatty") == logging.INFO
        assert resolve_log_level("warning") == logging.WARNING
        assert resolve_log_level(5) == 5

    def test_scoped_to_package_logger(self) -> None:
        package_logger = configure_logging("info", logger_name="cardkit")
        try:
            assert package_logger is logging.getLogger("cardkit")
            assert len(package_logger.handlers) == 1
            assert logging.getLogger("markdown_it").level == logging.WARNING
        finally:
            package_logger.handlers.clear()
            package_logger.setLevel(logging.NOTSET)
