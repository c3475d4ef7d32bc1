from __future__ import annotations

import logging

from rich.logging import RichHandler

from pdf_combiner.utils import configure_logging, format_file_size


def test_format_file_size() -> None:
    assert format_file_size(500) == "500.0 B"
    assert format_file_size(1024) == "1.0 KB"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(1024 * 1024) == "1.0 MB"


def test_configure_logging_installs_single_rich_handler() -> None:
    logger = logging.getLogger("pdf_combiner")
    original_level = logger.level
    original_handlers = list(logger.handlers)
    try:
        configure_logging("DEBUG")
        configure_logging("INFO")

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.INFO
    finally:
        logger.handlers = original_handlers
        logger.setLevel(original_level)
