# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import io
import logging

import pytest
from rich.console import Console

from promget.common.logging import (
    CustomRichHandler,
    create_file_handler,
    setup_rich_logging,
)
from promget.common.mixins import PromGetLoggerMixin
from promget.common.promget_logger import PromGetLogger


class TestPromGetLogger:
    def test_lazy_message_not_evaluated_when_disabled(self, caplog):
        logger = PromGetLogger("promget.test.lazy")
        calls = []

        def build() -> str:
            calls.append(1)
            return "expensive"

        with caplog.at_level(logging.INFO, logger="promget.test.lazy"):
            logger.debug(build)
            logger.info(build)

        assert calls == [1]
        assert [record.getMessage() for record in caplog.records] == ["expensive"]

    def test_trace_level(self, caplog):
        logger = PromGetLogger("promget.test.trace")

        with caplog.at_level(logging.DEBUG - 5, logger="promget.test.trace"):
            logger.trace("fine grained")

        assert logger.is_trace_enabled
        assert caplog.records[0].levelname == "TRACE"

    def test_records_point_at_caller(self, caplog):
        logger = PromGetLogger("promget.test.caller")

        with caplog.at_level(logging.INFO, logger="promget.test.caller"):
            logger.info("where am i")

        assert caplog.records[0].funcName == "test_records_point_at_caller"

    @pytest.mark.parametrize(
        "method,levelname",
        [
            ("trace", "TRACE"),
            ("debug", "DEBUG"),
            ("info", "INFO"),
            ("warning", "WARNING"),
            ("error", "ERROR"),
        ],
    )  # fmt: skip
    def test_level_methods(self, caplog, method, levelname):
        logger = PromGetLogger("promget.test.levels")

        with caplog.at_level(logging.DEBUG - 5, logger="promget.test.levels"):
            getattr(logger, method)(lambda: f"via {method}")

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            (levelname, f"via {method}")
        ]


class TestPromGetLoggerMixin:
    def test_logger_named_after_class(self, caplog):
        class Scraper(PromGetLoggerMixin):
            def run(self) -> None:
                self.warning(lambda: "slow endpoint")

        with caplog.at_level(logging.WARNING, logger="Scraper"):
            Scraper().run()

        record = caplog.records[0]
        assert record.name == "Scraper"
        assert record.getMessage() == "slow endpoint"
        assert record.funcName == "run"

    @pytest.mark.parametrize("method", ["trace", "debug", "info", "warning", "error"])
    def test_shortcuts_report_calling_method(self, caplog, method):
        mixin = PromGetLoggerMixin(logger_name="promget.test.mixin")

        with caplog.at_level(logging.DEBUG - 5, logger="promget.test.mixin"):
            getattr(mixin, method)("shortcut")

        assert caplog.records[0].funcName == "test_shortcuts_report_calling_method"

    def test_explicit_logger_name(self):
        assert PromGetLoggerMixin(logger_name="custom").logger.logger_name == "custom"


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupRichLogging:
    def test_installs_single_rich_handler(self):
        setup_rich_logging("debug")
        setup_rich_logging("debug")

        assert logging.root.level == logging.DEBUG
        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0], CustomRichHandler)

    def test_renders_compact_line(self):
        output = io.StringIO()
        setup_rich_logging("INFO", console=Console(file=output, width=200))

        logging.getLogger("promget.test.render").info("Scraped status=200")

        line = output.getvalue()
        assert "INFO" in line
        assert "Scraped status=200" in line
        assert "(promget.test.render:" in line

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "promget.log"
        setup_rich_logging(
            "INFO", console=Console(file=io.StringIO()), log_file=log_file
        )

        logging.getLogger("promget.test.file").warning("written to disk")
        for handler in logging.root.handlers:
            handler.flush()

        assert "written to disk" in log_file.read_text()

    def test_create_file_handler_creates_parent(self, tmp_path):
        handler = create_file_handler(tmp_path / "nested" / "out.log", logging.INFO)
        try:
            assert (tmp_path / "nested").is_dir()
            assert handler.level == logging.INFO
        finally:
            handler.close()
