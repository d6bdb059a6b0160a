"""Tests for package logging setup."""

from __future__ import annotations

import logging

from college.core.logger import configure_logging, get_logger


def _stream_handlers(package_logger):
    return [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]


def test_get_logger_installs_no_output_handler(isolated_package_logger):
    isolated_package_logger.handlers.clear()

    logger = get_logger("college.services.example")

    assert logger.name == "college.services.example"
    assert _stream_handlers(isolated_package_logger) == []


def test_configure_logging_adds_one_handler(isolated_package_logger):
    isolated_package_logger.handlers.clear()

    configure_logging("debug")
    configure_logging("DEBUG")

    assert len(_stream_handlers(isolated_package_logger)) == 1
    assert isolated_package_logger.level == logging.DEBUG


def test_configure_logging_changes_level_only_on_repeat(isolated_package_logger):
    isolated_package_logger.handlers.clear()

    configure_logging(logging.INFO)
    configure_logging(logging.ERROR)

    assert len(_stream_handlers(isolated_package_logger)) == 1
    assert isolated_package_logger.level == logging.ERROR
