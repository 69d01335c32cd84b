"""
Tests for logging helpers
"""

import os
import subprocess
import sys
from pathlib import Path

import structlog

from content_registrar.core.logging import build_processors, get_logger, setup_logging

ROOT = Path(__file__).resolve().parent.parent


def test_import_leaves_host_logging_untouched():
    script = (
        "import logging\n"
        "root = logging.getLogger()\n"
        "before = (len(root.handlers), root.level)\n"
        "import structlog\n"
        "import content_registrar.middleware\n"
        "after = (len(root.handlers), root.level)\n"
        "print(before == after, structlog.is_configured())\n"
    )
    env = dict(os.environ, PYTHONPATH=str(ROOT))

    output = subprocess.run(
        [sys.executable, "-c", script],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    ).stdout.split()

    assert output == ["True", "False"]


def test_setup_logging_configures_structlog():
    try:
        setup_logging(level="debug", log_format="console")
        assert structlog.is_configured()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()


def test_processor_renderer_follows_format():
    assert isinstance(build_processors("json")[-1], structlog.processors.JSONRenderer)
    assert isinstance(build_processors("console")[-1], structlog.dev.ConsoleRenderer)


def test_get_logger_binds_context():
    logger = get_logger("content_registrar.tests", component_type="hero")

    assert structlog.get_context(logger) == {"component_type": "hero"}
