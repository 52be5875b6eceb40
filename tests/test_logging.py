# tests/test_logging.py

from __future__ import annotations

import logging

from gedcomx_converter.logging import get_logger, list_active_loggers, set_debug


def test_module_loggers_nest_under_project_logger() -> None:
    log = get_logger("json_exporter")
    assert log.name == "gedcomx_converter.json_exporter"
    assert log.propagate is True
    assert "gedcomx_converter.json_exporter" in list_active_loggers()


def test_dotted_names_are_kept() -> None:
    assert get_logger("gedcomx_converter.mapping.person").name == "gedcomx_converter.mapping.person"


def test_set_debug_toggles_levels() -> None:
    log = get_logger("test_logging")
    try:
        set_debug(True)
        assert log.level == logging.DEBUG
    finally:
        set_debug(False)
    assert log.level == logging.INFO
