# tests/test_logging_cfg.py
import json
import logging

import pytest

from combiner.adapters.system.logging_cfg import configure_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_emits_json_lines_with_extra_fields(capsys, restore_root_logger):
    configure_logger(logging.INFO)
    logging.getLogger("combine_service").info("combine.done", extra={"extra": {"urls": 3}})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["msg"] == "combine.done"
    assert payload["logger"] == "combine_service"
    assert payload["level"] == "INFO"
    assert payload["urls"] == 3


def test_respects_level(capsys, restore_root_logger):
    configure_logger("WARNING")
    logging.getLogger("x").info("hidden")
    assert capsys.readouterr().out == ""
