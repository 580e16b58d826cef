# test/test_main.py

import io
import json
import logging

import pytest

import main
from utils.logger import setup_logging, set_eval_index

ALL_100 = ["--attendance", "100", "--assignment", "100", "--exam", "100", "--participation", "100"]


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "fis_config.toml"
    path.write_text(
        "[logging]\n"
        f"LOG_DIR = '{(tmp_path / 'logs').as_posix()}'\n"
        "CONSOLE_LEVEL = 'WARNING'\n"
        "[defuzzifier]\nSTEP = 1.0\n"
        "[history]\nMAX_ENTRIES = 5\n",
        encoding="utf-8",
    )
    return str(path)


def test_default_config_loads():
    config = main.load_config()
    assert config["defuzzifier"]["STEP"] == 1.0
    assert config["history"]["MAX_ENTRIES"] == 50
    assert "LOG_DIR" in config["logging"]


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main.load_config(str(tmp_path / "nope.toml"))


def test_main_prints_json(config_path, capsys, restore_loggers):
    assert main.main(ALL_100 + ["--json", "--config", config_path]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["category"] == "Excellent"
    assert data["score"] >= 80
    assert len(data["rules"]) == 8


def test_main_text_output(config_path, capsys, restore_loggers):
    assert main.main(ALL_100 + ["--config", config_path]) == 0
    out = capsys.readouterr().out
    assert "Category: Excellent" in out
    assert "excellent" in out


def test_main_rejects_partial_metrics(config_path, restore_loggers):
    assert main.main(["--exam", "90", "--config", config_path]) == 2


def test_main_reads_stdin(config_path, capsys, monkeypatch, restore_loggers):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0 0 0\n100,100,100,100\n\n"))
    assert main.main(["--json", "--config", config_path]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["category"] for line in lines] == ["Poor", "Excellent"]


def test_main_bad_stdin_line(config_path, monkeypatch, restore_loggers):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3\n"))
    assert main.main(["--config", config_path]) == 1


def test_setup_logging_writes_files(tmp_path, restore_loggers):
    setup_logging(log_dir=str(tmp_path), console_level=logging.WARNING)
    set_eval_index(7)
    logging.getLogger("rule_engine").debug("hello")
    for h in logging.getLogger("rule_engine").handlers:
        h.flush()
    text = (tmp_path / "rule_engine.log").read_text(encoding="utf-8")
    assert "0007 | DEBUG | rule_engine | hello" in text
    set_eval_index(-1)
