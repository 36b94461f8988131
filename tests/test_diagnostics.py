import os
import subprocess
import sys

from loguru import logger

from hexlog import Logger, init_logger


def test_diagnostics_are_silent_by_default(capsys) -> None:
    Logger({"formatting": {"colorSystem": None}}, sink=lambda line: None)
    assert capsys.readouterr().err == ""


def test_init_logger_routes_package_diagnostics_to_stderr(capsys) -> None:
    handler_id = init_logger("DEBUG")
    try:
        Logger({"formatting": {"dateFormat": "HH:mm", "colorSystem": None}}, sink=lambda line: None)
    finally:
        logger.remove(handler_id)
        logger.disable("hexlog")
    err = capsys.readouterr().err
    assert "hexlog diagnostics enabled" in err
    assert "date_format='HH:mm'" in err


def test_init_logger_writes_each_diagnostic_once() -> None:
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    script = (
        "from hexlog import Logger, init_logger\n"
        "init_logger('DEBUG')\n"
        "Logger({'formatting': {'colorSystem': None}}, sink=lambda line: None)\n"
    )
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [root, os.environ.get("PYTHONPATH")])))
    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=root,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
    assert result.stderr.count("Logger configuration resolved") == 1
    assert result.stderr.count("hexlog diagnostics enabled") == 1
