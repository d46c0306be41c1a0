"""Tests for the demonstration driver and logging setup."""

import logging

import pytest

from blastanalysis.logging_config import setup_logging
from blastanalysis.main import build_parser, main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("blastanalysis")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestMain:
    """Tests for main()."""

    def test_demo_output(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Do the line segments intersect? True" in out
        assert "Single curve intersects: True" in out
        assert "Multiple curves intersect: True" in out
        assert "Multiple curves intersect count: 2" in out

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert not args.debug
        assert not args.plot
        assert args.log_file is None

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "demo.log"
        main(["--debug", "--log-file", str(log_file)])
        assert "crosses 2 of 2 curves" in log_file.read_text(encoding="utf-8")

    def test_plot(self, monkeypatch):
        import matplotlib.pyplot as plt

        shown = []
        monkeypatch.setattr(plt, "show", lambda: shown.append(True))
        assert main(["--plot"]) == 0
        assert shown == [True]
        plt.close("all")


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_no_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("blastanalysis").handlers) == 1

    def test_level(self):
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger("blastanalysis").level == logging.DEBUG

    def test_returns_logger_and_accepts_path(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(level=logging.DEBUG, log_file=log_file)
        assert logger is logging.getLogger("blastanalysis")
        assert len(logger.handlers) == 2
        logger.debug("written")
        assert "written" in log_file.read_text(encoding="utf-8")
