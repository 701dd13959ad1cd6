"""Tests for console logging."""

from octavm.logging import ConsoleLogger, ExecutionLogger
from octavm.errors import AddressOutOfRange


def test_level_filtering(capsys):
    logger = ConsoleLogger(log_level="WARNING", use_colors=False, show_timestamps=False)
    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[ WARNING][OctaVM] shown" in out


def test_timestamps(capsys):
    logger = ConsoleLogger(use_colors=False, show_timestamps=True)
    logger.info("tick")
    assert capsys.readouterr().out.startswith("[")


def test_execution_logger_fault(capsys):
    logger = ExecutionLogger(use_colors=False, show_timestamps=False)
    logger.log_fault(AddressOutOfRange(0xFFF))

    out = capsys.readouterr().out
    assert "[   ERROR][Machine] AddressOutOfRange: Address 0xFFF out of range" in out


def test_step_trace_needs_debug(capsys):
    logger = ExecutionLogger(log_level="INFO", use_colors=False, show_timestamps=False)
    logger.log_step(0x200, 0x00E0)
    assert capsys.readouterr().out == ""
    assert logger.steps_logged == 1
