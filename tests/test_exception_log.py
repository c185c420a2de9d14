# tests/test_exception_log.py

import datetime
import os

from exception_log import (
    clear_old_logs,
    format_exception_report,
    inner_message,
    write_exception_log,
)

NOW = datetime.datetime(2025, 3, 14, 9, 26, 53)


def raise_nested():
    try:
        try:
            raise TypeError("parameterName cannot be None")
        except TypeError as inner:
            raise RuntimeError("Simulated exception for testing") from inner
    except RuntimeError as ex:
        return ex


def test_report_sections_in_order():
    report = format_exception_report(raise_nested(), now=NOW, addin=("Tools", "2.1"))
    expected = [
        "Timestamp: 2025-03-14 09:26:53",
        "Environment:",
        "Add-in Info:",
        "  Name: Tools",
        "  Version: 2.1",
        "Exception: builtins.RuntimeError",
        "Message: Simulated exception for testing",
        "Stack Trace:",
        "---> Inner Exception:",
        "  Exception: builtins.TypeError",
        "  Message: parameterName cannot be None",
    ]
    positions = [report.index(text) for text in expected]
    assert positions == sorted(positions)
    assert "  at raise_nested" in report


def test_report_lists_extra_args_as_data():
    report = format_exception_report(ValueError("bad", 42), now=NOW)
    assert "Data:" in report
    assert "  1: 42" in report


def test_report_without_inner_exception():
    report = format_exception_report(ValueError("plain"), now=NOW)
    assert "Inner Exception" not in report
    assert "Data:" not in report


def test_inner_message():
    assert inner_message(raise_nested()) == (
        "Caused by: builtins.TypeError - parameterName cannot be None")
    assert inner_message(ValueError("plain")) is None


def test_write_exception_log(tmp_path):
    path = write_exception_log(raise_nested(), folder=str(tmp_path), now=NOW)
    assert os.path.basename(path) == "RevitException_20250314_092653.log"
    with open(path, encoding="utf-8") as f:
        assert "Simulated exception for testing" in f.read()


def test_write_exception_log_creates_folder(tmp_path):
    folder = tmp_path / "logs"
    path = write_exception_log(ValueError("x"), folder=str(folder), now=NOW)
    assert os.path.isfile(path)


def test_clear_old_logs(tmp_path):
    old = tmp_path / "RevitException_old.log"
    fresh = tmp_path / "RevitException_new.log"
    old.write_text("old")
    fresh.write_text("new")
    stamp = (NOW - datetime.timedelta(days=20)).timestamp()
    os.utime(str(old), (stamp, stamp))
    stamp = (NOW - datetime.timedelta(days=2)).timestamp()
    os.utime(str(fresh), (stamp, stamp))

    assert clear_old_logs(15, folder=str(tmp_path), now=NOW) == 1
    assert not old.exists()
    assert fresh.exists()


def test_clear_old_logs_missing_folder(tmp_path):
    assert clear_old_logs(folder=str(tmp_path / "missing")) == 0


class HostError(Exception):
    """Shaped like a host (.NET) exception: chain through InnerException."""

    def __init__(self, message, inner=None):
        Exception.__init__(self, message)
        self.InnerException = inner
        self.Source = "RevitAPI"
        self.HResult = -2146233079


def test_report_follows_host_inner_exception():
    error = HostError("Transaction failed", inner=ValueError("SampleParam"))
    report = format_exception_report(error, now=NOW)
    assert "Source: RevitAPI" in report
    assert "HResult: 0x80131509" in report
    assert "---> Inner Exception:" in report
    assert "  Exception: builtins.ValueError" in report
    assert "  Message: SampleParam" in report


def test_inner_message_from_host_inner_exception():
    error = HostError("Transaction failed", inner=ValueError("SampleParam"))
    assert inner_message(error) == "Caused by: builtins.ValueError - SampleParam"
    assert inner_message(HostError("alone")) is None
