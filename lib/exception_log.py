# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
import datetime
import getpass
import io
import locale
import logging
import os
import platform
import sys
import tempfile
import traceback

# Global Variables
# =========================================================================
log = logging.getLogger("ExceptionLog")

ADDIN_NAME = "ConTech"
ADDIN_VERSION = "1.0.0"
LOG_FOLDER_NAME = "RevitAddinLogs"
LOG_RETENTION_DAYS = 15


# Report
# =========================================================================
def _environment_lines():
    try:
        user = getpass.getuser()
    except Exception:
        user = "unknown"
    culture = locale.getlocale()[0] or "unknown"
    return [
        "Environment:",
        "  Machine: {}".format(platform.node() or "unknown"),
        "  User: {}".format(user),
        "  OS: {}".format(platform.platform()),
        "  Python: {}".format(sys.version.split()[0]),
        "  Culture: {}".format(culture),
        "",
    ]


def _inner_exception(exc):
    """Chained exception: explicit cause, host InnerException, then context."""
    inner = getattr(exc, "__cause__", None) or getattr(exc, "InnerException", None)
    if inner is None and not getattr(exc, "__suppress_context__", False):
        inner = getattr(exc, "__context__", None)
    return inner


def _traceback_of(exc):
    tb = getattr(exc, "__traceback__", None)
    if tb is None:
        # IronPython only exposes the traceback of the exception being handled
        _, current, current_tb = sys.exc_info()
        if current is exc:
            tb = current_tb
    return tb


def _exception_lines(exc, depth=0):
    indent = " " * (depth * 2)
    lines = [
        "{}Exception: {}.{}".format(
            indent, type(exc).__module__, type(exc).__name__),
        "{}Message: {}".format(indent, exc),
    ]

    source = getattr(exc, "Source", None)
    if source is not None:
        lines.append("{}Source: {}".format(indent, source))
    hresult = getattr(exc, "HResult", None)
    if hresult is not None:
        lines.append("{}HResult: 0x{:08X}".format(indent, hresult & 0xFFFFFFFF))

    args = getattr(exc, "args", ())
    if len(args) > 1:
        lines.append("{}Data:".format(indent))
        for i, arg in enumerate(args):
            lines.append("{}  {}: {}".format(indent, i, arg))

    lines.append("{}Stack Trace:".format(indent))
    for filename, lineno, name, _ in traceback.extract_tb(_traceback_of(exc)):
        lines.append("{}  at {}".format(indent, name))
        lines.append("{}     in {}:line {}".format(indent, filename, lineno))

    inner = _inner_exception(exc)
    if inner is not None:
        lines.append("")
        lines.append("{}---> Inner Exception:".format(indent))
        lines.extend(_exception_lines(inner, depth + 1))
    return lines


def format_exception_report(exc, now=None, addin=None):
    """Full plain-text report for exc, inner exceptions nested and indented."""
    now = now or datetime.datetime.now()
    name, version = addin or (ADDIN_NAME, ADDIN_VERSION)

    lines = ["Timestamp: {:%Y-%m-%d %H:%M:%S}".format(now)]
    lines.extend(_environment_lines())
    lines.extend([
        "Add-in Info:",
        "  Name: {}".format(name),
        "  Version: {}".format(version),
        "",
    ])
    lines.extend(_exception_lines(exc))
    return "\n".join(lines) + "\n"


def inner_message(exc):
    """'Caused by' line for the dialog, or None when there is no inner exception."""
    inner = _inner_exception(exc)
    if inner is None:
        return None
    return "Caused by: {}.{} - {}".format(
        type(inner).__module__, type(inner).__name__, inner)


# Files
# =========================================================================
def log_folder():
    return os.path.join(tempfile.gettempdir(), LOG_FOLDER_NAME)


def clear_old_logs(days_old=LOG_RETENTION_DAYS, folder=None, now=None):
    """Delete log files older than days_old. Returns how many were removed."""
    folder = folder or log_folder()
    if not os.path.isdir(folder):
        return 0

    now = now or datetime.datetime.now()
    cutoff = now - datetime.timedelta(days=days_old)
    removed = 0
    for name in os.listdir(folder):
        path = os.path.join(folder, name)
        if not os.path.isfile(path):
            continue
        modified = datetime.datetime.fromtimestamp(os.path.getmtime(path))
        if modified >= cutoff:
            continue
        try:
            os.remove(path)
            removed += 1
        except OSError as ex:
            log.debug("Could not delete old log %s: %s", path, ex)
    return removed


def write_exception_log(exc, folder=None, now=None):
    """Write the report for exc to a timestamped file and return its path."""
    folder = folder or log_folder()
    now = now or datetime.datetime.now()
    if not os.path.isdir(folder):
        os.makedirs(folder)

    path = os.path.join(
        folder, "RevitException_{:%Y%m%d_%H%M%S}.log".format(now))
    with io.open(path, "w", encoding="utf-8") as f:
        f.write(format_exception_report(exc, now=now))

    clear_old_logs(LOG_RETENTION_DAYS, folder=folder, now=now)
    log.info("Exception log written to %s", path)
    return path
