"""
Crashlog utilities for capturing unhandled exceptions.

A quiz window that silently vanishes tells the user nothing, so this module
writes every unhandled exception to a crash log file and shows a dialog.

Coverage:
1. Python exceptions on the GUI thread: sys.excepthook
2. Exceptions in other threads: threading.excepthook
3. Native crashes (segfaults): faulthandler writes to last_crash.log
4. Qt warnings/criticals: Qt message handler, forwarded to logging
5. Process-level crashes: detected on restart via the .running marker
"""
from __future__ import annotations

import atexit
import faulthandler
import logging
import platform
import sys
import threading
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

# Maximum number of crash logs to keep
MAX_CRASH_LOGS = 5

REPORT_TITLE = "Online Quiz Crash Report"

# File handle for faulthandler output (kept open for native crash capture)
_faulthandler_file: Optional[TextIO] = None


def get_crashlog_dir() -> Path:
    """Get the directory for crash logs."""
    from online_quiz.gui.utils.paths import get_app_data_dir
    crash_dir = get_app_data_dir() / "crash_logs"
    crash_dir.mkdir(parents=True, exist_ok=True)
    return crash_dir


def _get_unclean_exit_marker() -> Path:
    return get_crashlog_dir() / ".running"


def _get_last_crash_file() -> Path:
    return get_crashlog_dir() / "last_crash.log"


def _rotate_crash_logs() -> None:
    """Delete the oldest crash logs so a new one fits under MAX_CRASH_LOGS."""
    crash_dir = get_crashlog_dir()
    logs = sorted(crash_dir.glob("crash_*.log"), key=lambda p: p.stat().st_mtime)
    while len(logs) >= MAX_CRASH_LOGS:
        oldest = logs.pop(0)
        try:
            oldest.unlink()
        except OSError:
            logger.debug(f"Could not remove old crash log {oldest}")


def format_crash_report(tb_text: str, app_version: str) -> str:
    """Build the crash report body written to disk."""
    lines = [
        REPORT_TITLE,
        "=" * 50,
        f"Timestamp: {datetime.now().isoformat()}",
        f"Version: {app_version}",
        f"Python: {sys.version}",
        f"Platform: {platform.platform()}",
        f"Frozen: {getattr(sys, 'frozen', False)}",
        "",
        "Exception:",
        "-" * 50,
        tb_text,
    ]
    return "\n".join(lines)


def write_crash_report(content: str) -> Optional[Path]:
    """Write a crash report to a new timestamped file. Returns None on failure."""
    try:
        _rotate_crash_logs()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        crash_file = get_crashlog_dir() / f"crash_{timestamp}.log"
        crash_file.write_text(content, encoding="utf-8")
        return crash_file
    except OSError as e:
        print(f"Could not write crash log: {e}", file=sys.stderr)
        return None


def _append_last_crash(text: str) -> None:
    try:
        with open(_get_last_crash_file(), "a", encoding="utf-8") as f:
            f.write(text)
    except OSError:
        pass  # Nowhere left to report to


def _install_qt_message_handler() -> None:
    """Forward Qt messages to logging; critical/fatal also go to last_crash.log."""
    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }
    qt_logger = logging.getLogger("online_quiz.qt")

    def qt_message_handler(mode, context, message):
        level = level_map.get(mode, logging.WARNING)
        qt_logger.log(level, message)
        if mode in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
            _append_last_crash(
                f"\n[{datetime.now().isoformat()}] Qt {logging.getLevelName(level)}:\n"
                f"  File: {context.file}:{context.line}\n"
                f"  Function: {context.function}\n"
                f"  Message: {message}\n"
            )

    qInstallMessageHandler(qt_message_handler)


def _install_faulthandler(app_version: str) -> None:
    global _faulthandler_file
    try:
        _faulthandler_file = open(_get_last_crash_file(), "a", encoding="utf-8")
        _faulthandler_file.write(f"\n[{datetime.now().isoformat()}] Session started (v{app_version})\n")
        _faulthandler_file.flush()
        faulthandler.enable(file=_faulthandler_file, all_threads=True)
    except OSError as e:
        logger.warning(f"Could not install faulthandler: {e}")


def _install_threading_excepthook() -> None:
    """Log uncaught exceptions in worker threads (no dialog: threads can't touch Qt)."""

    def thread_excepthook(args):
        tb_text = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
        thread_name = args.thread.name if args.thread else "Unknown"
        logger.error(f"Unhandled exception in thread '{thread_name}':\n{tb_text}")
        _append_last_crash(f"\n[{datetime.now().isoformat()}] Thread exception in '{thread_name}':\n{tb_text}")

    threading.excepthook = thread_excepthook


def _create_unclean_exit_marker() -> None:
    try:
        _get_unclean_exit_marker().write_text(datetime.now().isoformat())
    except OSError:
        logger.debug("Could not create unclean exit marker")


def _remove_unclean_exit_marker() -> None:
    marker = _get_unclean_exit_marker()
    if marker.exists():
        try:
            marker.unlink()
        except OSError:
            logger.debug("Could not remove unclean exit marker")


def _cleanup_faulthandler() -> None:
    global _faulthandler_file
    if _faulthandler_file:
        faulthandler.disable()
        _faulthandler_file.write(f"[{datetime.now().isoformat()}] Clean exit\n")
        _faulthandler_file.close()
        _faulthandler_file = None


def check_previous_crash() -> Optional[str]:
    """
    Check if the previous session crashed (unclean exit).

    Must run before install_crash_handler() creates this session's marker.

    Returns:
        Crash log content if previous session crashed, None otherwise.
    """
    marker = _get_unclean_exit_marker()
    if not marker.exists():
        return None

    crash_file = _get_last_crash_file()
    crash_content = ""
    if crash_file.exists():
        try:
            crash_content = crash_file.read_text(encoding="utf-8")
        except OSError:
            pass
    _remove_unclean_exit_marker()
    return crash_content


def show_previous_crash_dialog(crash_content: str) -> None:
    """Save the recovered crash content and tell the user about it."""
    from PySide6.QtWidgets import QMessageBox

    crash_file = write_crash_report(
        f"{REPORT_TITLE} (recovered from previous session)\n"
        f"{'=' * 50}\n"
        f"Recovered at: {datetime.now().isoformat()}\n\n"
        f"{crash_content}"
    )

    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Warning)
    msg.setWindowTitle("Online Quiz - Previous Session Crashed")
    msg.setText("The application crashed in a previous session.")
    if crash_file:
        msg.setInformativeText(f"A crash report has been saved to:\n{crash_file}")
    msg.setDetailedText(crash_content or "No crash details available.")
    msg.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg.exec()


def _show_crash_dialog(crash_file: Optional[Path], traceback_text: str) -> None:
    """Blocking dialog for an unhandled exception. No-op without a QApplication."""
    from PySide6.QtCore import Qt
    from PySide6.QtWidgets import QApplication, QMessageBox

    if QApplication.instance() is None:
        return

    if crash_file:
        info_text = (
            f"A crash report has been saved to:\n{crash_file}\n\n"
            "Please include this file when reporting the issue."
        )
    else:
        info_text = "Could not save crash report. Please copy the details below."

    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Critical)
    msg.setWindowTitle("Online Quiz - Unexpected Error")
    msg.setText("The application encountered an unexpected error and needs to close.")
    msg.setInformativeText(info_text)
    msg.setDetailedText(traceback_text)
    msg.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg.setWindowModality(Qt.WindowModality.ApplicationModal)
    msg.exec()


def install_crash_handler(app_version: str = "unknown") -> None:
    """
    Install crash handling for Python and native crashes.

    Call this early in startup, before the main window is built.

    Args:
        app_version: Application version string for crash reports.
    """
    _install_faulthandler(app_version)
    _create_unclean_exit_marker()
    atexit.register(_remove_unclean_exit_marker)
    atexit.register(_cleanup_faulthandler)
    _install_threading_excepthook()

    def crash_handler(exc_type, exc_value, exc_tb):
        # Format first, before anything that might fail
        tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        logger.critical(f"Unhandled exception:\n{tb_text}")

        crash_file = write_crash_report(format_crash_report(tb_text, app_version))
        _show_crash_dialog(crash_file, tb_text)
        _remove_unclean_exit_marker()
        sys.exit(1)

    sys.excepthook = crash_handler


def install_qt_crash_handling() -> None:
    """
    Install Qt-specific crash handling.

    Call this AFTER QApplication is created but BEFORE showing the main window.
    """
    _install_qt_message_handler()
