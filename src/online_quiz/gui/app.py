"""
Entry point for the Online Quiz desktop app.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

APP_NAME = "Online Quiz"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="online-quiz",
        description="Take a multiple-choice and true/false quiz.",
    )
    parser.add_argument(
        "-q", "--questions",
        type=Path,
        help="Question bank JSON file (defaults to the last opened quiz, then the built-in quiz)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the console and log file",
    )
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="dark", action="store_true", default=None, help="Use the dark theme")
    theme.add_argument("--light", dest="dark", action="store_false", help="Use the light theme")
    return parser


def resolve_bank(questions: Optional[Path], settings):
    """
    Pick the question bank to start with.

    An explicit ``--questions`` file must load. A remembered quiz that no
    longer loads is forgotten and the built-in bank is used instead.
    """
    from online_quiz.core.schemas import ValidationError
    from online_quiz.core.utils import QuestionBankError, load_default_bank, load_question_bank

    if questions is not None:
        return load_question_bank(questions)

    last = settings.get_last_quiz_path()
    if last:
        try:
            return load_question_bank(Path(last))
        except (QuestionBankError, ValidationError) as e:
            logger.warning(f"Last opened quiz is no longer usable, using built-in quiz: {e}")
            settings.set_last_quiz_path(None)

    return load_default_bank()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the GUI application.
    """
    args = build_parser().parse_args(argv)

    from PySide6.QtWidgets import QApplication, QMessageBox

    from online_quiz import __version__
    from online_quiz.core.schemas import ValidationError
    from online_quiz.core.utils import QuestionBankError
    from online_quiz.gui.models.settings import SettingsStore
    from online_quiz.gui.styles.theme import apply_theme
    from online_quiz.gui.utils.crashlog import (
        check_previous_crash,
        install_crash_handler,
        install_qt_crash_handling,
        show_previous_crash_dialog,
    )
    from online_quiz.gui.utils.logging_utils import configure_logging
    from online_quiz.gui.utils.paths import ensure_directories, get_log_dir, get_settings_path

    ensure_directories()
    configure_logging(args.log_level, get_log_dir())
    logger.info(f"Starting {APP_NAME} v{__version__}")

    # Read the previous session's marker before this session creates its own
    previous_crash = check_previous_crash()
    install_crash_handler(app_version=__version__)

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    install_qt_crash_handling()
    if previous_crash is not None:
        show_previous_crash_dialog(previous_crash)

    settings = SettingsStore(get_settings_path())
    if not settings.check_load_error():
        return 1

    if args.dark is not None:
        settings.set_dark_mode(args.dark)
    apply_theme(app, settings.get_dark_mode())

    try:
        bank = resolve_bank(args.questions, settings)
    except (QuestionBankError, ValidationError) as e:
        logger.error(f"Could not load quiz: {e}")
        QMessageBox.critical(None, "Could Not Load Quiz", str(e))
        return 2

    if args.questions is not None:
        settings.set_last_quiz_path(str(args.questions.resolve()))

    from online_quiz.gui.main_window import MainWindow

    window = MainWindow(bank, settings)
    window.show()
    return app.exec()


def run() -> None:
    """Zero-argument entry point used by the launcher script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
