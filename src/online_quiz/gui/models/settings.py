"""
Settings persistence model for the GUI.

Stores the theme, window geometry and last opened quiz. A settings file
that cannot be parsed is reported once at start-up and then replaced by
defaults. Quiz results are never stored here.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """JSON-backed quiz app preferences."""

    themeChanged = Signal(bool)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
                self._migrate()
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted:\n{e}"
                self.data = {}
            except OSError as e:
                self._load_error = f"Failed to read settings:\n{e}"
                self.data = {}

        if "version" not in self._get_dict():
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Offer to reset settings that failed to load.

        Needs a QApplication. Returns False if the user declines, in which
        case the app exits instead of overwriting the file.
        """
        if not self._load_error:
            return True

        from PySide6.QtWidgets import QMessageBox

        msg = QMessageBox()
        msg.setIcon(QMessageBox.Icon.Warning)
        msg.setWindowTitle("Online Quiz - Settings")
        msg.setText("Your settings file could not be loaded.")
        msg.setInformativeText(
            f"{self._load_error}\n\n"
            "Reset them to defaults and start the quiz?"
        )
        msg.setStandardButtons(
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        msg.setDefaultButton(QMessageBox.StandardButton.Yes)

        if msg.exec() == QMessageBox.StandardButton.Yes:
            self.reset()
            return True
        return False

    def reset(self) -> None:
        """Discard all settings and write defaults."""
        self.data = {"version": self.CURRENT_VERSION}
        self._load_error = None
        self._save()

    def _migrate(self) -> None:
        """Record the app version that last wrote this file.

        A settings file from a different major.minor version drops its
        remembered quiz path, since bank formats may have changed.
        """
        state = self._get_dict()
        stored_version = str(state.get("app_version", "0.0.0"))
        current_version = self._get_app_version()

        if stored_version.split(".")[:2] != current_version.split(".")[:2]:
            state.pop("last_quiz_path", None)

        state["app_version"] = current_version
        self._save()

    def _get_app_version(self) -> str:
        from online_quiz import __version__
        return __version__

    def get_dark_mode(self) -> bool:
        ui = self._get_ui()
        return bool(ui.get("dark_mode", False))

    def set_dark_mode(self, enabled: bool) -> None:
        ui = self._get_ui()
        ui["dark_mode"] = enabled
        self._save()
        self.themeChanged.emit(enabled)

    def get_last_quiz_path(self) -> Optional[str]:
        val = self._get_dict().get("last_quiz_path")
        return val if isinstance(val, str) and val else None

    def set_last_quiz_path(self, value: Optional[str]) -> None:
        state = self._get_dict()
        if value:
            state["last_quiz_path"] = value
        else:
            state.pop("last_quiz_path", None)
        self._save()

    def get_window_geometry(self) -> Optional[str]:
        """Hex-encoded geometry from saveGeometry(), or None if missing or not hex."""
        geo = self._get_dict().get("window_geometry")
        if not isinstance(geo, str):
            return None
        try:
            bytes.fromhex(geo)
            return geo
        except ValueError:
            logger.warning(f"Ignoring non-hex window geometry: {geo[:20]!r}")
            return None

    def set_window_geometry(self, geometry: str) -> None:
        state = self._get_dict()
        state["window_geometry"] = geometry
        self._save()

    def _get_ui(self) -> Dict[str, object]:
        ui = self._get_dict().setdefault("ui", {})
        if not isinstance(ui, dict):
            ui = {}
            self.data["ui"] = ui
        return ui  # type: ignore[return-value]

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Write via a temp file and rename, so a crash mid-write keeps the old file."""
        temp_path = self.path.with_suffix('.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            try:
                if temp_path.exists():
                    temp_path.unlink()
            except OSError:
                pass
