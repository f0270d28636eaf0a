"""
Unit tests for GUI settings persistence.
"""
import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from PySide6.QtWidgets import QApplication

from online_quiz import __version__
from online_quiz.gui.models.settings import SettingsStore


_app = None


def setUpModule():
    # QObject signals need an application instance
    global _app
    _app = QApplication.instance() or QApplication([])


class TestSettingsStore(unittest.TestCase):
    """Test settings persistence."""

    def setUp(self):
        self.temp_dir = TemporaryDirectory()
        self.settings_path = Path(self.temp_dir.name) / "test_settings.json"
        self.store = SettingsStore(self.settings_path)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_defaults(self):
        """Fresh store has light mode and no remembered quiz."""
        self.assertFalse(self.store.get_dark_mode())
        self.assertIsNone(self.store.get_last_quiz_path())
        self.assertIsNone(self.store.get_window_geometry())
        self.assertIsNone(self.store.load_error)

    def test_dark_mode_persistence(self):
        self.store.set_dark_mode(True)

        new_store = SettingsStore(self.settings_path)
        self.assertTrue(new_store.get_dark_mode())

    def test_dark_mode_emits_theme_changed(self):
        received = []
        self.store.themeChanged.connect(received.append)
        self.store.set_dark_mode(True)
        self.assertEqual(received, [True])

    def test_last_quiz_path_persistence(self):
        self.store.set_last_quiz_path("/quizzes/space.json")

        new_store = SettingsStore(self.settings_path)
        self.assertEqual(new_store.get_last_quiz_path(), "/quizzes/space.json")

    def test_clearing_last_quiz_path(self):
        self.store.set_last_quiz_path("/quizzes/space.json")
        self.store.set_last_quiz_path(None)
        self.assertIsNone(SettingsStore(self.settings_path).get_last_quiz_path())

    def test_window_geometry_persistence(self):
        """Geometry must be valid hex to be returned."""
        self.store.set_window_geometry("abc123def456")

        new_store = SettingsStore(self.settings_path)
        self.assertEqual(new_store.get_window_geometry(), "abc123def456")

    def test_invalid_geometry_is_ignored(self):
        self.store.set_window_geometry("not hex at all")
        self.assertIsNone(self.store.get_window_geometry())

    def test_no_results_are_stored(self):
        """Only preferences are written; there is no score history."""
        self.store.set_dark_mode(True)
        data = json.loads(self.settings_path.read_text(encoding="utf-8"))
        self.assertEqual(set(data), {"version", "ui"})


class TestSettingsRecovery(unittest.TestCase):
    """Malformed settings fall back to defaults."""

    def setUp(self):
        self.temp_dir = TemporaryDirectory()
        self.settings_path = Path(self.temp_dir.name) / "test_settings.json"

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_corrupted_file_sets_load_error(self):
        self.settings_path.write_text("{ not json", encoding="utf-8")

        store = SettingsStore(self.settings_path)

        self.assertIn("corrupted", store.load_error)
        self.assertFalse(store.get_dark_mode())

    def test_reset_clears_error_and_rewrites_file(self):
        self.settings_path.write_text("{ not json", encoding="utf-8")
        store = SettingsStore(self.settings_path)

        store.reset()

        self.assertIsNone(store.load_error)
        self.assertTrue(store.check_load_error())
        data = json.loads(self.settings_path.read_text(encoding="utf-8"))
        self.assertEqual(data, {"version": SettingsStore.CURRENT_VERSION})

    def test_wrong_ui_type_falls_back(self):
        self.settings_path.write_text(json.dumps({"ui": "dark"}), encoding="utf-8")
        store = SettingsStore(self.settings_path)
        self.assertFalse(store.get_dark_mode())

    def test_version_change_forgets_quiz_path(self):
        self.settings_path.write_text(
            json.dumps({"app_version": "0.0.1", "last_quiz_path": "/old/quiz.json"}),
            encoding="utf-8",
        )
        store = SettingsStore(self.settings_path)
        self.assertIsNone(store.get_last_quiz_path())
        self.assertEqual(store.data["app_version"], __version__)

    def test_same_version_keeps_quiz_path(self):
        self.settings_path.write_text(
            json.dumps({"app_version": __version__, "last_quiz_path": "/quiz.json"}),
            encoding="utf-8",
        )
        store = SettingsStore(self.settings_path)
        self.assertEqual(store.get_last_quiz_path(), "/quiz.json")


if __name__ == "__main__":
    unittest.main()
