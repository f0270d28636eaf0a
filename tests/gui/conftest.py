import pytest

from online_quiz.gui.styles.theme import set_dark_mode


@pytest.fixture(autouse=True)
def light_theme():
    """Theme state is module-global; start and end every GUI test in light mode."""
    set_dark_mode(False)
    yield
    set_dark_mode(False)


@pytest.fixture
def settings(tmp_path, qapp):
    from online_quiz.gui.models.settings import SettingsStore
    return SettingsStore(tmp_path / "gui_settings.json")
