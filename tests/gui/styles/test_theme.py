"""Unit tests for theme switching."""

import pytest

from online_quiz.gui.styles import theme
from online_quiz.gui.styles.theme import Colors, ColorsDark, Styles, StylesDark


class TestThemeState:

    def test_light_by_default(self):
        assert theme.get_colors() is Colors
        assert theme.get_styles() is Styles

    def test_set_dark_mode(self):
        theme.set_dark_mode(True)
        assert theme.is_dark_mode()
        assert theme.get_colors() is ColorsDark
        assert theme.get_styles() is StylesDark

    def test_apply_theme_sets_stylesheet(self, qapp):
        theme.apply_theme(qapp, True)
        assert qapp.styleSheet() == theme.GLOBAL_STYLESHEET_DARK
        assert theme.is_dark_mode()

        theme.apply_theme(qapp, False)
        assert qapp.styleSheet() == theme.GLOBAL_STYLESHEET


class TestStyles:

    @pytest.mark.parametrize(
        "name",
        ["BUTTON_PRIMARY", "BUTTON_SECONDARY", "CHOICE_BUTTON", "QUESTION_LABEL", "PROGRESS_LABEL", "SCORE_LABEL"],
    )
    def test_both_palettes_define_style(self, name):
        assert getattr(Styles, name)
        assert getattr(StylesDark, name)

    def test_palettes_differ(self):
        assert Styles.QUESTION_LABEL != StylesDark.QUESTION_LABEL
        assert Colors.SCORE_GOLD == ColorsDark.SCORE_GOLD


class TestIcons:

    def test_icons_load(self, qapp):
        from online_quiz.gui.utils.icons import MaterialIcons

        for factory in (MaterialIcons.true_answer, MaterialIcons.false_answer, MaterialIcons.skip,
                        MaterialIcons.restart, MaterialIcons.exit, MaterialIcons.trophy):
            assert not factory().isNull()
