"""Material Design icons via QtAwesome."""
import qtawesome as qta
from online_quiz.gui.styles.theme import get_colors


class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def true_answer():
        """True/false: the True button."""
        return qta.icon('mdi6.check-circle-outline', color=get_colors().SUCCESS)

    @staticmethod
    def false_answer():
        """True/false: the False button."""
        return qta.icon('mdi6.close-circle-outline', color=get_colors().ERROR)

    @staticmethod
    def skip():
        return qta.icon('mdi6.skip-next-outline', color=get_colors().TEXT_ON_PRIMARY)

    @staticmethod
    def restart():
        return qta.icon('mdi6.restart', color=get_colors().TEXT_PRIMARY)

    @staticmethod
    def exit():
        return qta.icon('mdi6.exit-to-app', color=get_colors().TEXT_ON_PRIMARY)

    @staticmethod
    def trophy():
        """Result screen header."""
        return qta.icon('mdi6.trophy-outline', color=get_colors().SCORE_GOLD)
