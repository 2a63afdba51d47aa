from .theme import THEME_SETTINGS, EditorTheme, ThemeProvider
from .settings import SettingsExporter

__all__ = [
    "EditorTheme",
    "SettingsExporter",
    "THEME_SETTINGS",
    "ThemeProvider",
]
