"""Editor theme settings."""

import copy
from collections.abc import Mapping
from typing import Any, Protocol

# Theme keys the editor reads at startup
THEME_SETTINGS: tuple[str, ...] = (
    "deployButton",
    "menu",
    "userMenu",
    "keymap",
    "palette",
    "projects",
    "tours",
    "codeEditor",
    "markdownEditor",
    "theme",
)


class ThemeProvider(Protocol):
    def settings(self) -> dict[str, Any]:
        """Return the theme settings for the editor."""
        ...


class EditorTheme:
    """Theme provider backed by the ``editorTheme`` runtime setting."""

    def __init__(self, editor_theme: Mapping[str, Any] | None = None) -> None:
        editor_theme = editor_theme or {}
        self._settings = {
            key: copy.deepcopy(editor_theme[key])
            for key in THEME_SETTINGS
            if key in editor_theme
        }

    def settings(self) -> dict[str, Any]:
        return copy.deepcopy(self._settings)
