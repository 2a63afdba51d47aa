"""Tests for EditorTheme."""

from flowdesk.editor import THEME_SETTINGS, EditorTheme


class TestEditorTheme:
    def test_empty(self):
        assert EditorTheme().settings() == {}
        assert EditorTheme(None).settings() == {}

    def test_keeps_editor_keys(self):
        """Test only keys the editor consumes are kept."""
        theme = EditorTheme(
            {
                "palette": {"catalogues": ["https://example.com/catalogue.json"]},
                "projects": {"enabled": True},
                "page": {"title": "Flowdesk", "css": "/etc/flowdesk/custom.css"},
                "login": {"image": "/etc/flowdesk/login.png"},
            }
        )
        assert theme.settings() == {
            "palette": {"catalogues": ["https://example.com/catalogue.json"]},
            "projects": {"enabled": True},
        }

    def test_settings_returns_copy(self):
        """Test callers can modify the returned settings safely."""
        theme = EditorTheme({"palette": {"editable": True}})
        first = theme.settings()
        first["palette"]["editable"] = False
        first["extra"] = 1
        assert theme.settings() == {"palette": {"editable": True}}

    def test_source_not_aliased(self):
        source = {"menu": {"menu-item-help": {"label": "Help"}}}
        theme = EditorTheme(source)
        source["menu"]["menu-item-help"]["label"] = "Changed"
        assert theme.settings()["menu"]["menu-item-help"]["label"] == "Help"

    def test_all_theme_keys(self):
        editor_theme = {key: {"value": key} for key in THEME_SETTINGS}
        assert EditorTheme(editor_theme).settings() == editor_theme
