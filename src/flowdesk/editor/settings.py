"""Runtime settings exported to the flow editor.

The exporter builds a fresh view on every request from the runtime
collaborators: only allow-listed settings are copied, node-contributed
settings are merged in, and theme, credential and project details are
derived from the node registry, theme provider and project storage.

A failing collaborator never fails the request: the error is logged through
the runtime logger and only the affected section is left out of the view.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from flowdesk.models import GitUser
from flowdesk.runtime.settings import EXPORTED_SETTINGS

if TYPE_CHECKING:
    from flowdesk.runtime.context import RuntimeContext
    from flowdesk.storage import ProjectStore

    from .theme import ThemeProvider


class SettingsExporter:
    def __init__(self, context: RuntimeContext, theme: ThemeProvider) -> None:
        self.init(context, theme)

    def init(self, context: RuntimeContext, theme: ThemeProvider) -> None:
        """Replace the collaborators the exporter reads from."""
        self._context = context
        self._theme = theme

    @property
    def context(self) -> RuntimeContext:
        return self._context

    async def runtime_settings(self) -> dict[str, Any]:
        """Build the settings view sent to the editor."""
        context = self._context
        settings = context.settings
        safe_settings: dict[str, Any] = {
            key: copy.deepcopy(settings[key])
            for key in EXPORTED_SETTINGS
            if key in settings
        }

        try:
            node_settings = settings.export_node_settings()
        except Exception as e:
            context.log.error(f"Failed to export node settings: {e}")
        else:
            for key, value in node_settings.items():
                safe_settings.setdefault(key, value)

        safe_settings["editorTheme"] = self._editor_theme()

        try:
            key_type = context.nodes.get_credential_key_type()
        except Exception as e:
            context.log.error(f"Failed to get credential key type: {e}")
        else:
            if key_type:
                safe_settings["flowEncryptionType"] = key_type

        projects = context.storage.projects
        if projects is not None:
            safe_settings.update(await self._project_settings(projects))

        return safe_settings

    def _editor_theme(self) -> dict[str, Any]:
        log = self._context.log
        try:
            theme_settings = self._theme.settings() or {}
            if not isinstance(theme_settings, Mapping):
                raise TypeError(
                    f"expected a mapping, got {type(theme_settings).__name__}"
                )
            editor_theme = dict(theme_settings)
        except Exception as e:
            log.error(f"Failed to load editor theme: {e}")
            editor_theme = {}

        try:
            editable = self._context.nodes.palette_editor_enabled()
        except Exception as e:
            log.error(f"Failed to check palette editor status: {e}")
        else:
            if not editable:
                editor_theme["palette"] = {"editable": False}
        return editor_theme

    async def _project_settings(self, projects: ProjectStore) -> dict[str, Any]:
        log = self._context.log
        result: dict[str, Any] = {}

        try:
            active_project = await projects.get_active_project()
            if active_project:
                result["project"] = active_project
            elif await projects.flow_file_exists():
                result["files"] = {
                    "flow": projects.get_flow_filename(),
                    "credentials": projects.get_credentials_filename(),
                }
        except Exception as e:
            log.error(f"Failed to load project details: {e}")

        try:
            git_user = await projects.get_global_git_user()
            if git_user:
                global_user = GitUser.model_validate(git_user)
                result["git"] = {
                    "globalUser": global_user.model_dump(exclude_none=True)
                }
        except Exception as e:
            log.error(f"Failed to load global git user: {e}")

        return result
