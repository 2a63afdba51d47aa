from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .projects import LocalProjectStore, ProjectStore, credentials_filename

if TYPE_CHECKING:
    from flowdesk.runtime.settings import RuntimeSettings


@dataclass
class Storage:
    projects: ProjectStore | None = None


def projects_enabled(settings: RuntimeSettings) -> bool:
    theme = settings.get("editorTheme") or {}
    projects = theme.get("projects") if isinstance(theme, Mapping) else None
    return isinstance(projects, Mapping) and bool(projects.get("enabled"))


def create_storage(settings: RuntimeSettings) -> Storage:
    """Create the storage layer, with projects only when the theme enables them."""
    if not projects_enabled(settings):
        return Storage()
    user_dir = Path(settings.get("userDir") or ".").expanduser()
    return Storage(
        projects=LocalProjectStore(
            user_dir=user_dir,
            flow_file=settings.get("flowFile") or "flows.json",
        )
    )


__all__ = [
    "LocalProjectStore",
    "ProjectStore",
    "Storage",
    "create_storage",
    "credentials_filename",
    "projects_enabled",
]
