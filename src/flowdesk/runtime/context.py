"""Runtime context handed to the editor API at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from flowdesk.config import Settings
from flowdesk.editor.theme import EditorTheme
from flowdesk.storage import Storage, create_storage

from .nodes import LocalNodeRegistry, NodeRegistry
from .settings import RuntimeSettings


@dataclass
class RuntimeContext:
    settings: RuntimeSettings
    nodes: NodeRegistry
    storage: Storage = field(default_factory=Storage)
    log: logging.Logger = field(
        default_factory=lambda: logging.getLogger("flowdesk.runtime")
    )


def create_runtime(settings: Settings) -> tuple[RuntimeContext, EditorTheme]:
    """Wire the runtime collaborators from service configuration."""
    runtime_settings = RuntimeSettings(settings.runtime_values())
    nodes = LocalNodeRegistry(
        runtime_settings,
        palette_editor_enabled=settings.palette_editor_enabled,
        credential_secret=runtime_settings.get("credentialSecret"),
        credentials_encrypted=settings.credentials_encrypted,
    )
    context = RuntimeContext(
        settings=runtime_settings,
        nodes=nodes,
        storage=create_storage(runtime_settings),
    )
    theme = EditorTheme(runtime_settings.get("editorTheme"))
    return context, theme
