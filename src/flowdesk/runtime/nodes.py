"""Node registry: tracks installed node types and editor capabilities."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from .settings import NodeSetting, RuntimeSettings

logger = logging.getLogger(__name__)


class NodeRegistry(Protocol):
    """Interface the settings exporter queries for node runtime state."""

    def palette_editor_enabled(self) -> bool:
        """Whether nodes may be installed/removed from the editor palette."""
        ...

    def get_credential_key_type(self) -> str | None:
        """Source of the credential encryption key, or None if unencrypted."""
        ...


class LocalNodeRegistry:
    """Registry of node types loaded into this runtime."""

    def __init__(
        self,
        settings: RuntimeSettings,
        palette_editor_enabled: bool = True,
        credential_secret: str | None = None,
        credentials_encrypted: bool = True,
    ) -> None:
        self._settings = settings
        self._palette_editor_enabled = palette_editor_enabled
        self._credential_secret = credential_secret
        self._credentials_encrypted = credentials_encrypted
        self._node_types: dict[str, bool] = {}

    def register(
        self, node_type: str, settings: Mapping[str, NodeSetting] | None = None
    ) -> None:
        """Register a node type and the settings it contributes."""
        if settings:
            self._settings.register_node_settings(node_type, settings)
        self._node_types[node_type] = True
        logger.info(f"Registered node type: {node_type}")

    def disable(self, node_type: str) -> None:
        if node_type not in self._node_types:
            raise KeyError(node_type)
        self._node_types[node_type] = False
        self._settings.disable_node_settings([node_type])
        logger.info(f"Disabled node type: {node_type}")

    def enable(self, node_type: str) -> None:
        if node_type not in self._node_types:
            raise KeyError(node_type)
        self._node_types[node_type] = True
        self._settings.enable_node_settings([node_type])
        logger.info(f"Enabled node type: {node_type}")

    @property
    def node_types(self) -> list[str]:
        return list(self._node_types.keys())

    def is_enabled(self, node_type: str) -> bool:
        return self._node_types.get(node_type, False)

    def palette_editor_enabled(self) -> bool:
        if not self._palette_editor_enabled:
            return False
        theme = self._settings.get("editorTheme") or {}
        palette = theme.get("palette") if isinstance(theme, Mapping) else None
        if isinstance(palette, Mapping) and palette.get("editable") is False:
            return False
        return True

    def get_credential_key_type(self) -> str | None:
        if not self._credentials_encrypted:
            return None
        if self._credential_secret:
            return "user"
        return "system"
