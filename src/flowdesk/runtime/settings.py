"""Runtime settings record and node-contributed settings."""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Settings keys that may be sent to the editor as-is
EXPORTED_SETTINGS: tuple[str, ...] = (
    "httpNodeRoot",
    "version",
    "paletteCategories",
    "flowFilePretty",
    "tlsConfigDisableLocalFiles",
)


class NodeSettingsError(ValueError):
    """Raised when a node type registers invalid settings."""


@dataclass(frozen=True)
class NodeSetting:
    value: Any = None
    exportable: bool = False


def normalise_node_type_name(name: str) -> str:
    """Convert a node type name to the camelCase prefix its settings must use.

    ``"test-node"`` becomes ``"testNode"``, ``"HTTP request"`` becomes
    ``"hTTPRequest"``.
    """
    words = re.sub(r"[^a-zA-Z0-9]", " ", name).split()
    if not words:
        return ""
    result = words[0] + "".join(w[0].upper() + w[1:] for w in words[1:])
    return result[0].lower() + result[1:]


class RuntimeSettings(Mapping[str, Any]):
    """Read-only view over the runtime settings mapping.

    Nodes register their own settings here; the exportable ones are handed
    to the editor by ``export_node_settings``.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = copy.deepcopy(dict(values or {}))
        self._node_settings: dict[str, dict[str, NodeSetting]] = {}
        self._disabled_node_settings: dict[str, dict[str, NodeSetting]] = {}

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def register_node_settings(
        self, node_type: str, settings: Mapping[str, NodeSetting]
    ) -> None:
        """Register the settings a node type contributes."""
        if node_type in self._node_settings or node_type in self._disabled_node_settings:
            raise NodeSettingsError(
                f"Settings already registered for node type '{node_type}'"
            )
        prefix = normalise_node_type_name(node_type)
        for name in settings:
            if not name.startswith(prefix):
                raise NodeSettingsError(
                    f"Registered invalid property name '{name}'. "
                    f"Properties for this node must start with '{prefix}'"
                )
        self._node_settings[node_type] = dict(settings)
        logger.debug(f"Registered {len(settings)} setting(s) for node type: {node_type}")

    def disable_node_settings(self, node_types: Iterable[str]) -> None:
        for node_type in node_types:
            if node_type in self._node_settings:
                self._disabled_node_settings[node_type] = self._node_settings.pop(
                    node_type
                )

    def enable_node_settings(self, node_types: Iterable[str]) -> None:
        for node_type in node_types:
            if node_type in self._disabled_node_settings:
                self._node_settings[node_type] = self._disabled_node_settings.pop(
                    node_type
                )

    def export_node_settings(self) -> dict[str, Any]:
        """Return the exportable node settings as a new mapping.

        A value present in the runtime settings wins over the registered
        default. Settings with neither are left out.
        """
        exported: dict[str, Any] = {}
        for node_settings in self._node_settings.values():
            for name, setting in node_settings.items():
                if not setting.exportable:
                    continue
                if name in self._values:
                    exported[name] = copy.deepcopy(self._values[name])
                elif setting.value is not None:
                    exported[name] = copy.deepcopy(setting.value)
        return exported
