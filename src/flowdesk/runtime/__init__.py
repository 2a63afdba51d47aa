from .settings import (
    EXPORTED_SETTINGS,
    NodeSetting,
    NodeSettingsError,
    RuntimeSettings,
    normalise_node_type_name,
)
from .nodes import LocalNodeRegistry, NodeRegistry
from .context import RuntimeContext, create_runtime

__all__ = [
    "EXPORTED_SETTINGS",
    "LocalNodeRegistry",
    "NodeRegistry",
    "NodeSetting",
    "NodeSettingsError",
    "RuntimeContext",
    "RuntimeSettings",
    "create_runtime",
    "normalise_node_type_name",
]
