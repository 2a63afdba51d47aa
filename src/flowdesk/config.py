import json
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 1880
    log_level: str = "INFO"
    version: str = "0.1.0"

    # Flow and project files live under user_dir
    user_dir: str = "~/.flowdesk"
    flow_file: str = "flows.json"
    settings_file: str | None = None  # Extra runtime settings (JSON object)

    # Runtime settings exposed to the editor
    http_node_root: str = "/"
    palette_categories: list[str] | None = None
    flow_file_pretty: bool = False

    # Credentials
    credential_secret: str | None = None  # None = system generated key
    credentials_encrypted: bool = True

    # Editor
    palette_editor_enabled: bool = True
    editor_theme: dict[str, Any] = {}

    model_config = SettingsConfigDict(env_prefix="FLOWDESK_")

    def resolved_user_dir(self) -> Path:
        return Path(self.user_dir).expanduser()

    def runtime_values(self) -> dict[str, Any]:
        """Build the raw runtime settings mapping the editor runtime reads.

        Values from ``settings_file`` are applied last and win over the
        environment-derived defaults.
        """
        values: dict[str, Any] = {
            "httpNodeRoot": self.http_node_root,
            "version": self.version,
            "flowFilePretty": self.flow_file_pretty,
            "flowFile": self.flow_file,
            "userDir": str(self.resolved_user_dir()),
            "editorTheme": dict(self.editor_theme),
        }
        if self.palette_categories is not None:
            values["paletteCategories"] = list(self.palette_categories)
        if self.credential_secret is not None:
            values["credentialSecret"] = self.credential_secret

        if self.settings_file:
            values.update(_load_settings_file(Path(self.settings_file).expanduser()))
        return values


def _load_settings_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError as e:
        raise ValueError(f"Settings file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Settings file is not valid JSON: {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {path}")
    return data
