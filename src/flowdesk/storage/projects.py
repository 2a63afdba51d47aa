"""Project storage: active project, flow file details and git identity."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from flowdesk.models import GitUser

logger = logging.getLogger(__name__)

PROJECTS_CONFIG_FILE = ".config.projects.json"
PROJECTS_DIR = "projects"


class ProjectStore(Protocol):
    """Interface for the projects capability of the storage layer."""

    async def get_active_project(self) -> str | None:
        ...

    async def flow_file_exists(self) -> bool:
        ...

    def get_flow_filename(self) -> str:
        ...

    def get_credentials_filename(self) -> str:
        ...

    async def get_global_git_user(self) -> GitUser | Mapping[str, Any] | None:
        """Global git identity: a GitUser or a {name, email} mapping."""
        ...


def credentials_filename(flow_filename: str) -> str:
    """Derive the credentials file name from a flow file name.

    ``flows.json`` -> ``flows_cred.json``
    """
    path = Path(flow_filename)
    return f"{path.stem}_cred{path.suffix}"


async def _run_git(*args: str) -> tuple[str, int]:
    """Run a git command and return (stdout, returncode)."""
    proc = await asyncio.create_subprocess_exec(
        "git",
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, _ = await proc.communicate()
    return (stdout.decode().strip() if stdout else "", proc.returncode or 0)


class LocalProjectStore:
    """Projects stored as directories under ``<user_dir>/projects``."""

    def __init__(self, user_dir: Path, flow_file: str = "flows.json") -> None:
        self._user_dir = user_dir
        self._flow_file = flow_file

    @property
    def projects_dir(self) -> Path:
        return self._user_dir / PROJECTS_DIR

    def _read_projects_config(self) -> dict[str, Any]:
        config_path = self._user_dir / PROJECTS_CONFIG_FILE
        try:
            data = json.loads(config_path.read_text())
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read projects config {config_path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    async def get_active_project(self) -> str | None:
        config = await asyncio.to_thread(self._read_projects_config)
        name = config.get("activeProject")
        if not name or not isinstance(name, str):
            return None
        if not await asyncio.to_thread(self._project_exists, name):
            logger.warning(f"Active project not found: {name}")
            return None
        return name

    def _project_exists(self, name: str) -> bool:
        projects_dir = self.projects_dir.resolve()
        project_dir = (projects_dir / name).resolve()
        # Project names must not escape the projects directory
        if project_dir.parent != projects_dir:
            return False
        return project_dir.is_dir()

    async def flow_file_exists(self) -> bool:
        return await asyncio.to_thread((self._user_dir / self._flow_file).is_file)

    def get_flow_filename(self) -> str:
        return Path(self._flow_file).name

    def get_credentials_filename(self) -> str:
        return credentials_filename(self.get_flow_filename())

    async def get_global_git_user(self) -> GitUser | None:
        """Return the user.name/user.email from the global git config."""
        values: dict[str, str | None] = {}
        for key in ("name", "email"):
            try:
                stdout, returncode = await _run_git(
                    "config", "--global", "--get", f"user.{key}"
                )
            except FileNotFoundError:
                logger.debug("git executable not found")
                return None
            values[key] = stdout if returncode == 0 and stdout else None

        if not values["name"] and not values["email"]:
            return None
        return GitUser(**values)
