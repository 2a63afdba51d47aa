"""Editor runtime settings endpoint."""

from typing import Any

from fastapi import APIRouter

from flowdesk.dependencies import SettingsExporterDep

router = APIRouter(tags=["settings"])


@router.get("/settings")
async def get_runtime_settings(exporter: SettingsExporterDep) -> dict[str, Any]:
    """Return the runtime settings the editor needs at startup."""
    return await exporter.runtime_settings()
