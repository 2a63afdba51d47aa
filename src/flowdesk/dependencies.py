"""FastAPI dependency injection providers for services."""

from typing import Annotated

from fastapi import Depends, Request

from flowdesk.editor import SettingsExporter


def get_settings_exporter(request: Request) -> SettingsExporter:
    """Get the settings exporter from app state."""
    return request.app.state.settings_exporter


SettingsExporterDep = Annotated[SettingsExporter, Depends(get_settings_exporter)]
