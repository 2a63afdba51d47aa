"""Pytest configuration and fixtures for flowdesk tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from flowdesk.editor import SettingsExporter
from flowdesk.models import GitUser
from flowdesk.runtime import NodeSetting, RuntimeContext, RuntimeSettings
from flowdesk.storage import Storage


@pytest.fixture
def runtime_settings():
    """Runtime settings with an internal key and a node-contributed setting."""
    settings = RuntimeSettings(
        {
            "foo": 123,
            "httpNodeRoot": "testHttpNodeRoot",
            "version": "testVersion",
            "paletteCategories": ["red", "blue", "green"],
        }
    )
    settings.register_node_settings(
        "test-node",
        {"testNodeSetting": NodeSetting(value="helloWorld", exportable=True)},
    )
    return settings


@pytest.fixture
def mock_nodes():
    """Create a mock node registry with the palette editor enabled."""
    nodes = MagicMock()
    nodes.palette_editor_enabled = MagicMock(return_value=True)
    nodes.get_credential_key_type = MagicMock(return_value="test-key-type")
    return nodes


@pytest.fixture
def mock_theme():
    theme = MagicMock()
    theme.settings = MagicMock(return_value={"test": 456})
    return theme


@pytest.fixture
def mock_log():
    return MagicMock()


@pytest.fixture
def git_user():
    return GitUser(name="foo", email="foo@example.com")


@pytest.fixture
def make_projects(git_user):
    """Factory for mock project stores."""

    def _make(active_project=None, flow_file_exists=False, global_git_user=git_user):
        projects = MagicMock()
        projects.get_active_project = AsyncMock(return_value=active_project)
        projects.flow_file_exists = AsyncMock(return_value=flow_file_exists)
        projects.get_flow_filename = MagicMock(return_value="test-flow-file")
        projects.get_credentials_filename = MagicMock(return_value="test-creds-file")
        projects.get_global_git_user = AsyncMock(return_value=global_git_user)
        return projects

    return _make


@pytest.fixture
def make_context(runtime_settings, mock_nodes, mock_log):
    """Factory for runtime contexts, optionally with a projects capability."""

    def _make(projects=None, settings=None, nodes=None):
        return RuntimeContext(
            settings=runtime_settings if settings is None else settings,
            nodes=mock_nodes if nodes is None else nodes,
            storage=Storage(projects=projects),
            log=mock_log,
        )

    return _make


@pytest.fixture
def exporter(make_context, mock_theme):
    return SettingsExporter(make_context(), mock_theme)
