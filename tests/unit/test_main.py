"""Unit tests for main application entry point."""

import os
from unittest.mock import MagicMock, Mock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from restaurant_menu_api.repositories.menu_repository import MenuItemRepository
from src.main import create_application, create_repository, get_port


@pytest.mark.unit
class TestGetPort:
    """Tests for get_port function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_to_3000(self) -> None:
        """Test the default listen port."""
        assert get_port() == 3000

    @patch.dict(os.environ, {"PORT": "8080"}, clear=True)
    def test_reads_port_from_environment(self) -> None:
        """Test that PORT overrides the default."""
        assert get_port() == 8080

    @patch.dict(os.environ, {"PORT": "not-a-port"}, clear=True)
    def test_invalid_port_raises(self) -> None:
        """Test that a non-integer PORT is rejected."""
        with pytest.raises(ValueError):
            get_port()


@pytest.mark.unit
class TestCreateRepository:
    """Tests for create_repository function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_seeds_default_menu_with_counter_policy(self) -> None:
        """Test that the repository starts with six items."""
        repository = create_repository()

        assert len(repository) == 6
        assert repository.id_policy == "counter"

    @patch.dict(os.environ, {"MENU_ID_POLICY": "length"}, clear=True)
    def test_reads_id_policy_from_environment(self) -> None:
        """Test that MENU_ID_POLICY selects the id policy."""
        assert create_repository().id_policy == "length"


@pytest.mark.unit
class TestCreateApplication:
    """Tests for create_application function."""

    @patch.dict(os.environ, {"ENVIRONMENT": "test"}, clear=True)
    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    def test_builds_app_without_binding_socket(
        self, mock_configure_logging: Mock, mock_setup_observability: Mock
    ) -> None:
        """Test that the factory returns a servable app over a seeded repository."""
        app = create_application()

        assert isinstance(app, FastAPI)
        mock_configure_logging.assert_called_once_with("INFO")
        mock_setup_observability.assert_called_once_with(app=app, enable_exporters=False)
        assert len(TestClient(app).get("/api/menu").json()) == 6

    @patch.dict(
        os.environ,
        {"ENVIRONMENT": "test", "OTEL_EXPORTER_OTLP_ENDPOINT": "http://collector:4318"},
        clear=True,
    )
    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    def test_enables_exporters_when_endpoint_configured(
        self, mock_configure_logging: Mock, mock_setup_observability: Mock
    ) -> None:
        """Test that an OTLP endpoint turns exporters on."""
        app = create_application()

        mock_setup_observability.assert_called_once_with(app=app, enable_exporters=True)

    @patch.dict(os.environ, {"ENVIRONMENT": "test"}, clear=True)
    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    def test_uses_injected_repository(
        self, mock_configure_logging: Mock, mock_setup_observability: Mock
    ) -> None:
        """Test that a caller-supplied repository is served as-is."""
        repository = MagicMock(spec=MenuItemRepository)
        repository.list_all.return_value = []

        app = create_application(repository=repository)

        assert app.state.repository is repository
        assert TestClient(app).get("/api/menu").json() == []
