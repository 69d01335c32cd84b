"""
Tests for settings and the production switch
"""

import pytest

from content_registrar import ComponentRegistrar, ComponentRenderer
from content_registrar.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_to_production(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.ENVIRONMENT == "production"
    assert settings.IS_PRODUCTION is True


@pytest.mark.parametrize("environment, expected", [
    ("production", True),
    ("PRODUCTION", True),
    ("development", False),
    ("test", False),
])
def test_environment_controls_production(monkeypatch, environment, expected):
    monkeypatch.setenv("ENVIRONMENT", environment)

    assert Settings(_env_file=None).IS_PRODUCTION is expected


def test_registrar_reads_production_from_settings(monkeypatch, logger):
    monkeypatch.setenv("ENVIRONMENT", "development")

    registrar = ComponentRegistrar(logger=logger)
    ComponentRenderer(registrar).render_content_area([{"type": "unknown"}])

    assert registrar.production is False
    logger.warning.assert_called_once()


def test_explicit_production_overrides_settings(monkeypatch, logger):
    monkeypatch.setenv("ENVIRONMENT", "development")

    registrar = ComponentRegistrar(logger=logger, production=True)
    ComponentRenderer(registrar).render_content_area([{"type": "unknown"}])

    logger.warning.assert_not_called()
