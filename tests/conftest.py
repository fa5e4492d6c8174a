"""Shared test fixtures and configuration for wp-essentials tests.

Fixtures build real registries, managers and settings; only the SVG sanitizer
is replaced where a test needs to control its result.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from wp_essentials.config import Settings
from wp_essentials.context import RequestContext
from wp_essentials.core.logging import setup_logging
from wp_essentials.hooks import HookManager, HookRegistry


def pytest_configure(config: pytest.Config) -> None:
    """Configure logging once for the whole run."""
    setup_logging(json_logs=False, log_level_name="DEBUG")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer environment variables and .env files out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("WP_ESSENTIALS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def hook_registry() -> HookRegistry:
    """Create a fresh hook registry for testing."""
    return HookRegistry()


@pytest.fixture
def hook_manager(hook_registry: HookRegistry) -> HookManager:
    """Create a hook manager with the test registry."""
    return HookManager(hook_registry)


@pytest.fixture
def front_context() -> RequestContext:
    return RequestContext(query_string="", request_uri="/", is_admin=False)


@pytest.fixture
def admin_context() -> RequestContext:
    return RequestContext(
        query_string="", request_uri="/wp-admin/index.php", is_admin=True
    )


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings from keyword overrides, ignoring the environment."""

    def factory(**overrides: object) -> Settings:
        return Settings.from_config(**overrides)

    return factory


@pytest.fixture
def all_integrations_settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory(
        content_dir="/srv/www/wp-content",
        integrations={
            "acf_active": True,
            "gravity_forms_active": True,
            "gravity_forms_html5": True,
        },
    )


class StubSanitizer:
    """Sanitizer returning a fixed result and recording its input."""

    def __init__(self, result: str | None):
        self.result = result
        self.calls: list[str | bytes] = []

    def sanitize(self, markup: str | bytes) -> str | None:
        self.calls.append(markup)
        return self.result


@pytest.fixture
def stub_sanitizer_factory() -> Callable[[str | None], StubSanitizer]:
    return StubSanitizer
