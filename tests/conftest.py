"""Root pytest configuration.

Test Structure:
    tests/
    └── lanyard/
        └── unit/              # Fast, isolated tests (SQLite via aiosqlite)
            ├── domain/
            ├── application/
            ├── infrastructure/
            └── presentation/

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from lanyard_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Optional local overrides for tests
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Start every test from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
