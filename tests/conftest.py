"""
Shared pytest fixtures and configuration for worldkeeper tests.

This module provides common fixtures used across the test suite: sample
configuration documents, temporary configuration files, and mocks for the
host collaborators (running worlds and the generator registry).
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

# Put `src/` first so `import worldkeeper` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from worldkeeper.core.utils.logger import reset_logging  # noqa: E402
from worldkeeper.core.world import WorldConfiguration, WorldType  # noqa: E402


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """A complete stored configuration document."""
    return {
        "name": "skyworld",
        "type": "FLAT",
        "settings": "2;7,2x3,2;1;village",
        "seed": -9023372036854775808,
        "generateStructures": False,
        "generator": "IslandGen",
        "generatorArg": "islands=12",
        "loaded": False,
        "flags": {"pvp": "false", "gamemode": "creative"},
    }


@pytest.fixture
def sample_config() -> WorldConfiguration:
    """The record matching `sample_config_data`."""
    record = (
        WorldConfiguration.builder()
        .set_name("skyworld")
        .set_type(WorldType.FLAT)
        .set_settings("2;7,2x3,2;1;village")
        .set_seed(-9023372036854775808)
        .set_generate_structures(False)
        .set_generator("IslandGen")
        .set_generator_arg("islands=12")
        .build()
    )
    record.set_loaded(False)
    record.set_flag("pvp", "false")
    record.set_flag("gamemode", "creative")
    return record


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_config_data: Dict[str, Any]) -> Path:
    """Create a temporary world configuration file."""
    file_path = tmp_path / "skyworld.json"
    file_path.write_text(json.dumps(sample_config_data, indent=2), encoding="utf-8")
    return file_path


# ============================================================================
# Host Collaborator Fixtures
# ============================================================================

@pytest.fixture
def live_world() -> MagicMock:
    """A running world with no generator attached."""
    world = MagicMock()
    world.name = "survival"
    world.environment = "NORMAL"
    world.seed = 1234567890123
    world.generate_structures = True
    world.generator = None
    return world


@pytest.fixture
def generator_registry() -> MagicMock:
    """A generator registry that knows no generators."""
    registry = MagicMock()
    registry.lookup_registered_generator.return_value = None
    registry.reverse_resolve_owner.return_value = None
    return registry


@pytest.fixture(autouse=True)
def _fresh_logger():
    """Give every test a freshly configured logger."""
    reset_logging()
    yield
    reset_logging()
