"""Tests for config parsing."""

import pytest

from worldgraph.config import Config, GraphConfig, OutputConfig, load_config
from worldgraph.generator import WorldGraphOptions


def test_config_defaults():
    """Config.from_dict with empty dict uses all defaults."""
    config = Config.from_dict({})
    assert config.seed == 0
    assert config.graph.depth == 7
    assert config.graph.final_nodes_count == 3
    assert config.output.output_dir == "./output"
    assert config.output.spoiler is False


def test_config_from_toml(tmp_path):
    """Config.from_toml parses TOML file correctly."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[run]
seed = 42

[graph]
depth = 9
""")
    config = Config.from_toml(config_file)
    assert config.seed == 42
    assert config.graph.depth == 9
    # Defaults for unspecified values
    assert config.graph.final_nodes_count == 3
    assert config.output.output_dir == "./output"


def test_config_full_toml(tmp_path):
    """Config.from_toml parses all sections correctly."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[run]
seed = "dungeon-1"

[graph]
depth = 10
final_nodes_count = 4

[output]
output_dir = "./custom_output"
spoiler = true
""")
    config = Config.from_toml(config_file)
    # Run section
    assert config.seed == "dungeon-1"
    # Graph section
    assert config.graph.depth == 10
    assert config.graph.final_nodes_count == 4
    # Output section
    assert config.output.output_dir == "./custom_output"
    assert config.output.spoiler is True


def test_load_config_helper(tmp_path):
    """load_config convenience function works correctly."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[run]
seed = 99
""")
    config = load_config(config_file)
    assert config.seed == 99
    # Verify defaults are applied
    assert config.graph.depth == 7


def test_load_config_missing_file(tmp_path):
    """A missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_graph_config_to_options():
    """GraphConfig converts to generation options."""
    options = GraphConfig(depth=5, final_nodes_count=2).to_options()
    assert options == WorldGraphOptions(depth=5, final_nodes_count=2)


def test_graph_config_rejects_small_depth():
    """Depth below 4 is rejected."""
    with pytest.raises(ValueError, match="depth must be >= 4"):
        GraphConfig(depth=3)


def test_graph_config_rejects_no_finals():
    """At least one final room is required."""
    with pytest.raises(ValueError, match="final_nodes_count must be >= 1"):
        GraphConfig(final_nodes_count=0)


def test_invalid_toml_values(tmp_path):
    """Invalid values in a TOML file surface as ValueError."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[graph]
depth = 2
""")
    with pytest.raises(ValueError):
        Config.from_toml(config_file)


def test_output_config_defaults():
    """OutputConfig has correct defaults."""
    output = OutputConfig()
    assert output.output_dir == "./output"
    assert output.spoiler is False
