"""Configuration parsing for worldgraph."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Use tomllib (Python 3.11+) with fallback to tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError as e:
        raise ImportError(
            "tomli is required for Python < 3.11. Install with: pip install tomli"
        ) from e

from worldgraph.generator import WorldGraphOptions
from worldgraph.placement import MIN_DEPTH


@dataclass
class GraphConfig:
    """World graph shape configuration."""

    depth: int = 7
    final_nodes_count: int = 3

    def __post_init__(self) -> None:
        """Validate graph configuration."""
        if self.depth < MIN_DEPTH:
            raise ValueError(f"depth must be >= {MIN_DEPTH}, got {self.depth}")
        if self.final_nodes_count < 1:
            raise ValueError(
                f"final_nodes_count must be >= 1, got {self.final_nodes_count}"
            )

    def to_options(self) -> WorldGraphOptions:
        """Build generation options from this configuration."""
        return WorldGraphOptions(
            depth=self.depth, final_nodes_count=self.final_nodes_count
        )


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: str = "./output"
    spoiler: bool = False


@dataclass
class Config:
    """Main configuration container."""

    seed: int | str = 0
    graph: GraphConfig = field(default_factory=GraphConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create Config from a dictionary (e.g., parsed TOML)."""
        run_section = data.get("run", {})
        graph_section = data.get("graph", {})
        output_section = data.get("output", {})

        return cls(
            seed=run_section.get("seed", 0),
            graph=GraphConfig(
                depth=graph_section.get("depth", 7),
                final_nodes_count=graph_section.get("final_nodes_count", 3),
            ),
            output=OutputConfig(
                output_dir=output_section.get("output_dir", "./output"),
                spoiler=output_section.get("spoiler", False),
            ),
        )

    @classmethod
    def from_toml(cls, path: str | Path) -> Config:
        """Load configuration from a TOML file."""
        path = Path(path)
        with path.open("rb") as f:
            data = tomllib.load(f)
        return cls.from_dict(data)


def load_config(path: str | Path) -> Config:
    """Load configuration from a TOML file.

    This is a convenience function that wraps Config.from_toml().

    Args:
        path: Path to the TOML configuration file.

    Returns:
        Parsed Config object.
    """
    return Config.from_toml(path)
