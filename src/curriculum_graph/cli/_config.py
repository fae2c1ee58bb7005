"""Project-level configuration from pyproject.toml.

Reads the [tool.curriculum_graph] section to provide default seed,
viewport and tier sizes for the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from curriculum_graph.coordinates import MIN_HEIGHT, MIN_WIDTH


@dataclass(frozen=True)
class CurriculumGraphConfig:
    """Configuration from [tool.curriculum_graph] in pyproject.toml."""

    seed: int | None = None
    width: float = MIN_WIDTH
    height: float = MIN_HEIGHT
    sizes: dict[str, int] = field(default_factory=dict)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> CurriculumGraphConfig:
    """Load [tool.curriculum_graph] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.curriculum_graph] section.
    """
    path = find_pyproject(start)
    if path is None:
        return CurriculumGraphConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return CurriculumGraphConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("curriculum_graph", {})
    if not section:
        return CurriculumGraphConfig()

    return CurriculumGraphConfig(
        seed=section.get("seed"),
        width=float(section.get("width", MIN_WIDTH)),
        height=float(section.get("height", MIN_HEIGHT)),
        sizes=dict(section.get("sizes", {})),
    )
