"""
Configuration module for the sparse Game of Life.

Contains all configurable parameters for world setup, evolution, rendering
and coordinate files.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum
import codecs
import json
from pathlib import Path


# Interactive world-size menu: label -> cells on each side
WORLD_SIZES: Dict[str, int] = {
    "Small (5x5)": 5,
    "Medium (10x10)": 10,
    "Large (25x25)": 25,
    "Extra large (50x50)": 50,
}


class Strategy(Enum):
    """Traversal used by the generation engine."""
    STACK = "stack"          # Explicit work list
    RECURSIVE = "recursive"  # Function recursion


@dataclass
class SetupParams:
    """Random generation-zero parameters."""
    grid_size: int = 5              # Cells on each side of the square
    population: float = 25.0        # % of populated cells, in (0, 100]
    random_seed: Optional[int] = None  # None = random seed


@dataclass
class RenderParams:
    """Text rendering parameters."""
    column_sep: str = "|"
    row_sep: str = "\n"
    populated_char: str = "X"
    not_populated_char: str = " "


@dataclass
class EvolutionParams:
    """Evolution engine parameters."""
    strategy: Strategy = Strategy.STACK

    # History
    store_history: bool = True
    history_stride: int = 1         # Store every N-th generation


@dataclass
class StopParams:
    """Stopping criteria parameters."""
    max_generations: int = 100
    stop_when_extinct: bool = True


@dataclass
class StorageParams:
    """Coordinate file parameters."""
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass
class LifeConfig:
    """
    Main configuration container.

    Example:
        config = LifeConfig(setup=SetupParams(grid_size=10, population=30))
        config.save("my_config.json")
    """
    setup: SetupParams = field(default_factory=SetupParams)
    render: RenderParams = field(default_factory=RenderParams)
    evolution: EvolutionParams = field(default_factory=EvolutionParams)
    stop: StopParams = field(default_factory=StopParams)
    storage: StorageParams = field(default_factory=StorageParams)

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self._to_dict()
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: str | Path) -> "LifeConfig":
        """Load configuration from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls._from_dict(data)

    def _to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        def convert(obj):
            if isinstance(obj, Enum):
                return obj.value
            elif hasattr(obj, '__dataclass_fields__'):
                return {k: convert(v) for k, v in obj.__dict__.items()}
            return obj

        return convert(self)

    @classmethod
    def _from_dict(cls, data: dict) -> "LifeConfig":
        """Reconstruct from dictionary."""
        data = dict(data)

        # Unknown keys surface as TypeError from the dataclass constructors
        try:
            if 'setup' in data:
                data['setup'] = SetupParams(**data['setup'])
            if 'render' in data:
                data['render'] = RenderParams(**data['render'])
            if 'evolution' in data:
                evolution = dict(data['evolution'])
                if 'strategy' in evolution:
                    evolution['strategy'] = Strategy(evolution['strategy'])
                data['evolution'] = EvolutionParams(**evolution)
            if 'stop' in data:
                data['stop'] = StopParams(**data['stop'])
            if 'storage' in data:
                data['storage'] = StorageParams(**data['storage'])

            return cls(**data)
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def validate(self) -> List[str]:
        """Validate configuration, return list of warnings/errors."""
        issues = []

        if self.setup.grid_size < 1:
            issues.append("grid_size must be at least 1")
        if not 0 < self.setup.population <= 100:
            issues.append("population must be in (0, 100]")

        if self.evolution.history_stride < 1:
            issues.append("history_stride must be at least 1")
        if self.stop.max_generations < 0:
            issues.append("max_generations must be non-negative")

        if not self.storage.delimiter:
            issues.append("delimiter must not be empty")
        if any(c in "-0123456789" for c in self.storage.delimiter):
            issues.append("delimiter must not contain digits or '-'")
        try:
            codecs.lookup(self.storage.encoding)
        except LookupError:
            issues.append(f"unknown encoding: {self.storage.encoding}")

        if self.render.populated_char == self.render.not_populated_char:
            issues.append("populated_char and not_populated_char must differ")

        return issues


# Preset configurations
def minimal_config() -> LifeConfig:
    """Small seeded world for quick testing."""
    return LifeConfig(
        setup=SetupParams(grid_size=5, population=25.0, random_seed=42),
        stop=StopParams(max_generations=10),
    )


def standard_config() -> LifeConfig:
    """Standard configuration for typical runs."""
    return LifeConfig(
        setup=SetupParams(grid_size=25, population=25.0),
        stop=StopParams(max_generations=100),
    )
