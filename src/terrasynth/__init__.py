"""Archetype-driven procedural terrain synthesis.

This package generates square heightmaps from a small catalog of terrain
archetypes, optionally carving a river, and smooths the result. A fixed
seed reproduces the output exactly.
"""

from .archetypes import (
    CATALOG,
    ArchetypeKind,
    ArchetypeParams,
    TerrainArchetype,
    archetype_count,
    derive_params,
    find_archetype,
    get_archetype,
)
from .config import CarveMode, GenerationConfig, load_config
from .exceptions import GridAllocationError, OutOfRangeError, TerrainError
from .generator import GenerationResult, generate_terrain
from .heightmap import generate_heightmap
from .random_source import RandomSource
from .rivers import carve_river, plan_river_path
from .service import TerrainService
from .smoothing import smooth_terrain
from .validation import ValidationResult, validate_terrain

__all__ = [
    "CATALOG",
    "ArchetypeKind",
    "ArchetypeParams",
    "CarveMode",
    "GenerationConfig",
    "GenerationResult",
    "GridAllocationError",
    "OutOfRangeError",
    "RandomSource",
    "TerrainArchetype",
    "TerrainError",
    "TerrainService",
    "ValidationResult",
    "archetype_count",
    "carve_river",
    "derive_params",
    "find_archetype",
    "generate_heightmap",
    "generate_terrain",
    "get_archetype",
    "load_config",
    "plan_river_path",
    "smooth_terrain",
    "validate_terrain",
]
