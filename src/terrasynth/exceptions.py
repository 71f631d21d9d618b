"""Custom exceptions for terrain synthesis."""


class TerrainError(Exception):
    """Base exception for terrain synthesis errors."""

    pass


class OutOfRangeError(TerrainError, IndexError):
    """Raised when an archetype index or name is not in the catalog."""

    pass


class GridAllocationError(TerrainError, MemoryError):
    """Raised when a height grid cannot be allocated."""

    pass
