"""Geology and mineralogy library: minerals, rocks, sediment, ore, hydrothermal systems, hydrology and rock mechanics."""

__version__ = "1.1.0"

__all__ = [
    "failure",
    "hydrology",
    "hydrothermal",
    "logsetup",
    "materials",
    "mineral",
    "ore",
    "rock",
    "sediment",
]