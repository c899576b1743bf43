"""Domain enumerations."""
from .region import Region
from .persona import Persona

__all__ = [
    'Region',
    'Persona',
]
