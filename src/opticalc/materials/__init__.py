"""Spectacle lens material constants.

Extended Summary
----------------
Refractive indices of common lens materials and a lookup by name.

Submodules
----------
indices
    Material refractive index table

Routine Listings
----------------
CR_39_INDEX : float
    CR-39 plastic, 1.498
CROWN_GLASS_INDEX : float
    Crown glass, 1.523
HIGH_INDEX_160_INDEX : float
    1.60 high-index plastic
HIGH_INDEX_167_INDEX : float
    1.67 high-index plastic
HIGH_INDEX_174_INDEX : float
    1.74 high-index plastic
MATERIAL_INDICES : dict
    Material name to refractive index
POLYCARBONATE_INDEX : float
    Polycarbonate, 1.586
TRIVEX_INDEX : float
    Trivex, 1.532
refractive_index : function
    Look up a refractive index by material name
"""

from .indices import (
    CR_39_INDEX,
    CROWN_GLASS_INDEX,
    HIGH_INDEX_160_INDEX,
    HIGH_INDEX_167_INDEX,
    HIGH_INDEX_174_INDEX,
    MATERIAL_INDICES,
    POLYCARBONATE_INDEX,
    TRIVEX_INDEX,
    refractive_index,
)

__all__: list[str] = [
    "CR_39_INDEX",
    "CROWN_GLASS_INDEX",
    "HIGH_INDEX_160_INDEX",
    "HIGH_INDEX_167_INDEX",
    "HIGH_INDEX_174_INDEX",
    "MATERIAL_INDICES",
    "POLYCARBONATE_INDEX",
    "TRIVEX_INDEX",
    "refractive_index",
]
