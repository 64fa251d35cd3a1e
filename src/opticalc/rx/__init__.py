"""Prescription algebra for spherocylindrical lenses.

Extended Summary
----------------
Calculations on sphere/cylinder/axis prescriptions: the dioptric power
matrix and its decomposition, combination of obliquely crossed
cylinders, meridional power, transposition and lensmeter index
correction.

Submodules
----------
crossed_cylinders
    Combination of two lenses in contact
index_conversion
    Lensmeter refractive-index correction
meridian
    Power in an arbitrary meridian
power_matrix
    Dioptric power matrix algebra
transposition
    Plus/minus cylinder transposition

Routine Listings
----------------
add_power_matrices : function
    Componentwise sum of two power matrices
combine_crossed_cylinders : function
    Resultant of two spherocylindrical lenses in contact
convert_power : function
    True power from a power measured under an assumed index
convert_rx : function
    True prescription from a measured prescription
matrix_to_sphero_cyl : function
    Decompose a power matrix into minus-cylinder form
oblique_meridian : function
    Alias of power_at
power_at : function
    Power of a lens in a given meridian
simulate_lensmeter_reading : function
    Expected lensmeter reading for a true prescription
sphero_cyl_to_matrix : function
    Build the power matrix of a SpheroCyl
transpose : function
    Rewrite a prescription in the opposite cylinder form

Notes
-----
All functions are pure, JAX-compatible and support ``jax.jit`` and
``jax.vmap``.
"""

from .crossed_cylinders import combine_crossed_cylinders
from .index_conversion import (
    convert_power,
    convert_rx,
    simulate_lensmeter_reading,
)
from .meridian import oblique_meridian, power_at
from .power_matrix import (
    add_power_matrices,
    matrix_to_sphero_cyl,
    sphero_cyl_to_matrix,
)
from .transposition import transpose

__all__: list[str] = [
    "add_power_matrices",
    "combine_crossed_cylinders",
    "convert_power",
    "convert_rx",
    "matrix_to_sphero_cyl",
    "oblique_meridian",
    "power_at",
    "simulate_lensmeter_reading",
    "sphero_cyl_to_matrix",
    "transpose",
]
