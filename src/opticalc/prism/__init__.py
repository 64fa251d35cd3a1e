"""Prism induced by decentered spectacle lenses.

Extended Summary
----------------
Prentice's rule generalised to toric lenses and two-dimensional
decentration, with clinical base directions resolved per eye.

Submodules
----------
induced
    Induced prism calculations

Routine Listings
----------------
induced_prism : function
    Induced prism with clinical base directions for one eye
prism_vector : function
    Signed lab-frame (horizontal, vertical) prism of a decentered lens

Notes
-----
Both functions are JIT-compiled with the eye as a static argument.
"""

from .induced import induced_prism, prism_vector

__all__: list[str] = [
    "induced_prism",
    "prism_vector",
]
