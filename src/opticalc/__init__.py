"""Ophthalmic lens optics in JAX.

Extended Summary
----------------
Closed-form formulas used in optical dispensing and lens surfacing:
power-matrix algebra for spherocylindrical lenses, combination of
obliquely crossed cylinders, meridional power, Prentice's-rule induced
prism, transposition, lensmeter index correction and blank sizing. All
functions are pure, differentiable and JIT-compilable.

Routine Listings
----------------
:mod:`frames`
    Frame and lens blank sizing.
:mod:`materials`
    Refractive indices of spectacle lens materials.
:mod:`prism`
    Prism induced by decentered lenses.
:mod:`rx`
    Prescription algebra: power matrices, crossed cylinders,
    transposition and index correction.
:mod:`utils`
    Types, factory functions and contract assertions.

Examples
--------
>>> import opticalc as oc
>>> lens = oc.utils.make_sphero_cyl(-4.0, 2.0, 45.0)
>>> dec = oc.utils.make_decentration(vertical_mm=1.0, horizontal_mm=-2.0)
>>> prism = oc.prism.induced_prism(oc.utils.Eye.OS, lens, dec)
>>> prism.horizontal.base(), prism.vertical.base()

Notes
-----
64-bit precision is enabled in JAX on import. Contract assertions use
chex and can be switched off with ``chex.disable_asserts()``.
"""

import logging
from importlib.metadata import version

# Enable 64-bit precision in JAX (must be set before importing submodules)
import jax  # noqa: E402

jax.config.update("jax_enable_x64", True)

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import (  # noqa: E402, I001
    frames,
    materials,
    prism,
    rx,
    utils,
)

__version__: str = version("opticalc")

__all__: list[str] = [
    "__version__",
    "frames",
    "materials",
    "prism",
    "rx",
    "utils",
]
