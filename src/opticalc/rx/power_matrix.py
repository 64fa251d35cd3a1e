"""Dioptric power matrix algebra for spherocylindrical lenses.

Extended Summary
----------------
A thin spherocylindrical lens is fully described by a symmetric 2x2
power matrix. Stacking thin lenses in contact adds their matrices, and
the sum decomposes back into a single sphere, cylinder and axis. This
module holds the two directions of that mapping plus the matrix sum,
and is shared by the crossed-cylinder combiner and the induced-prism
calculator.

Routine Listings
----------------
sphero_cyl_to_matrix : function
    Build the power matrix of a SpheroCyl
matrix_to_sphero_cyl : function
    Decompose a power matrix into minus-cylinder form
add_power_matrices : function
    Componentwise sum of two power matrices

Notes
-----
With S the sphere, C the cylinder and a the axis::

    Px = S + C sin^2(a)
    Py = S + C cos^2(a)
    Pt = -C sin(a) cos(a)

The trace of the matrix is 2S + C and its determinant is S(S + C), so
the cylinder magnitude is sqrt(trace^2 - 4 det) = hypot(Px - Py, 2 Pt).
Every matrix has two prescriptions, a minus- and a plus-cylinder form
90 degrees apart; decomposition always returns the minus-cylinder form.

References
----------
1. Keating, M. P. "An easier method to obtain the sphere, cylinder,
   and axis from an off-axis dioptric power matrix" Am. J. Optom.
   Physiol. Opt. (1980)
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from opticalc.utils import (
    PowerMatrix,
    SpheroCyl,
    make_power_matrix,
    make_sphero_cyl,
)

jax.config.update("jax_enable_x64", True)


@jaxtyped(typechecker=beartype)
def sphero_cyl_to_matrix(lens: SpheroCyl) -> PowerMatrix:
    """Build the dioptric power matrix of a spherocylindrical lens.

    Parameters
    ----------
    lens : SpheroCyl
        Prescription in plus- or minus-cylinder form. The axis may lie
        outside [0, 180).

    Returns
    -------
    matrix : PowerMatrix
        Symmetric power matrix with ``px`` the horizontal meridian
        power, ``py`` the vertical meridian power and ``pt`` the
        torsional term.

    Examples
    --------
    >>> lens = make_sphero_cyl(0.0, -2.0, 90.0)
    >>> matrix = sphero_cyl_to_matrix(lens)  # px = -2, py = 0, pt = 0
    """
    axis_rad: Float[Array, " "] = jnp.deg2rad(lens.axis_deg)
    sin_axis: Float[Array, " "] = jnp.sin(axis_rad)
    cos_axis: Float[Array, " "] = jnp.cos(axis_rad)
    px: Float[Array, " "] = lens.sphere + lens.cylinder * sin_axis * sin_axis
    pt: Float[Array, " "] = -lens.cylinder * sin_axis * cos_axis
    py: Float[Array, " "] = lens.sphere + lens.cylinder * cos_axis * cos_axis
    return make_power_matrix(px=px, pt=pt, py=py)


@jaxtyped(typechecker=beartype)
def matrix_to_sphero_cyl(matrix: PowerMatrix) -> SpheroCyl:
    """Decompose a power matrix into sphere, cylinder and axis.

    Parameters
    ----------
    matrix : PowerMatrix
        Symmetric power matrix, typically a sum of lens matrices.

    Returns
    -------
    lens : SpheroCyl
        Equivalent prescription in minus-cylinder form with the axis
        normalised to [0, 180).

    Notes
    -----
    Algorithm:

    - trace = Px + Py
    - delta = hypot(Px - Py, 2 Pt), the square root of the
      discriminant trace^2 - 4 det written without the cancellation
      between trace^2 and 4 det that a high sphere causes
    - cylinder = -delta, sphere = (trace - cylinder) / 2
    - axis from the eigenvector of the larger eigenvalue, in degrees,
      wrapped into [0, 180)

    The axis satisfies tan(axis) = (sphere - Px) / Pt. It is computed
    in the equivalent half-angle form 0.5 atan2(2 Pt, Px - Py), which
    stays well conditioned when Pt vanishes and ``sphere - Px`` is pure
    rounding noise (axis 0 or 90).

    When Pt == 0 and Px == Py the lens is a pure sphere and atan2(0, 0)
    returns 0. The axis carries no information in that case.
    """
    trace: Float[Array, " "] = matrix.trace()
    delta: Float[Array, " "] = jnp.hypot(
        matrix.px - matrix.py, 2.0 * matrix.pt
    )
    cylinder: Float[Array, " "] = -delta
    sphere: Float[Array, " "] = (trace - cylinder) / 2.0
    double_axis_rad: Float[Array, " "] = jnp.arctan2(
        2.0 * matrix.pt, matrix.px - matrix.py
    )
    axis_deg: Float[Array, " "] = jnp.rad2deg(double_axis_rad) / 2.0
    axis_deg = jnp.where(axis_deg < 0.0, axis_deg + 180.0, axis_deg)
    axis_deg = jnp.where(axis_deg >= 180.0, axis_deg - 180.0, axis_deg)
    return make_sphero_cyl(sphere=sphere, cylinder=cylinder, axis_deg=axis_deg)


@jaxtyped(typechecker=beartype)
def add_power_matrices(first: PowerMatrix, second: PowerMatrix) -> PowerMatrix:
    """Sum two power matrices, i.e. two thin lenses in contact."""
    return make_power_matrix(
        px=first.px + second.px,
        pt=first.pt + second.pt,
        py=first.py + second.py,
    )
