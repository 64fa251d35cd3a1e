"""Combination of obliquely crossed cylinders.

Extended Summary
----------------
Two spherocylindrical corrections stacked in series act like a single
lens. When their axes are neither parallel nor perpendicular there is
no simple trigonometric rule for the result, but their power matrices
simply add, and the sum decomposes back into one prescription.

Routine Listings
----------------
combine_crossed_cylinders : function
    Resultant sphere, cylinder and axis of two lenses in contact

Notes
-----
Thin-lens approximation: the two lenses are assumed to be in contact
with zero separation, so vertex effects are ignored.
"""

import jax
from beartype import beartype
from jaxtyping import jaxtyped

from opticalc.utils import PowerMatrix, SpheroCyl

from .power_matrix import (
    add_power_matrices,
    matrix_to_sphero_cyl,
    sphero_cyl_to_matrix,
)

jax.config.update("jax_enable_x64", True)


@jaxtyped(typechecker=beartype)
def combine_crossed_cylinders(lens1: SpheroCyl, lens2: SpheroCyl) -> SpheroCyl:
    """Combine two spherocylindrical lenses into one equivalent lens.

    Parameters
    ----------
    lens1 : SpheroCyl
        First lens, in plus- or minus-cylinder form.
    lens2 : SpheroCyl
        Second lens, in plus- or minus-cylinder form.

    Returns
    -------
    resultant : SpheroCyl
        Single prescription with the combined effect, in minus-cylinder
        form with the axis in [0, 180). The axis is arbitrary when the
        resultant cylinder is zero.

    Notes
    -----
    Algorithm:

    - Convert both lenses to power matrices
    - Add the matrices componentwise
    - Decompose the sum into sphere, cylinder and axis

    Non-finite inputs are not guarded and propagate as NaN.

    Examples
    --------
    >>> l1 = make_sphero_cyl(0.0, -2.0, 90.0)
    >>> l2 = make_sphero_cyl(0.0, -1.0, 90.0)
    >>> combine_crossed_cylinders(l1, l2)  # 0.00 / -3.00 x 90
    """
    combined: PowerMatrix = add_power_matrices(
        sphero_cyl_to_matrix(lens1), sphero_cyl_to_matrix(lens2)
    )
    return matrix_to_sphero_cyl(combined)
