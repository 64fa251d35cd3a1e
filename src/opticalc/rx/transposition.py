"""Transposition between plus- and minus-cylinder notation.

Extended Summary
----------------
Every toric lens can be written with a plus or a minus cylinder. The
two forms describe the same optical power and differ in the sign of
the cylinder and an axis rotated by 90 degrees.

Routine Listings
----------------
transpose : function
    Rewrite a prescription in the opposite cylinder form

Notes
-----
Rules:

1. New sphere = sphere + cylinder
2. New cylinder = -cylinder
3. New axis = axis + 90 if axis < 90, axis - 90 otherwise
"""

import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from opticalc.utils import SpheroCyl, make_sphero_cyl


@jaxtyped(typechecker=beartype)
def transpose(lens: SpheroCyl) -> SpheroCyl:
    """Transpose a prescription to the opposite cylinder form.

    Parameters
    ----------
    lens : SpheroCyl
        Prescription in plus- or minus-cylinder form.

    Returns
    -------
    transposed : SpheroCyl
        Same lens written with the opposite cylinder sign. Meridional
        power is unchanged at every meridian.

    Notes
    -----
    The axis is rotated as (axis + 90) mod 180, so an axis of 180
    becomes 90 and 90 becomes 0. The axis is rotated even for a zero
    cylinder. Applying the transposition twice returns the original
    lens, with the axis reduced modulo 180.

    Examples
    --------
    >>> lens = make_sphero_cyl(-3.50, 2.00, 150.0)
    >>> transpose(lens)  # -1.50 / -2.00 x 60
    """
    sphere: Float[Array, " "] = lens.sphere + lens.cylinder
    cylinder: Float[Array, " "] = -lens.cylinder
    axis_deg: Float[Array, " "] = jnp.mod(lens.axis_deg + 90.0, 180.0)
    return make_sphero_cyl(sphere=sphere, cylinder=cylinder, axis_deg=axis_deg)
