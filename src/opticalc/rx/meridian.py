"""Meridional power of a spherocylindrical lens.

Extended Summary
----------------
The power of a toric lens varies with meridian: it equals the sphere
along the cylinder axis and sphere plus cylinder perpendicular to it.

Routine Listings
----------------
power_at : function
    Power of a lens in the meridian at a given angle
oblique_meridian : function
    Alias of power_at under its clinical name
"""

import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from opticalc.utils import ScalarNumeric, SpheroCyl


@jaxtyped(typechecker=beartype)
def power_at(lens: SpheroCyl, phi_deg: ScalarNumeric) -> Float[Array, " "]:
    """Compute the power of a lens in the meridian at ``phi_deg``.

    Parameters
    ----------
    lens : SpheroCyl
        Prescription in plus- or minus-cylinder form.
    phi_deg : ScalarNumeric
        Meridian in degrees. 0 is the horizontal meridian, 90 the
        vertical one.

    Returns
    -------
    power : Float[Array, " "]
        Meridional power in diopters, S + C sin^2(phi - axis).

    Notes
    -----
    At phi = 0 this is the Px entry of the power matrix and at phi = 90
    the Py entry.

    Examples
    --------
    >>> lens = make_sphero_cyl(-2.0, 3.0, 25.0)
    >>> power_at(lens, 115.0)  # sphere + cylinder = 1.0
    """
    delta_rad: Float[Array, " "] = jnp.deg2rad(phi_deg - lens.axis_deg)
    sin_delta: Float[Array, " "] = jnp.sin(delta_rad)
    return lens.sphere + lens.cylinder * sin_delta * sin_delta


@jaxtyped(typechecker=beartype)
def oblique_meridian(
    lens: SpheroCyl, meridian_deg: ScalarNumeric
) -> Float[Array, " "]:
    """Power of ``lens`` in an oblique meridian, see :func:`power_at`."""
    return power_at(lens, meridian_deg)
