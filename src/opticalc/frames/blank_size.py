"""Minimum lens blank size for single vision lenses.

Extended Summary
----------------
The smallest uncut blank that still covers the frame opening once the
optical center is moved to the wearer's pupil. All lengths are in
millimeters.

Routine Listings
----------------
lens_decentration : function
    Total decentration, frame PD minus wearer PD
minimum_blank_size : function
    Smallest usable blank diameter
recommended_blank_size : function
    Minimum blank size plus the working edge allowance

Notes
-----
Minimum blank size = ED + (A + DBL - PD), where ED is the effective
diameter of the frame, A the eyesize, DBL the bridge and PD the
wearer's interpupillary distance. A + DBL - PD is the total
decentration of the pair and may be negative when the wearer's PD is
wider than the frame PD.
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from opticalc.utils import ScalarNumeric, assert_non_negative

jax.config.update("jax_enable_x64", True)

WORKING_EDGE_MM: float = 2.0


@jaxtyped(typechecker=beartype)
def lens_decentration(
    eyesize_mm: ScalarNumeric,
    bridge_mm: ScalarNumeric,
    ipd_mm: ScalarNumeric,
) -> Float[Array, " "]:
    """Frame PD (eyesize + bridge) minus the wearer's PD."""
    return jnp.asarray(eyesize_mm + bridge_mm - ipd_mm, dtype=jnp.float64)


@jaxtyped(typechecker=beartype)
def minimum_blank_size(
    effective_diameter_mm: ScalarNumeric,
    eyesize_mm: ScalarNumeric,
    bridge_mm: ScalarNumeric,
    ipd_mm: ScalarNumeric,
) -> Float[Array, " "]:
    """Calculate the minimum blank size for a single vision lens.

    Parameters
    ----------
    effective_diameter_mm : ScalarNumeric
        Effective diameter (ED) of the frame opening.
    eyesize_mm : ScalarNumeric
        Horizontal width of the lens opening (A).
    bridge_mm : ScalarNumeric
        Distance between the lens openings (DBL).
    ipd_mm : ScalarNumeric
        Wearer's interpupillary distance.

    Returns
    -------
    blank_mm : Float[Array, " "]
        Minimum blank diameter in millimeters.

    Raises
    ------
    AssertionError
        If any measurement is negative, while chex assertions are
        enabled.

    Notes
    -----
    For ordering, prefer :func:`recommended_blank_size`, which leaves a
    1 mm working edge all around the lens.

    Examples
    --------
    >>> minimum_blank_size(55.0, 50.0, 15.0, 53.0)  # 55 + 12 = 67
    """
    for measurement in (effective_diameter_mm, eyesize_mm, bridge_mm, ipd_mm):
        assert_non_negative(measurement)
    return effective_diameter_mm + lens_decentration(
        eyesize_mm, bridge_mm, ipd_mm
    )


@jaxtyped(typechecker=beartype)
def recommended_blank_size(
    effective_diameter_mm: ScalarNumeric,
    eyesize_mm: ScalarNumeric,
    bridge_mm: ScalarNumeric,
    ipd_mm: ScalarNumeric,
) -> Float[Array, " "]:
    """Minimum blank size plus a 2 mm allowance (1 mm working edge).

    Examples
    --------
    >>> recommended_blank_size(55.0, 50.0, 15.0, 53.0)  # 67 + 2 = 69
    """
    minimum: Float[Array, " "] = minimum_blank_size(
        effective_diameter_mm, eyesize_mm, bridge_mm, ipd_mm
    )
    return minimum + WORKING_EDGE_MM
