"""Lensmeter refractive-index correction.

Extended Summary
----------------
A lensmeter reports power assuming a fixed refractive index, usually
crown glass (1.523). When the lens is made of another material the
reading is off by the ratio of the lens-maker factors (n - 1). These
functions move powers between the assumed and the actual index.

Routine Listings
----------------
convert_power : function
    True power from a power measured under an assumed index
convert_rx : function
    True sphere/cylinder/axis from a measured prescription
simulate_lensmeter_reading : function
    Expected lensmeter reading for a true prescription

Notes
-----
Thin-lens approximation in air: F = (n - 1) S where S depends only on
the surface curvatures. If a lensmeter computes F_meas with n_assumed::

    F_true = F_meas (n_actual - 1) / (n_assumed - 1)

Thickness and vertex effects are ignored, which is well within ANSI
tolerances for routine work. The axis is never changed.
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped

from opticalc.utils import (
    ScalarNumeric,
    SpheroCyl,
    assert_greater_than,
    make_sphero_cyl,
)

jax.config.update("jax_enable_x64", True)


@jaxtyped(typechecker=beartype)
def convert_power(
    measured_power: ScalarNumeric,
    n_assumed: ScalarNumeric,
    n_actual: ScalarNumeric,
) -> Float[Array, " "]:
    """Convert a power measured under an assumed index to true power.

    Parameters
    ----------
    measured_power : ScalarNumeric
        Power read by the lensmeter in diopters.
    n_assumed : ScalarNumeric
        Refractive index the lensmeter is calibrated for.
    n_actual : ScalarNumeric
        Refractive index of the lens material.

    Returns
    -------
    true_power : Float[Array, " "]
        Power of the lens at its actual index in diopters.

    Raises
    ------
    AssertionError
        If either index is not greater than 1. Checked only for
        concrete values and while chex assertions are enabled.

    Examples
    --------
    Polycarbonate read on a crown-glass lensmeter:

    >>> convert_power(-4.463, 1.523, 1.586)  # about -5.00
    """
    assert_greater_than(n_assumed, 1.0)
    assert_greater_than(n_actual, 1.0)
    k_assumed: Float[Array, " "] = jnp.asarray(n_assumed - 1.0)
    k_actual: Float[Array, " "] = jnp.asarray(n_actual - 1.0)
    return measured_power * (k_actual / k_assumed)


@jaxtyped(typechecker=beartype)
def convert_rx(
    measured: SpheroCyl,
    n_assumed: ScalarNumeric,
    n_actual: ScalarNumeric,
) -> SpheroCyl:
    """Convert a measured prescription to the true prescription.

    Sphere and cylinder are scaled by the same factor; the axis is
    returned unchanged, including for a zero cylinder.

    Parameters
    ----------
    measured : SpheroCyl
        Prescription read under ``n_assumed``.
    n_assumed : ScalarNumeric
        Refractive index the lensmeter is calibrated for.
    n_actual : ScalarNumeric
        Refractive index of the lens material.

    Returns
    -------
    true_rx : SpheroCyl
        Prescription at the actual index.
    """
    return make_sphero_cyl(
        sphere=convert_power(measured.sphere, n_assumed, n_actual),
        cylinder=convert_power(measured.cylinder, n_assumed, n_actual),
        axis_deg=measured.axis_deg,
    )


@jaxtyped(typechecker=beartype)
def simulate_lensmeter_reading(
    true_rx: SpheroCyl,
    n_assumed: ScalarNumeric,
    n_actual: ScalarNumeric,
) -> SpheroCyl:
    """Predict what a lensmeter would read for a true prescription.

    Inverse of :func:`convert_rx`. A true polycarbonate -5.00 D
    (n = 1.586) reads about -4.463 D on a 1.523 lensmeter.

    Parameters
    ----------
    true_rx : SpheroCyl
        Prescription at the actual index of the lens.
    n_assumed : ScalarNumeric
        Refractive index the lensmeter is calibrated for.
    n_actual : ScalarNumeric
        Refractive index of the lens material.

    Returns
    -------
    reading : SpheroCyl
        Prescription the lensmeter would display.
    """
    return make_sphero_cyl(
        sphere=convert_power(true_rx.sphere, n_actual, n_assumed),
        cylinder=convert_power(true_rx.cylinder, n_actual, n_assumed),
        axis_deg=true_rx.axis_deg,
    )
