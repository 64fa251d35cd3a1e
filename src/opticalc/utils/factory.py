"""Factory functions for creating data structures.

Extended Summary
----------------
Factory functions for creating the opticalc PyTrees with runtime type
checking. Inputs are converted to float64 JAX arrays; the only value
contract, a non-negative prism amount, is asserted with chex.

Routine Listings
----------------
make_sphero_cyl : function
    Creates a SpheroCyl instance with runtime type checking
make_power_matrix : function
    Creates a PowerMatrix instance with runtime type checking
make_decentration : function
    Creates a Decentration instance with runtime type checking
make_horizontal_prism : function
    Creates a HorizontalPrism instance with amount validation
make_vertical_prism : function
    Creates a VerticalPrism instance with amount validation
make_combined_prism : function
    Creates a CombinedPrism from its two components

Notes
-----
Always use these factory functions instead of directly instantiating the
NamedTuple classes to ensure proper runtime type checking of the
contents.
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Union
from jaxtyping import Array, Bool, Float, jaxtyped

from .checks import assert_non_negative
from .types import (
    CombinedPrism,
    Decentration,
    HorizontalBase,
    HorizontalPrism,
    PowerMatrix,
    ScalarBool,
    ScalarNumeric,
    SpheroCyl,
    VerticalBase,
    VerticalPrism,
)

jax.config.update("jax_enable_x64", True)


@jaxtyped(typechecker=beartype)
def make_sphero_cyl(
    sphere: ScalarNumeric,
    cylinder: ScalarNumeric = 0.0,
    axis_deg: ScalarNumeric = 0.0,
) -> SpheroCyl:
    """JAX-safe factory function for SpheroCyl.

    Parameters
    ----------
    sphere : ScalarNumeric
        Spherical power in diopters.
    cylinder : ScalarNumeric, optional
        Cylinder power in diopters, plus or minus form. Default is 0.
    axis_deg : ScalarNumeric, optional
        Cylinder axis in degrees. Default is 0.

    Returns
    -------
    lens : SpheroCyl
        Prescription with float64 scalar components.

    Notes
    -----
    No range checks are applied: any real sphere and cylinder are valid,
    and out-of-range axes are interpreted modulo 180 by the calculators.

    Examples
    --------
    >>> lens = make_sphero_cyl(-2.00, -1.25, 180.0)
    """
    sphere_arr: Float[Array, " "] = jnp.asarray(sphere, dtype=jnp.float64)
    cylinder_arr: Float[Array, " "] = jnp.asarray(cylinder, dtype=jnp.float64)
    axis_arr: Float[Array, " "] = jnp.asarray(axis_deg, dtype=jnp.float64)
    return SpheroCyl(
        sphere=sphere_arr, cylinder=cylinder_arr, axis_deg=axis_arr
    )


@jaxtyped(typechecker=beartype)
def make_power_matrix(
    px: ScalarNumeric,
    pt: ScalarNumeric,
    py: ScalarNumeric,
) -> PowerMatrix:
    """JAX-safe factory function for PowerMatrix.

    Parameters
    ----------
    px : ScalarNumeric
        Horizontal meridian power in diopters.
    pt : ScalarNumeric
        Torsional (off-diagonal) term in diopters.
    py : ScalarNumeric
        Vertical meridian power in diopters.

    Returns
    -------
    matrix : PowerMatrix
        Symmetric power matrix with float64 entries.
    """
    return PowerMatrix(
        px=jnp.asarray(px, dtype=jnp.float64),
        pt=jnp.asarray(pt, dtype=jnp.float64),
        py=jnp.asarray(py, dtype=jnp.float64),
    )


@jaxtyped(typechecker=beartype)
def make_decentration(
    vertical_mm: ScalarNumeric = 0.0,
    horizontal_mm: ScalarNumeric = 0.0,
) -> Decentration:
    """JAX-safe factory function for Decentration.

    Parameters
    ----------
    vertical_mm : ScalarNumeric, optional
        Vertical offset in millimeters, positive up. Default is 0.
    horizontal_mm : ScalarNumeric, optional
        Horizontal offset in millimeters, positive in (nasal).
        Default is 0.

    Returns
    -------
    decentration : Decentration
        Offset with float64 components.
    """
    return Decentration(
        vertical_mm=jnp.asarray(vertical_mm, dtype=jnp.float64),
        horizontal_mm=jnp.asarray(horizontal_mm, dtype=jnp.float64),
    )


@jaxtyped(typechecker=beartype)
def make_horizontal_prism(
    amount: ScalarNumeric,
    base: Union[HorizontalBase, ScalarBool],
) -> HorizontalPrism:
    """Factory function for HorizontalPrism with amount validation.

    Parameters
    ----------
    amount : ScalarNumeric
        Prism in prism diopters. Must not be negative.
    base : Union[HorizontalBase, ScalarBool]
        Base direction, either as the enum or as a boolean that is true
        for base in. The boolean form is what traced code produces.

    Returns
    -------
    prism : HorizontalPrism
        Validated horizontal prism.

    Raises
    ------
    AssertionError
        If ``amount`` is negative. The check is skipped under
        ``jax.jit`` and when chex assertions are disabled.
    """
    assert_non_negative(amount)
    base_in: Bool[Array, " "]
    if isinstance(base, HorizontalBase):
        base_in = jnp.asarray(base is HorizontalBase.IN)
    else:
        base_in = jnp.asarray(base, dtype=jnp.bool_)
    return HorizontalPrism(
        amount=jnp.asarray(amount, dtype=jnp.float64),
        base_in=base_in,
    )


@jaxtyped(typechecker=beartype)
def make_vertical_prism(
    amount: ScalarNumeric,
    base: Union[VerticalBase, ScalarBool],
) -> VerticalPrism:
    """Factory function for VerticalPrism with amount validation.

    Parameters
    ----------
    amount : ScalarNumeric
        Prism in prism diopters. Must not be negative.
    base : Union[VerticalBase, ScalarBool]
        Base direction, either as the enum or as a boolean that is true
        for base up.

    Returns
    -------
    prism : VerticalPrism
        Validated vertical prism.

    Raises
    ------
    AssertionError
        If ``amount`` is negative. The check is skipped under
        ``jax.jit`` and when chex assertions are disabled.
    """
    assert_non_negative(amount)
    base_up: Bool[Array, " "]
    if isinstance(base, VerticalBase):
        base_up = jnp.asarray(base is VerticalBase.UP)
    else:
        base_up = jnp.asarray(base, dtype=jnp.bool_)
    return VerticalPrism(
        amount=jnp.asarray(amount, dtype=jnp.float64),
        base_up=base_up,
    )


@jaxtyped(typechecker=beartype)
def make_combined_prism(
    horizontal: HorizontalPrism,
    vertical: VerticalPrism,
) -> CombinedPrism:
    """Pair a horizontal and a vertical prism."""
    return CombinedPrism(horizontal=horizontal, vertical=vertical)
