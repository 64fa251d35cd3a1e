"""Induced prism from lens decentration (Prentice's rule).

Extended Summary
----------------
Looking through a lens away from its optical center produces prism.
For a sphere this is Prentice's rule, prism = c(cm) x F(D). For a toric
lens the power matrix is applied to the 2-D decentration vector, so the
cylinder's torsional term couples horizontal and vertical decentration.

Routine Listings
----------------
prism_vector : function
    Signed lab-frame (horizontal, vertical) prism of a decentered lens
induced_prism : function
    Induced prism with clinical base directions for one eye

Notes
-----
Conventions:

- Lens powers in diopters, axis in degrees.
- Decentration in millimeters, positive up and positive in (nasal).
- Output prism in prism diopters.

Nasal is toward the patient's nose, so the same "in" decentration
points in opposite lab-frame directions for the right and left eye.
The horizontal decentration is negated for OS before the matrix is
applied, and the base in/out mapping of the horizontal sign is
reversed for OS. The vertical direction is the same for both eyes.
"""

from functools import partial

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Bool, Float, jaxtyped

from opticalc.rx.power_matrix import sphero_cyl_to_matrix
from opticalc.utils import (
    CombinedPrism,
    Decentration,
    Eye,
    PowerMatrix,
    SpheroCyl,
    make_combined_prism,
    make_horizontal_prism,
    make_vertical_prism,
)

jax.config.update("jax_enable_x64", True)

MM_PER_CM: float = 10.0


@partial(jax.jit, static_argnums=(0,))
@jaxtyped(typechecker=beartype)
def prism_vector(
    eye: Eye,
    lens: SpheroCyl,
    dec: Decentration,
) -> Float[Array, " 2"]:
    """Compute the signed lab-frame prism of a decentered lens.

    Parameters
    ----------
    eye : Eye
        Eye the lens is fitted to. Static under JIT.
    lens : SpheroCyl
        Prescription in plus- or minus-cylinder form.
    dec : Decentration
        Offset of the optical center in the spectacle plane.

    Returns
    -------
    vector : Float[Array, " 2"]
        ``[horizontal, vertical]`` prism in prism diopters. The
        vertical component is positive for base up. The meaning of the
        horizontal sign depends on the eye; see :func:`induced_prism`.

    Notes
    -----
    With P the power matrix, in' the eye-adjusted in decentration and
    up the vertical decentration, both in cm::

        horizontal = Px (-in') + Pt (-up)
        vertical   = Pt in'    + Py up

    Zero decentration gives a zero vector for any lens power.
    """
    matrix: PowerMatrix = sphero_cyl_to_matrix(lens)
    nasal_sign: float = 1.0 if eye is Eye.OD else -1.0
    dec_in_cm: Float[Array, " "] = nasal_sign * dec.horizontal_mm / MM_PER_CM
    dec_up_cm: Float[Array, " "] = dec.vertical_mm / MM_PER_CM
    horizontal: Float[Array, " "] = matrix.px * (-dec_in_cm) + matrix.pt * (
        -dec_up_cm
    )
    vertical: Float[Array, " "] = matrix.pt * dec_in_cm + matrix.py * dec_up_cm
    return jnp.stack([horizontal, vertical])


@partial(jax.jit, static_argnums=(0,))
@jaxtyped(typechecker=beartype)
def induced_prism(
    eye: Eye,
    lens: SpheroCyl,
    dec: Decentration,
) -> CombinedPrism:
    """Compute the induced prism of a decentered lens for one eye.

    Parameters
    ----------
    eye : Eye
        Eye the lens is fitted to. Static under JIT.
    lens : SpheroCyl
        Prescription in plus- or minus-cylinder form.
    dec : Decentration
        Offset of the optical center in the spectacle plane, positive
        up and positive in (nasal).

    Returns
    -------
    prism : CombinedPrism
        Horizontal prism with base in/out and vertical prism with base
        up/down. ``prism.horizontal.base()`` and
        ``prism.vertical.base()`` return None when the corresponding
        amount is exactly zero.

    Notes
    -----
    Base directions from the signed components of :func:`prism_vector`:

    - OD: horizontal < 0 is base in, otherwise base out
    - OS: horizontal < 0 is base out, otherwise base in
    - vertical >= 0 is base up, otherwise base down

    Examples
    --------
    +3.00 DS decentered 5 mm in gives 1.5 base in for either eye:

    >>> lens = make_sphero_cyl(3.0)
    >>> dec = make_decentration(horizontal_mm=5.0)
    >>> prism = induced_prism(Eye.OD, lens, dec)
    >>> prism.horizontal.base()  # HorizontalBase.IN
    """
    vector: Float[Array, " 2"] = prism_vector(eye, lens, dec)
    horizontal: Float[Array, " "] = vector[0]
    vertical: Float[Array, " "] = vector[1]
    base_in: Bool[Array, " "] = (
        horizontal < 0.0 if eye is Eye.OD else horizontal >= 0.0
    )
    base_up: Bool[Array, " "] = vertical >= 0.0
    return make_combined_prism(
        horizontal=make_horizontal_prism(jnp.abs(horizontal), base_in),
        vertical=make_vertical_prism(jnp.abs(vertical), base_up),
    )
