"""Type definitions and PyTrees for ophthalmic lens calculations.

Extended Summary
----------------
Scalar type aliases, direction enums and immutable PyTree data
structures shared by every calculator in opticalc. All PyTrees are
NamedTuples registered with JAX, so they can be passed through
``jax.jit``, ``jax.vmap`` and ``jax.grad`` unchanged.

Routine Listings
----------------
Eye : Enum
    Right (OD) or left (OS) eye
HorizontalBase : Enum
    Base in or base out
VerticalBase : Enum
    Base up or base down
SpheroCyl : NamedTuple
    PyTree for a sphere/cylinder/axis lens prescription
PowerMatrix : NamedTuple
    PyTree for the symmetric 2x2 dioptric power matrix
Decentration : NamedTuple
    PyTree for the optical-center offset in the spectacle plane
HorizontalPrism : NamedTuple
    PyTree for a horizontal prism amount and base
VerticalPrism : NamedTuple
    PyTree for a vertical prism amount and base
CombinedPrism : NamedTuple
    PyTree pairing a horizontal and a vertical prism
NonJaxNumber : TypeAlias
    Type alias for Python numeric types
ScalarBool : TypeAlias
    Type alias for scalar boolean values
ScalarFloat : TypeAlias
    Type alias for scalar float values
ScalarNumeric : TypeAlias
    Type alias for any scalar numeric value

Notes
-----
Always use the factory functions in :mod:`opticalc.utils.factory` to
create these PyTrees; they convert inputs to float64 arrays and check
the few contracts the types carry.
"""

from enum import Enum

import jax.numpy as jnp
from beartype.typing import NamedTuple, Optional, Tuple, TypeAlias, Union
from jax.tree_util import register_pytree_node_class
from jaxtyping import Array, Bool, Float, Num

NonJaxNumber: TypeAlias = Union[int, float]
ScalarBool: TypeAlias = Union[bool, Bool[Array, " "]]
ScalarFloat: TypeAlias = Union[float, Float[Array, " "]]
ScalarNumeric: TypeAlias = Union[int, float, Num[Array, " "]]


class Eye(Enum):
    """Which eye a lens is fitted to.

    Nasal is toward the patient's nose, so "in" points the opposite
    way in the spectacle plane for the two eyes.
    """

    OD = "OD"
    OS = "OS"


class HorizontalBase(Enum):
    """Horizontal prism base direction relative to the patient."""

    IN = "In"
    OUT = "Out"


class VerticalBase(Enum):
    """Vertical prism base direction."""

    UP = "Up"
    DOWN = "Down"


@register_pytree_node_class
class SpheroCyl(NamedTuple):
    """PyTree for a spherocylindrical lens prescription.

    Attributes
    ----------
    sphere : Float[Array, " "]
        Spherical component in diopters. +2.00 DS is ``2.0``.
    cylinder : Float[Array, " "]
        Cylindrical component in diopters, in either plus or minus
        form. -1.25 DC x 180 is ``-1.25``.
    axis_deg : Float[Array, " "]
        Cylinder axis in degrees. Canonical range is [0, 180) but any
        value is accepted; the axis is periodic with period 180. It has
        no optical effect when the cylinder is zero.
    """

    sphere: Float[Array, " "]
    cylinder: Float[Array, " "]
    axis_deg: Float[Array, " "]

    def tree_flatten(
        self,
    ) -> Tuple[
        Tuple[Float[Array, " "], Float[Array, " "], Float[Array, " "]],
        None,
    ]:
        """Flatten the SpheroCyl into a tuple of its components."""
        return (self.sphere, self.cylinder, self.axis_deg), None

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[
            Float[Array, " "], Float[Array, " "], Float[Array, " "]
        ],
    ) -> "SpheroCyl":
        """Unflatten the SpheroCyl from a tuple of its components."""
        return cls(*children)


@register_pytree_node_class
class PowerMatrix(NamedTuple):
    """PyTree for the dioptric power matrix of a thin lens.

    The matrix is symmetric::

        [ px  pt ]
        [ pt  py ]

    Attributes
    ----------
    px : Float[Array, " "]
        Power in the horizontal (180) meridian, S + C sin^2(axis).
    pt : Float[Array, " "]
        Torsional cross term, -C sin(axis) cos(axis).
    py : Float[Array, " "]
        Power in the vertical (90) meridian, S + C cos^2(axis).
    """

    px: Float[Array, " "]
    pt: Float[Array, " "]
    py: Float[Array, " "]

    def trace(self) -> Float[Array, " "]:
        """Sum of the diagonal, equal to 2S + C."""
        return self.px + self.py

    def determinant(self) -> Float[Array, " "]:
        """Determinant, equal to S(S + C)."""
        return self.px * self.py - self.pt * self.pt

    def as_array(self) -> Float[Array, " 2 2"]:
        """Return the matrix as a dense 2x2 array."""
        return jnp.array([[self.px, self.pt], [self.pt, self.py]])

    def tree_flatten(
        self,
    ) -> Tuple[
        Tuple[Float[Array, " "], Float[Array, " "], Float[Array, " "]],
        None,
    ]:
        """Flatten the PowerMatrix into a tuple of its components."""
        return (self.px, self.pt, self.py), None

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[
            Float[Array, " "], Float[Array, " "], Float[Array, " "]
        ],
    ) -> "PowerMatrix":
        """Unflatten the PowerMatrix from a tuple of its components."""
        return cls(*children)


@register_pytree_node_class
class Decentration(NamedTuple):
    """PyTree for the offset of the optical center from the pupil.

    Signs are defined in the spectacle plane, not relative to the eye.

    Attributes
    ----------
    vertical_mm : Float[Array, " "]
        Vertical decentration in millimeters, positive up. 3 mm down is
        ``-3.0``.
    horizontal_mm : Float[Array, " "]
        Horizontal decentration in millimeters, positive in (nasal),
        negative out (temporal). 2 mm in is ``2.0``.
    """

    vertical_mm: Float[Array, " "]
    horizontal_mm: Float[Array, " "]

    def tree_flatten(
        self,
    ) -> Tuple[Tuple[Float[Array, " "], Float[Array, " "]], None]:
        """Flatten the Decentration into a tuple of its components."""
        return (self.vertical_mm, self.horizontal_mm), None

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[Float[Array, " "], Float[Array, " "]],
    ) -> "Decentration":
        """Unflatten the Decentration from a tuple of its components."""
        return cls(*children)


@register_pytree_node_class
class HorizontalPrism(NamedTuple):
    """PyTree for a horizontal prism with a clinical base direction.

    Attributes
    ----------
    amount : Float[Array, " "]
        Prism in prism diopters. Never negative.
    base_in : Bool[Array, " "]
        True for base in, False for base out.
    """

    amount: Float[Array, " "]
    base_in: Bool[Array, " "]

    def signed(self) -> Float[Array, " "]:
        """Signed prism: base out positive, base in negative."""
        return jnp.where(self.base_in, -self.amount, self.amount)

    def is_none(self) -> bool:
        """True when the amount is exactly zero."""
        return bool(self.amount == 0.0)

    def base(self) -> Optional[HorizontalBase]:
        """Base direction, or None when there is no prism.

        Needs concrete values, so call it outside of ``jax.jit``.
        """
        if self.is_none():
            return None
        return HorizontalBase.IN if bool(self.base_in) else HorizontalBase.OUT

    def tree_flatten(
        self,
    ) -> Tuple[Tuple[Float[Array, " "], Bool[Array, " "]], None]:
        """Flatten the HorizontalPrism into a tuple of its components."""
        return (self.amount, self.base_in), None

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[Float[Array, " "], Bool[Array, " "]],
    ) -> "HorizontalPrism":
        """Unflatten the HorizontalPrism from a tuple of its components."""
        return cls(*children)


@register_pytree_node_class
class VerticalPrism(NamedTuple):
    """PyTree for a vertical prism with a base direction.

    Attributes
    ----------
    amount : Float[Array, " "]
        Prism in prism diopters. Never negative.
    base_up : Bool[Array, " "]
        True for base up, False for base down.
    """

    amount: Float[Array, " "]
    base_up: Bool[Array, " "]

    def signed(self) -> Float[Array, " "]:
        """Signed prism: base up positive, base down negative."""
        return jnp.where(self.base_up, self.amount, -self.amount)

    def is_none(self) -> bool:
        """True when the amount is exactly zero."""
        return bool(self.amount == 0.0)

    def base(self) -> Optional[VerticalBase]:
        """Base direction, or None when there is no prism.

        Needs concrete values, so call it outside of ``jax.jit``.
        """
        if self.is_none():
            return None
        return VerticalBase.UP if bool(self.base_up) else VerticalBase.DOWN

    def tree_flatten(
        self,
    ) -> Tuple[Tuple[Float[Array, " "], Bool[Array, " "]], None]:
        """Flatten the VerticalPrism into a tuple of its components."""
        return (self.amount, self.base_up), None

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[Float[Array, " "], Bool[Array, " "]],
    ) -> "VerticalPrism":
        """Unflatten the VerticalPrism from a tuple of its components."""
        return cls(*children)


@register_pytree_node_class
class CombinedPrism(NamedTuple):
    """PyTree pairing the horizontal and vertical prism of one lens.

    Attributes
    ----------
    horizontal : HorizontalPrism
        Horizontal component with base in/out.
    vertical : VerticalPrism
        Vertical component with base up/down.
    """

    horizontal: HorizontalPrism
    vertical: VerticalPrism

    def magnitude(self) -> Float[Array, " "]:
        """Length of the resultant prism vector in prism diopters."""
        return jnp.hypot(self.horizontal.amount, self.vertical.amount)

    def tree_flatten(
        self,
    ) -> Tuple[Tuple[HorizontalPrism, VerticalPrism], None]:
        """Flatten the CombinedPrism into a tuple of its components."""
        return (self.horizontal, self.vertical), None

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[HorizontalPrism, VerticalPrism],
    ) -> "CombinedPrism":
        """Unflatten the CombinedPrism from a tuple of its components."""
        return cls(*children)
