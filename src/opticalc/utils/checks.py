"""Contract assertions that are safe to call under JAX tracing.

Extended Summary
----------------
Thin wrappers around chex scalar assertions. A check runs whenever the
value it inspects is concrete and is skipped while the value is an
abstract tracer inside ``jax.jit``. Every check can be switched off
globally with ``chex.disable_asserts()``.

Routine Listings
----------------
concrete_value : function
    Return a Python float for a concrete scalar, or None under tracing
assert_non_negative : function
    Assert that a scalar is zero or positive
assert_greater_than : function
    Assert that a scalar is strictly greater than a bound
"""

import chex
import jax
from beartype import beartype
from beartype.typing import Optional

from .types import ScalarNumeric


@beartype
def concrete_value(value: ScalarNumeric) -> Optional[float]:
    """Return ``value`` as a Python float, or None if it is traced."""
    try:
        return float(value)
    except jax.errors.ConcretizationTypeError:
        return None


@beartype
def assert_non_negative(value: ScalarNumeric) -> None:
    """Assert ``value >= 0`` when it is concrete.

    Raises
    ------
    AssertionError
        If ``value`` is negative and chex assertions are enabled.
    """
    concrete: Optional[float] = concrete_value(value)
    if concrete is not None:
        chex.assert_scalar_non_negative(concrete)


@beartype
def assert_greater_than(value: ScalarNumeric, bound: float) -> None:
    """Assert ``value > bound`` when it is concrete.

    Raises
    ------
    AssertionError
        If ``value <= bound`` and chex assertions are enabled.
    """
    concrete: Optional[float] = concrete_value(value)
    if concrete is not None:
        chex.assert_scalar_positive(concrete - bound)
