"""Common utility functions used throughout the code.

Extended Summary
----------------
Core utilities for the opticalc package including type definitions,
factory functions, and the contract assertions used by the factories
and calculators. Provides the foundation for type-safe JAX programming
with PyTrees.

Submodules
----------
checks
    Contract assertions that are safe under JAX tracing
factory
    Factory functions for creating data structures
types
    Type definitions and PyTrees

Routine Listings
----------------
assert_greater_than : function
    Assert that a concrete scalar exceeds a bound
assert_non_negative : function
    Assert that a concrete scalar is not negative
concrete_value : function
    Python float for a concrete scalar, None under tracing
make_combined_prism : function
    Factory function for CombinedPrism creation
make_decentration : function
    Factory function for Decentration creation
make_horizontal_prism : function
    Factory function for HorizontalPrism creation
make_power_matrix : function
    Factory function for PowerMatrix creation
make_sphero_cyl : function
    Factory function for SpheroCyl creation
make_vertical_prism : function
    Factory function for VerticalPrism creation
CombinedPrism : PyTree
    PyTree pairing a horizontal and a vertical prism
Decentration : PyTree
    PyTree for optical-center decentration
Eye : Enum
    Right (OD) or left (OS) eye
HorizontalBase : Enum
    Base in or base out
HorizontalPrism : PyTree
    PyTree for a horizontal prism
NonJaxNumber : TypeAlias
    Type alias for Python numeric types
PowerMatrix : PyTree
    PyTree for the 2x2 dioptric power matrix
ScalarBool : TypeAlias
    Type alias for scalar boolean values
ScalarFloat : TypeAlias
    Type alias for scalar float values
ScalarNumeric : TypeAlias
    Type alias for any scalar numeric value
SpheroCyl : PyTree
    PyTree for a sphere/cylinder/axis prescription
VerticalBase : Enum
    Base up or base down
VerticalPrism : PyTree
    PyTree for a vertical prism

Notes
-----
Always use factory functions for creating PyTree instances to ensure
proper type checking and validation. All PyTrees are registered with
JAX and support automatic differentiation.
"""

from .checks import (
    assert_greater_than,
    assert_non_negative,
    concrete_value,
)
from .factory import (
    make_combined_prism,
    make_decentration,
    make_horizontal_prism,
    make_power_matrix,
    make_sphero_cyl,
    make_vertical_prism,
)
from .types import (
    CombinedPrism,
    Decentration,
    Eye,
    HorizontalBase,
    HorizontalPrism,
    NonJaxNumber,
    PowerMatrix,
    ScalarBool,
    ScalarFloat,
    ScalarNumeric,
    SpheroCyl,
    VerticalBase,
    VerticalPrism,
)

__all__: list[str] = [
    "assert_greater_than",
    "assert_non_negative",
    "concrete_value",
    "make_combined_prism",
    "make_decentration",
    "make_horizontal_prism",
    "make_power_matrix",
    "make_sphero_cyl",
    "make_vertical_prism",
    "CombinedPrism",
    "Decentration",
    "Eye",
    "HorizontalBase",
    "HorizontalPrism",
    "NonJaxNumber",
    "PowerMatrix",
    "ScalarBool",
    "ScalarFloat",
    "ScalarNumeric",
    "SpheroCyl",
    "VerticalBase",
    "VerticalPrism",
]
