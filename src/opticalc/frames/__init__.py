"""Frame and lens blank sizing.

Extended Summary
----------------
Lab calculations that relate frame measurements and the wearer's
interpupillary distance to the uncut lens blank.

Submodules
----------
blank_size
    Minimum and recommended blank sizes

Routine Listings
----------------
WORKING_EDGE_MM : float
    Allowance added to the minimum blank size
lens_decentration : function
    Frame PD minus wearer PD
minimum_blank_size : function
    Smallest usable blank diameter
recommended_blank_size : function
    Minimum blank size plus the working edge allowance
"""

from .blank_size import (
    WORKING_EDGE_MM,
    lens_decentration,
    minimum_blank_size,
    recommended_blank_size,
)

__all__: list[str] = [
    "WORKING_EDGE_MM",
    "lens_decentration",
    "minimum_blank_size",
    "recommended_blank_size",
]
