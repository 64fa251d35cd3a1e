"""Refractive indices of common spectacle lens materials.

Extended Summary
----------------
Named constants for the materials an optical lab meets day to day, plus
a lookup by name for callers that receive the material as text. The
values plug straight into :func:`opticalc.rx.convert_power`.

Routine Listings
----------------
CR_39_INDEX : float
    CR-39 (Columbia Resin #39) plastic
TRIVEX_INDEX : float
    Trivex
POLYCARBONATE_INDEX : float
    Polycarbonate
CROWN_GLASS_INDEX : float
    Crown glass, the usual lensmeter calibration
HIGH_INDEX_160_INDEX : float
    1.60 high-index plastic
HIGH_INDEX_167_INDEX : float
    1.67 high-index plastic
HIGH_INDEX_174_INDEX : float
    1.74 high-index plastic
MATERIAL_INDICES : dict
    Material name to refractive index
refractive_index : function
    Look up a refractive index by material name

Notes
-----
All indices are n_d, measured at the sodium D-line (589.3 nm) at 20 C.
"""

import logging

from beartype import beartype

logger: logging.Logger = logging.getLogger(__name__)

CR_39_INDEX: float = 1.498
TRIVEX_INDEX: float = 1.532
POLYCARBONATE_INDEX: float = 1.586
CROWN_GLASS_INDEX: float = 1.523
HIGH_INDEX_160_INDEX: float = 1.600
HIGH_INDEX_167_INDEX: float = 1.670
HIGH_INDEX_174_INDEX: float = 1.740

MATERIAL_INDICES: dict[str, float] = {
    "cr-39": CR_39_INDEX,
    "trivex": TRIVEX_INDEX,
    "polycarbonate": POLYCARBONATE_INDEX,
    "crown glass": CROWN_GLASS_INDEX,
    "high index 1.60": HIGH_INDEX_160_INDEX,
    "high index 1.67": HIGH_INDEX_167_INDEX,
    "high index 1.74": HIGH_INDEX_174_INDEX,
}


@beartype
def refractive_index(material: str) -> float:
    """Look up the refractive index of a lens material.

    Parameters
    ----------
    material : str
        Material name as listed in ``MATERIAL_INDICES``. Matching
        ignores case and surrounding whitespace, and treats ``_`` as a
        space.

    Returns
    -------
    n : float
        Refractive index at 589.3 nm.

    Raises
    ------
    ValueError
        If the material is not in the table.

    Examples
    --------
    >>> refractive_index("Polycarbonate")
    1.586
    """
    key: str = material.strip().lower().replace("_", " ")
    if key not in MATERIAL_INDICES:
        raise ValueError(f"Unknown material: {material}")
    n: float = MATERIAL_INDICES[key]
    logger.debug("Resolved material %r to n=%.3f", material, n)
    return n
