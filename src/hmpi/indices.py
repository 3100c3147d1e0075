"""
Heavy-metal pollution indices for a single sample.

- HPI (Heavy Metal Pollution Index): weighted mean of sub-indices
  Qi = 100 * (Ci - Si) / Si, with Qi = 0 when Ci <= Si.
- MI (Metal Index): mean of Ci / Si over all metals.
- Cd (Contamination Degree): sum of Ci / Si over all metals.

The calculators return unrounded values. ``calculate_pollution_indices``
classifies the unrounded values and rounds each index once, to 2 decimals,
half away from zero.

Concentrations are not validated here: negative values flow through the
arithmetic and NaN propagates into MI and Cd (NaN never exceeds a standard,
so it contributes nothing to HPI).
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from .classify import classify
from .records import MetalConcentrations, PollutionIndices
from .standards import DEFAULT_STANDARDS, StandardsRegistry


def round_half_away(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals, ties away from zero (2.345 -> 2.35, -2.345 -> -2.35).

    Works on the shortest decimal representation of the float, so values
    printed as x.xx5 always round up in magnitude. NaN and infinities are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(float(value)))
    # no digits past the target precision; quantize of huge values would overflow the context
    if exact.as_tuple().exponent >= -digits:
        return float(value)
    return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def sub_index(concentration: float, limit: float) -> float:
    """HPI sub-index Qi; zero at or below the standard."""
    if concentration > limit:
        return 100 * (concentration - limit) / limit
    return 0.0


def exceedance_ratios(
    metals: MetalConcentrations, standards: StandardsRegistry = DEFAULT_STANDARDS
) -> dict[str, float]:
    """Ci / Si for every metal, in canonical order."""
    conc = metals.as_dict()
    return {metal: conc[metal] / standards.limit(metal) for metal in standards}


def calculate_hpi(metals: MetalConcentrations, standards: StandardsRegistry = DEFAULT_STANDARDS) -> float:
    conc = metals.as_dict()
    weighted_sum = 0.0
    total_weight = 0.0
    for metal, std in standards.items():
        weighted_sum += std.weight * sub_index(conc[metal], std.limit)
        total_weight += std.weight
    return weighted_sum / total_weight if total_weight > 0 else 0.0


def calculate_mi(metals: MetalConcentrations, standards: StandardsRegistry = DEFAULT_STANDARDS) -> float:
    ratios = exceedance_ratios(metals, standards)
    return sum(ratios.values()) / len(ratios)


def calculate_cd(metals: MetalConcentrations, standards: StandardsRegistry = DEFAULT_STANDARDS) -> float:
    return sum(exceedance_ratios(metals, standards).values())


def calculate_pollution_indices(
    metals: MetalConcentrations, standards: StandardsRegistry = DEFAULT_STANDARDS
) -> PollutionIndices:
    """Compute, classify and round all three indices for one sample."""
    hpi = calculate_hpi(metals, standards)
    mi = calculate_mi(metals, standards)
    cd = calculate_cd(metals, standards)
    status, label = classify(hpi, mi, cd)
    return PollutionIndices(
        hpi=round_half_away(hpi),
        mi=round_half_away(mi),
        cd=round_half_away(cd),
        status=status,
        status_label=label,
    )
