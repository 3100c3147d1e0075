from __future__ import annotations

from .records import Status

# (status, label, hpi, mi, cd) thresholds, most severe first.
# A tier applies when any index is strictly greater than its threshold.
TIERS: tuple[tuple[Status, str, float, float, float], ...] = (
    ("danger", "High Contamination", 100.0, 1.5, 3.0),
    ("moderate", "Moderate Contamination", 50.0, 1.0, 1.5),
)
SAFE_LABEL = "Safe Level"

STATUS_LABELS: dict[Status, str] = {
    **{status: label for status, label, *_ in TIERS},
    "safe": SAFE_LABEL,
}


def classify(hpi: float, mi: float, cd: float) -> tuple[Status, str]:
    """Map the three indices to a contamination tier and its display label.

    Boundary values fall into the lower tier: hpi == 100 is "moderate".
    """
    for status, label, hpi_max, mi_max, cd_max in TIERS:
        if hpi > hpi_max or mi > mi_max or cd > cd_max:
            return status, label
    return "safe", SAFE_LABEL
