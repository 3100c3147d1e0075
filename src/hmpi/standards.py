"""
Drinking-water standards and HPI toxicity weights for the tracked heavy metals.

- STANDARD_LIMITS maps each metal to its WHO guideline value (mg/L).
- TOXICITY_WEIGHTS assigns each metal its weight in the Heavy Metal Pollution Index.
- StandardsRegistry bundles both into a read-only, validated table that every
  calculation receives as an argument (DEFAULT_STANDARDS unless overridden).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

import yaml

from .config import METALS
from .errors import InvalidConfigurationError

# WHO guideline values for drinking water (mg/L)
STANDARD_LIMITS = {
    "lead": 0.01,
    "cadmium": 0.003,
    "arsenic": 0.01,
    "chromium": 0.05,
}

# Weights by toxicity (used only in HPI)
TOXICITY_WEIGHTS = {
    "lead": 0.9,
    "cadmium": 1.0,     # Highest weight: high toxicity
    "arsenic": 1.0,     # Highest weight: carcinogenic
    "chromium": 0.8,
}


@dataclass(frozen=True)
class MetalStandard:
    """Regulatory limit (mg/L) and HPI weight for one metal."""

    limit: float
    weight: float


class StandardsRegistry(Mapping[str, MetalStandard]):
    """Immutable metal -> MetalStandard table.

    Every tracked metal must be present with a finite, strictly positive limit
    and weight; anything else raises InvalidConfigurationError on construction.
    Iteration follows the canonical metal order.
    """

    def __init__(self, entries: Mapping[str, MetalStandard]):
        missing = [m for m in METALS if m not in entries]
        if missing:
            raise InvalidConfigurationError(f"Standards missing for metals: {missing}")
        unknown = [m for m in entries if m not in METALS]
        if unknown:
            raise InvalidConfigurationError(f"Untracked metals in standards: {unknown}")
        for metal in METALS:
            entry = entries[metal]
            for field_name in ("limit", "weight"):
                value = getattr(entry, field_name)
                if not _is_positive_finite(value):
                    raise InvalidConfigurationError(
                        f"{metal} {field_name} must be a positive finite number, got {value!r}"
                    )
        self._entries = MappingProxyType(
            {m: MetalStandard(float(entries[m].limit), float(entries[m].weight)) for m in METALS}
        )

    @classmethod
    def from_mapping(
        cls,
        limits: Mapping[str, float] | None = None,
        weights: Mapping[str, float] | None = None,
    ) -> "StandardsRegistry":
        """Build a registry from {metal -> limit} and {metal -> weight} overrides.

        Metals not mentioned keep their default limit / weight, so
        ``StandardsRegistry.from_mapping(limits={"lead": 0.015})`` only
        changes the lead standard.
        """
        lim = {**STANDARD_LIMITS, **dict(limits or {})}
        wts = {**TOXICITY_WEIGHTS, **dict(weights or {})}
        names = set(lim) | set(wts)
        return cls({m: MetalStandard(lim.get(m, math.nan), wts.get(m, math.nan)) for m in names})

    def __getitem__(self, metal: str) -> MetalStandard:
        try:
            return self._entries[metal]
        except KeyError:
            raise KeyError(f"Untracked metal: {metal!r}. Tracked: {list(METALS)}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{m}=({s.limit}, {s.weight})" for m, s in self._entries.items())
        return f"StandardsRegistry({body})"

    def limit(self, metal: str) -> float:
        return self[metal].limit

    def weight(self, metal: str) -> float:
        return self[metal].weight

    @property
    def total_weight(self) -> float:
        return sum(s.weight for s in self._entries.values())


def _is_positive_finite(value) -> bool:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(v) and v > 0


def load_standards(path: str | Path) -> StandardsRegistry:
    """Load a standards table from YAML.

    Expected layout (either section may be omitted; missing metals keep defaults)::

        limits:
          lead: 0.01
        weights:
          cadmium: 1.0
    """
    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise InvalidConfigurationError(f"Standards file {path} must contain a mapping")
    unexpected = set(raw) - {"limits", "weights"}
    if unexpected:
        raise InvalidConfigurationError(f"Unknown sections in {path}: {sorted(unexpected)}")
    for section in ("limits", "weights"):
        if raw.get(section) is not None and not isinstance(raw[section], dict):
            raise InvalidConfigurationError(f"'{section}' in {path} must be a metal -> value mapping")
    return StandardsRegistry.from_mapping(limits=raw.get("limits"), weights=raw.get("weights"))


DEFAULT_STANDARDS = StandardsRegistry.from_mapping()
