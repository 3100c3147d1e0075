"""Value records passed between ingestion, the index engine and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

Status = Literal["safe", "moderate", "danger"]

STATUSES: tuple[Status, ...] = ("safe", "moderate", "danger")


@dataclass(frozen=True)
class MetalConcentrations:
    """Heavy-metal concentrations of one sample (mg/L)."""

    lead: float
    cadmium: float
    arsenic: float
    chromium: float

    def as_dict(self) -> dict[str, float]:
        return {
            "lead": self.lead,
            "cadmium": self.cadmium,
            "arsenic": self.arsenic,
            "chromium": self.chromium,
        }


@dataclass(frozen=True)
class SampleRecord:
    """A validated input row: identity, location and concentrations."""

    sample_id: str
    latitude: float
    longitude: float
    metals: MetalConcentrations


@dataclass(frozen=True)
class PollutionIndices:
    """Rounded HPI / MI / Cd values and the tier they classify into."""

    hpi: float
    mi: float
    cd: float
    status: Status
    status_label: str


@dataclass(frozen=True)
class SampleResult:
    """A SampleRecord enriched with its pollution indices."""

    sample_id: str
    latitude: float
    longitude: float
    metals: MetalConcentrations
    indices: PollutionIndices

    @property
    def status(self) -> Status:
        return self.indices.status


@dataclass(frozen=True)
class CriticalMetal:
    """Metal with the highest concentration-to-standard ratio in a sample."""

    metal: str
    ratio: float
    exceeds_standard: bool

    @property
    def label(self) -> str:
        return self.metal.capitalize()


@dataclass(frozen=True)
class StatusShare:
    count: int
    percentage: float


@dataclass(frozen=True)
class IndexTriple:
    hpi: float
    mi: float
    cd: float


@dataclass(frozen=True)
class SummaryStatistics:
    """Dataset-level counts, tier distribution, averages and maxima."""

    total: int
    distribution: Mapping[Status, StatusShare] = field(hash=False)
    averages: IndexTriple
    maximums: IndexTriple

    def __post_init__(self):
        object.__setattr__(self, "distribution", MappingProxyType(dict(self.distribution)))


@dataclass(frozen=True)
class MetalDistribution:
    """Per-metal dataset view: mean concentration and exceedance count."""

    metal: str
    average: float
    exceeding: int
    standard: float
