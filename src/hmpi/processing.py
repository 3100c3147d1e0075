from __future__ import annotations

from typing import Iterable

from .indices import calculate_pollution_indices, exceedance_ratios, round_half_away
from .records import CriticalMetal, MetalConcentrations, SampleRecord, SampleResult
from .standards import DEFAULT_STANDARDS, StandardsRegistry


def process_sample(sample: SampleRecord, standards: StandardsRegistry = DEFAULT_STANDARDS) -> SampleResult:
    """Attach pollution indices to one sample; identity and coordinates pass through unchanged."""
    return SampleResult(
        sample_id=sample.sample_id,
        latitude=sample.latitude,
        longitude=sample.longitude,
        metals=sample.metals,
        indices=calculate_pollution_indices(sample.metals, standards),
    )


def process_samples(
    samples: Iterable[SampleRecord], standards: StandardsRegistry = DEFAULT_STANDARDS
) -> list[SampleResult]:
    """Process every sample, results in input order."""
    return [process_sample(s, standards) for s in samples]


def most_critical_metal(
    metals: MetalConcentrations, standards: StandardsRegistry = DEFAULT_STANDARDS
) -> CriticalMetal:
    """Metal with the strictly largest Ci / Si ratio.

    Ties keep the earlier metal in canonical order (lead, cadmium, arsenic,
    chromium). A sample with no positive ratio reports lead at 0.0.
    """
    critical, max_ratio = "lead", 0.0
    for metal, ratio in exceedance_ratios(metals, standards).items():
        if ratio > max_ratio:
            critical, max_ratio = metal, ratio
    return CriticalMetal(
        metal=critical,
        ratio=round_half_away(max_ratio),
        exceeds_standard=max_ratio > 1,
    )
