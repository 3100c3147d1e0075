"""
Dataset-level statistics over processed samples.

Averages and maxima are taken over the already-rounded per-sample indices and
rounded again to 2 decimals; tier percentages are rounded to 1 decimal each,
so they need not add up to exactly 100.0.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Union

from .errors import EmptyInputError
from .indices import round_half_away
from .records import (
    STATUSES,
    IndexTriple,
    MetalDistribution,
    PollutionIndices,
    SampleResult,
    StatusShare,
    SummaryStatistics,
)
from .standards import DEFAULT_STANDARDS, StandardsRegistry

IndexSource = Union[PollutionIndices, SampleResult]

_INDEX_FIELDS = ("hpi", "mi", "cd")


def _as_indices(item: IndexSource) -> PollutionIndices:
    return item.indices if isinstance(item, SampleResult) else item


def summarize(results: Iterable[IndexSource]) -> SummaryStatistics:
    """Counts, tier distribution, averages and maxima of hpi / mi / cd.

    Accepts PollutionIndices or SampleResults. Raises EmptyInputError when
    there is nothing to summarise.
    """
    indices = [_as_indices(r) for r in results]
    total = len(indices)
    if total == 0:
        raise EmptyInputError("Cannot summarize an empty set of results.")

    distribution = {}
    for status in STATUSES:
        count = sum(1 for r in indices if r.status == status)
        distribution[status] = StatusShare(count=count, percentage=round_half_away(count / total * 100, 1))

    averages = {f: round_half_away(sum(getattr(r, f) for r in indices) / total) for f in _INDEX_FIELDS}
    maximums = {f: round_half_away(max(getattr(r, f) for r in indices)) for f in _INDEX_FIELDS}

    return SummaryStatistics(
        total=total,
        distribution=distribution,
        averages=IndexTriple(**averages),
        maximums=IndexTriple(**maximums),
    )


def metal_distribution(
    results: Sequence[SampleResult], standards: StandardsRegistry = DEFAULT_STANDARDS
) -> list[MetalDistribution]:
    """Per-metal mean concentration and number of samples above the standard."""
    if not results:
        raise EmptyInputError("Cannot compute metal distribution of an empty set of results.")
    rows = []
    for metal, std in standards.items():
        values = [getattr(r.metals, metal) for r in results]
        rows.append(
            MetalDistribution(
                metal=metal,
                average=sum(values) / len(values),
                exceeding=sum(1 for v in values if v > std.limit),
                standard=std.limit,
            )
        )
    return rows


def critical_samples(results: Iterable[SampleResult], limit: int = 5) -> list[SampleResult]:
    """The ``limit`` highest-HPI samples classified as danger (stable on ties)."""
    danger = [r for r in results if r.indices.status == "danger"]
    return sorted(danger, key=lambda r: r.indices.hpi, reverse=True)[:limit]
