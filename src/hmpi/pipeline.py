from __future__ import annotations
import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence
from pandera.errors import SchemaErrors
from .aggregate import critical_samples, metal_distribution, summarize
from .data_io import export_csv, results_to_frame
from .errors import HMPIError
from .ingest import load_samples
from .processing import most_critical_metal, process_samples
from .records import MetalDistribution, SampleRecord, SampleResult, SummaryStatistics
from .standards import DEFAULT_STANDARDS, StandardsRegistry, load_standards
from .validators import assert_results

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisRun:
    """Everything one analysis produces; replaced wholesale on re-analysis."""

    results: list[SampleResult]
    summary: SummaryStatistics
    metals: list[MetalDistribution]
    critical: list[SampleResult]


def run_analysis(
    samples: Iterable[SampleRecord], standards: StandardsRegistry = DEFAULT_STANDARDS
) -> AnalysisRun:
    results = process_samples(samples, standards)
    summary = summarize(results)
    logger.info(
        "Processed %d samples: %d safe, %d moderate, %d danger",
        summary.total,
        summary.distribution["safe"].count,
        summary.distribution["moderate"].count,
        summary.distribution["danger"].count,
    )
    return AnalysisRun(
        results=results,
        summary=summary,
        metals=metal_distribution(results, standards),
        critical=critical_samples(results),
    )


def analyze_file(
    path: str | Path,
    standards: StandardsRegistry = DEFAULT_STANDARDS,
    strict: bool = True,
) -> AnalysisRun:
    # ---- Read -> validate -> process ----
    samples = load_samples(path, strict=strict)
    return run_analysis(samples, standards)


def _log_run(run: AnalysisRun, standards: StandardsRegistry) -> None:
    s = run.summary
    for status, share in s.distribution.items():
        logger.info("  %-8s %4d (%.1f%%)", status, share.count, share.percentage)
    logger.info("  average HPI=%.2f MI=%.2f Cd=%.2f", s.averages.hpi, s.averages.mi, s.averages.cd)
    logger.info("  maximum HPI=%.2f MI=%.2f Cd=%.2f", s.maximums.hpi, s.maximums.mi, s.maximums.cd)
    for m in run.metals:
        logger.info("  %-8s mean=%.4f mg/L, %d above %.3f", m.metal, m.average, m.exceeding, m.standard)
    for r in run.critical:
        crit = most_critical_metal(r.metals, standards)
        logger.info(
            "  critical site %s (%.4f, %.4f): HPI=%.2f, worst metal %s at %.2fx standard",
            r.sample_id, r.latitude, r.longitude, r.indices.hpi, crit.label, crit.ratio,
        )


def main(argv: Sequence[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compute heavy-metal pollution indices for a sample table.")
    p.add_argument("--input", required=True, help="Sample table (.csv or .xlsx).")
    p.add_argument("--standards", default=None, help="Optional YAML file overriding limits/weights.")
    p.add_argument("--output", default=None, help="Optional CSV path for the per-sample results.")
    p.add_argument("--lenient", action="store_true", help="Skip invalid rows instead of rejecting the file.")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        standards = load_standards(args.standards) if args.standards else DEFAULT_STANDARDS
        run = analyze_file(args.input, standards, strict=not args.lenient)
        _log_run(run, standards)
        if args.output:
            assert_results(results_to_frame(run.results))
            export_csv(run.results, args.output)
    except (HMPIError, SchemaErrors, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
