from __future__ import annotations
import csv
import logging
from pathlib import Path
from typing import Sequence
import pandas as pd
from .config import EXPORT_COLUMNS, METALS
from .errors import EmptyInputError
from .records import SampleRecord, SampleResult, SummaryStatistics

logger = logging.getLogger(__name__)

def samples_to_frame(samples: Sequence[SampleRecord]) -> pd.DataFrame:
    """
    Validated samples as a table with canonical column names, in input order.

    Args:
        samples: Validated samples

    Returns:
        pd.DataFrame: Columns sampleId, latitude, longitude and one per metal
    """
    rows = [
        [s.sample_id, float(s.latitude), float(s.longitude), *(float(getattr(s.metals, m)) for m in METALS)]
        for s in samples
    ]
    return pd.DataFrame(rows, columns=["sampleId", "latitude", "longitude", *METALS])

def results_to_frame(results: Sequence[SampleResult]) -> pd.DataFrame:
    """
    Flatten processed samples into the export table, one row per sample in input order.

    Args:
        results: Processed samples

    Returns:
        pd.DataFrame: Columns as listed in EXPORT_COLUMNS
    """
    rows = [
        [
            r.sample_id,
            r.latitude,
            r.longitude,
            *(getattr(r.metals, m) for m in METALS),
            r.indices.hpi,
            r.indices.mi,
            r.indices.cd,
            r.indices.status,
            r.indices.status_label,
        ]
        for r in results
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)

def summary_to_frame(summary: SummaryStatistics) -> pd.DataFrame:
    """
    Tidy (section, key, value) table of a SummaryStatistics.

    Args:
        summary: Dataset summary

    Returns:
        pd.DataFrame: Columns "section", "key", "value"
    """
    rows = [("total", "samples", summary.total)]
    for status, share in summary.distribution.items():
        rows.append(("count", status, share.count))
        rows.append(("percentage", status, share.percentage))
    for section, triple in (("average", summary.averages), ("maximum", summary.maximums)):
        rows.extend((section, f, getattr(triple, f)) for f in ("hpi", "mi", "cd"))
    return pd.DataFrame(rows, columns=["section", "key", "value"])

def format_index(value: float) -> str:
    """Shortest text for an index value; whole numbers drop their ".0" (10.0 -> "10")."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text

def export_csv(results: Sequence[SampleResult], path: str | Path) -> Path:
    """
    Write processed samples to CSV with every field quoted.

    Coordinates and concentrations are written with 6 decimals; indices in
    shortest form without a trailing ".0" (0.0 -> "0", 187.39 -> "187.39").

    Args:
        results: Processed samples
        path: Destination file

    Returns:
        Path: The written file

    Raises:
        EmptyInputError: If there is nothing to export
    """
    if not results:
        raise EmptyInputError("No data to export")
    df = results_to_frame(results)
    fixed6 = EXPORT_COLUMNS[1:7]
    df[fixed6] = df[fixed6].apply(lambda s: s.map(lambda v: f"{v:.6f}"))
    for col in ("HPI", "MI", "Cd"):
        df[col] = df[col].map(format_index)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, quoting=csv.QUOTE_ALL)
    logger.info("Exported %d results to %s", len(df), path)
    return path
