from __future__ import annotations
import logging
import re
import numpy as np
import pandas as pd
from .config import FIELD_ALIASES, METALS, SAMPLE_FIELDS
from .errors import SampleValidationError
from .records import MetalConcentrations, SampleRecord

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = [f for f in SAMPLE_FIELDS if f != "sampleId"]


def _field_key(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", str(name).lower())


def _alias_matches(alias: str, column: str) -> bool:
    # two-letter element symbols must be a whole token ("As (mg/L)", not "Basin")
    if len(alias) <= 2:
        return alias in re.split(r"[^a-z0-9]+", column.lower())
    return alias in column.lower()


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize column names by stripping whitespace and quote characters.

    Args:
        df: Input DataFrame

    Returns:
        DataFrame with cleaned column names
    """
    df = df.copy()
    df.columns = (
        df.columns
        .astype(str)
        .str.replace('"', "", regex=False)
        .str.strip()
    )
    return df


def resolve_columns(columns) -> dict[str, str]:
    """
    Map canonical sample fields to the raw column that holds them.

    A column whose lowercase alphanumeric form equals the field name wins
    ("Sample ID" -> sampleId). Remaining fields take the first unclaimed
    column containing one of their aliases ("Pb (mg/L)" -> lead).

    Args:
        columns: Raw column names

    Returns:
        Dictionary mapping field name to raw column name; unresolved fields are absent
    """
    columns = [str(c) for c in columns]
    resolved: dict[str, str] = {}
    for field in SAMPLE_FIELDS:
        for col in columns:
            if _field_key(col) == field.lower() and col not in resolved.values():
                resolved[field] = col
                break
    for field in SAMPLE_FIELDS:
        if field in resolved:
            continue
        for col in columns:
            if col in resolved.values():
                continue
            if any(_alias_matches(alias, col) for alias in FIELD_ALIASES[field]):
                resolved[field] = col
                break
    return resolved


def canonicalize(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename resolvable columns to canonical field names and drop the rest.

    Args:
        df: Raw sample DataFrame

    Returns:
        DataFrame with only canonical columns, missing fields filled with ""
    """
    df = normalize_columns(df)
    mapping = resolve_columns(df.columns)
    out = pd.DataFrame(index=df.index)
    for field in SAMPLE_FIELDS:
        out[field] = df[mapping[field]] if field in mapping else ""
    out = out.fillna("")
    for field in SAMPLE_FIELDS:
        out[field] = out[field].astype(str).str.strip()
    return out


def validate_samples(df: pd.DataFrame) -> tuple[list[SampleRecord], list[str]]:
    """
    Validate raw rows and convert the valid ones to SampleRecords.

    Row checks, in order: missing required fields, non-numeric values,
    latitude outside [-90, 90], longitude outside [-180, 180], negative
    concentrations. Rows are numbered from 1.

    Args:
        df: Raw sample DataFrame (any column naming accepted by resolve_columns)

    Returns:
        (valid samples in input order, one error message per rejected row)
    """
    if df is None or df.empty:
        return [], ["File is empty or invalid"]

    canon = canonicalize(df).reset_index(drop=True)
    numeric = canon[NUMERIC_FIELDS].apply(pd.to_numeric, errors="coerce")

    samples: list[SampleRecord] = []
    errors: list[str] = []
    for i in range(len(canon)):
        row = canon.iloc[i]
        row_errors = [f"Missing {f}" for f in SAMPLE_FIELDS if row[f] == ""]
        if not row_errors:
            values = numeric.iloc[i]
            row_errors = [f"Non-numeric {f}" for f in NUMERIC_FIELDS if not np.isfinite(values[f])]
        if not row_errors:
            if abs(values["latitude"]) > 90:
                row_errors.append("Invalid latitude")
            if abs(values["longitude"]) > 180:
                row_errors.append("Invalid longitude")
            if (values[list(METALS)] < 0).any():
                row_errors.append("Heavy metal concentrations cannot be negative")
        if row_errors:
            errors.append(f"Row {i + 1}: {', '.join(row_errors)}")
            continue
        samples.append(
            SampleRecord(
                sample_id=row["sampleId"],
                latitude=float(values["latitude"]),
                longitude=float(values["longitude"]),
                metals=MetalConcentrations(**{m: float(values[m]) for m in METALS}),
            )
        )
    return samples, errors


def clean_samples(df: pd.DataFrame, strict: bool = True) -> list[SampleRecord]:
    """
    Validate a raw sample table, rejecting it or skipping bad rows.

    Args:
        df: Raw sample DataFrame
        strict: Reject the whole table on any row error (default) or skip bad rows

    Returns:
        List of valid SampleRecords

    Raises:
        SampleValidationError: In strict mode when any row fails, or when no row is valid
    """
    samples, errors = validate_samples(df)
    if errors and (strict or not samples):
        raise SampleValidationError(errors)
    for msg in errors:
        logger.warning("Skipping invalid row (%s)", msg)
    logger.info("Validated %d samples (%d rejected)", len(samples), len(errors))
    return samples
