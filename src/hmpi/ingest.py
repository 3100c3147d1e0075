from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from .cleaning import clean_samples
from .config import RAW_SAMPLES_CSV
from .data_io import samples_to_frame
from .records import SampleRecord
from .validators import assert_samples

logger = logging.getLogger(__name__)

def read_samples_csv(path: str | Path | None = None) -> pd.DataFrame:
    # keep everything as text; coercion happens during validation
    return pd.read_csv(path or RAW_SAMPLES_CSV, dtype=str, keep_default_na=False, skipinitialspace=True)

def read_samples_excel(path: str | Path) -> pd.DataFrame:
    return pd.read_excel(path, engine="openpyxl", dtype=str, keep_default_na=False)

def read_samples(path: str | Path | None = None) -> pd.DataFrame:
    """
    Read a raw sample table from CSV or Excel.

    Args:
        path: Input file (default: RAW_SAMPLES_CSV)

    Returns:
        DataFrame of raw string cells, one row per sample

    Raises:
        ValueError: If the file suffix is not .csv or .xlsx
    """
    path = Path(path or RAW_SAMPLES_CSV)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        try:
            df = read_samples_csv(path)
        except pd.errors.EmptyDataError:
            df = pd.DataFrame()
    elif suffix == ".xlsx":
        df = read_samples_excel(path)
    else:
        raise ValueError(f"Unsupported file format '{suffix}'. Please use CSV or Excel files.")
    logger.info("Read %d rows from %s", len(df), path)
    return df

def load_samples(path: str | Path | None = None, strict: bool = True) -> list[SampleRecord]:
    """
    Read, validate and type a sample table in one step.

    Args:
        path: Input file (default: RAW_SAMPLES_CSV)
        strict: Reject the whole file on any row error (default) or skip bad rows

    Returns:
        List of validated SampleRecords in file order

    Raises:
        SampleValidationError: If rows fail validation (see clean_samples)
    """
    samples = clean_samples(read_samples(path), strict=strict)
    assert_samples(samples_to_frame(samples))
    return samples
