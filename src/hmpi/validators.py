from __future__ import annotations
import pandera as pa
from pandera import Column, DataFrameSchema, Check
from .classify import STATUS_LABELS
from .records import STATUSES

def _nonnegative():
    return Column(pa.Float64, Check.ge(0), nullable=False)

schema_results = DataFrameSchema(
    {
        "Sample ID": Column(str, nullable=False, coerce=True),
        "Latitude": Column(pa.Float64, Check.in_range(-90, 90), nullable=False),
        "Longitude": Column(pa.Float64, Check.in_range(-180, 180), nullable=False),
        "Lead (mg/L)": _nonnegative(),
        "Cadmium (mg/L)": _nonnegative(),
        "Arsenic (mg/L)": _nonnegative(),
        "Chromium (mg/L)": _nonnegative(),
        "HPI": _nonnegative(),
        "MI": _nonnegative(),
        "Cd": _nonnegative(),
        "Contamination Status": Column(str, Check.isin(list(STATUSES)), nullable=False, coerce=True),
        "Status Label": Column(str, Check.isin(list(STATUS_LABELS.values())), nullable=False, coerce=True),
    },
    strict=True,
    ordered=True,
)

def assert_results(df):
    """Raise pa.errors.SchemaErrors listing every violation in a results table."""
    return schema_results.validate(df, lazy=True)

schema_samples = DataFrameSchema(
    {
        "sampleId": Column(str, nullable=False, coerce=True),
        "latitude": Column(pa.Float64, Check.in_range(-90, 90), nullable=False),
        "longitude": Column(pa.Float64, Check.in_range(-180, 180), nullable=False),
        "lead": _nonnegative(),
        "cadmium": _nonnegative(),
        "arsenic": _nonnegative(),
        "chromium": _nonnegative(),
    },
    strict=True,
    ordered=True,
)

def assert_samples(df):
    """Raise pa.errors.SchemaErrors listing every violation in a validated sample table."""
    return schema_samples.validate(df, lazy=True)
