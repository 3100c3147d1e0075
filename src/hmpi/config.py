from __future__ import annotations
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
DATA = ROOT / "data"
RAW = DATA / "raw"

# default input file (adjust to yours)
RAW_SAMPLES_CSV = RAW / "samples.csv"

# canonical metal order; also the tie-break order for the critical metal
METALS = ("lead", "cadmium", "arsenic", "chromium")

# required fields of an uploaded sample table
SAMPLE_FIELDS = ["sampleId", "latitude", "longitude", *METALS]

# substring aliases used when a header is not an exact match
FIELD_ALIASES = {
    "sampleId": ("sample",),
    "latitude": ("lat",),
    "longitude": ("lon",),
    "lead": ("lead", "pb"),
    "cadmium": ("cadmium", "cd"),
    "arsenic": ("arsenic", "as"),
    "chromium": ("chromium", "cr"),
}

EXPORT_COLUMNS = [
    "Sample ID",
    "Latitude",
    "Longitude",
    "Lead (mg/L)",
    "Cadmium (mg/L)",
    "Arsenic (mg/L)",
    "Chromium (mg/L)",
    "HPI",
    "MI",
    "Cd",
    "Contamination Status",
    "Status Label",
]
