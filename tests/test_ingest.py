# tests/test_ingest.py
import pandas as pd
import pytest
from hmpi.errors import SampleValidationError
from hmpi.ingest import load_samples, read_samples

HEADER = "Sample ID,Latitude,Longitude,Lead,Cadmium,Arsenic,Chromium\n"

def test_read_samples_csv_keeps_text(tmp_path):
    p = tmp_path / "samples.csv"
    p.write_text(HEADER + '"W-1", 12.5,77.1,0.02,0.001,0.005,0.04\nW-2,1,2,,0,0,0\n')
    df = read_samples(p)
    assert len(df) == 2
    assert df.loc[0, "Sample ID"] == "W-1"
    assert df.loc[0, "Latitude"] == "12.5"
    assert df.loc[1, "Lead"] == ""

def test_read_samples_header_only_is_empty(tmp_path):
    p = tmp_path / "samples.csv"
    p.write_text(HEADER)
    assert read_samples(p).empty

def test_read_samples_excel(tmp_path):
    p = tmp_path / "samples.xlsx"
    pd.DataFrame({"Sample ID": ["W-1"], "Lead": [0.02]}).to_excel(p, index=False, engine="openpyxl")
    df = read_samples(p)
    assert df.loc[0, "Sample ID"] == "W-1"
    assert float(df.loc[0, "Lead"]) == 0.02

def test_read_samples_rejects_unknown_format(tmp_path):
    p = tmp_path / "samples.txt"
    p.write_text(HEADER)
    with pytest.raises(ValueError):
        read_samples(p)

def test_load_samples_returns_typed_records(tmp_path):
    p = tmp_path / "samples.csv"
    p.write_text(HEADER + "W-1,12.5,77.1,0.02,0.001,0.005,0.04\nW-2,95,2,0,0,0,0\n")
    with pytest.raises(SampleValidationError):
        load_samples(p)
    samples = load_samples(p, strict=False)
    assert [s.sample_id for s in samples] == ["W-1"]
    assert samples[0].metals.chromium == 0.04
