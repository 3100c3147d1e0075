# tests/test_pipeline.py
import pandas as pd
import pytest
from hmpi.errors import SampleValidationError
from hmpi.pipeline import analyze_file, main, run_analysis
from hmpi.records import MetalConcentrations, SampleRecord

CSV = (
    "Sample ID,Latitude,Longitude,Pb (mg/L),Cd (mg/L),As (mg/L),Cr (mg/L)\n"
    "W-1,12.5,77.1,0.05,0.01,0.02,0.03\n"
    "W-2,12.6,77.2,0.001,0.001,0.001,0.001\n"
    "W-3,12.7,77.3,0.004,0.0003,0.001,0.06\n"
)

def _write(tmp_path, text=CSV):
    p = tmp_path / "samples.csv"
    p.write_text(text)
    return p

def test_run_analysis_bundles_outputs():
    run = run_analysis([SampleRecord("A", 0.0, 0.0, MetalConcentrations(0.05, 0.01, 0.02, 0.03))])
    assert run.summary.total == 1
    assert [r.sample_id for r in run.critical] == ["A"]
    assert len(run.metals) == 4

def test_analyze_file_end_to_end(tmp_path):
    run = analyze_file(_write(tmp_path))
    assert [r.sample_id for r in run.results] == ["W-1", "W-2", "W-3"]
    assert [r.status for r in run.results] == ["danger", "safe", "moderate"]
    assert run.summary.distribution["moderate"].percentage == 33.3

def test_analyze_file_strict_rejects(tmp_path):
    p = _write(tmp_path, CSV + "W-4,100,0,0,0,0,0\n")
    with pytest.raises(SampleValidationError):
        analyze_file(p)
    assert len(analyze_file(p, strict=False).results) == 3

def test_main_writes_output(tmp_path):
    out = tmp_path / "results.csv"
    assert main(["--input", str(_write(tmp_path)), "--output", str(out)]) == 0
    df = pd.read_csv(out)
    assert list(df["Sample ID"]) == ["W-1", "W-2", "W-3"]

def test_main_with_standards_file(tmp_path):
    std = tmp_path / "standards.yaml"
    std.write_text("limits:\n  chromium: 0.1\n")
    out = tmp_path / "results.csv"
    assert main(["--input", str(_write(tmp_path)), "--standards", str(std), "--output", str(out)]) == 0
    df = pd.read_csv(out)
    assert df.loc[2, "Contamination Status"] == "safe"

def test_main_reports_failure(tmp_path):
    assert main(["--input", str(_write(tmp_path, CSV + "W-4,100,0,0,0,0,0\n"))]) == 1
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1

def test_main_reports_unwritable_output(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    assert main(["--input", str(_write(tmp_path)), "--output", str(blocker / "results.csv")]) == 1
