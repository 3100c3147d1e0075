# tests/test_classify.py
import pytest
from hmpi.classify import STATUS_LABELS, classify

@pytest.mark.parametrize(
    "hpi, mi, cd, expected",
    [
        (100.0, 0.0, 0.0, "moderate"),
        (100.01, 0.0, 0.0, "danger"),
        (0.0, 1.5, 0.0, "moderate"),
        (0.0, 1.51, 0.0, "danger"),
        (0.0, 0.0, 3.0, "moderate"),
        (0.0, 0.0, 3.01, "danger"),
        (50.0, 1.0, 1.5, "safe"),
        (50.01, 0.0, 0.0, "moderate"),
        (0.0, 1.01, 0.0, "moderate"),
        (0.0, 0.0, 1.51, "moderate"),
        (0.0, 0.0, 0.0, "safe"),
    ],
)
def test_thresholds_are_strict(hpi, mi, cd, expected):
    status, label = classify(hpi, mi, cd)
    assert status == expected
    assert label == STATUS_LABELS[expected]

def test_single_index_is_enough_for_danger():
    assert classify(0.0, 0.0, 10.0) == ("danger", "High Contamination")

def test_labels():
    assert classify(0, 0, 0) == ("safe", "Safe Level")
    assert classify(60, 0, 0) == ("moderate", "Moderate Contamination")
