# tests/test_aggregate.py
import pytest
from hmpi.aggregate import critical_samples, metal_distribution, summarize
from hmpi.errors import EmptyInputError
from hmpi.processing import process_samples
from hmpi.records import MetalConcentrations, PollutionIndices, SampleRecord

def _idx(hpi, mi, cd, status):
    return PollutionIndices(hpi=hpi, mi=mi, cd=cd, status=status, status_label=status)

def test_summarize_counts_percentages_and_stats():
    s = summarize([
        _idx(10.0, 0.5, 2.0, "safe"),
        _idx(60.0, 1.2, 4.8, "moderate"),
        _idx(150.0, 2.0, 8.0, "danger"),
    ])
    assert s.total == 3
    assert s.distribution["safe"].count == 1
    assert s.distribution["safe"].percentage == 33.3
    assert sum(d.count for d in s.distribution.values()) == s.total
    # independent rounding: 33.3 * 3
    assert sum(d.percentage for d in s.distribution.values()) == pytest.approx(99.9)
    assert s.averages.hpi == 73.33
    assert s.averages.mi == 1.23
    assert s.averages.cd == 4.93
    assert (s.maximums.hpi, s.maximums.mi, s.maximums.cd) == (150.0, 2.0, 8.0)

def test_summarize_two_thirds_rounds_up():
    s = summarize([_idx(0, 0, 0, "safe")] * 2 + [_idx(0, 0, 0, "danger")])
    assert s.distribution["safe"].percentage == 66.7
    assert s.distribution["moderate"].count == 0
    assert s.distribution["moderate"].percentage == 0.0

def test_summarize_empty_raises():
    with pytest.raises(EmptyInputError):
        summarize([])

def _results():
    samples = [
        SampleRecord("A", 0.0, 0.0, MetalConcentrations(0.005, 0.001, 0.002, 0.01)),
        SampleRecord("B", 0.0, 0.0, MetalConcentrations(0.05, 0.01, 0.02, 0.03)),
        SampleRecord("C", 0.0, 0.0, MetalConcentrations(0.2, 0.002, 0.001, 0.01)),
    ]
    return process_samples(samples)

def test_summarize_accepts_sample_results():
    s = summarize(_results())
    assert s.total == 3
    assert s.distribution["danger"].count == 2

def test_metal_distribution():
    rows = metal_distribution(_results())
    assert [r.metal for r in rows] == ["lead", "cadmium", "arsenic", "chromium"]
    lead = rows[0]
    assert lead.average == pytest.approx((0.005 + 0.05 + 0.2) / 3)
    assert lead.exceeding == 2
    assert lead.standard == 0.01
    assert rows[3].exceeding == 0

def test_metal_distribution_empty_raises():
    with pytest.raises(EmptyInputError):
        metal_distribution([])

def test_critical_samples_sorted_by_hpi():
    crit = critical_samples(_results())
    assert [r.sample_id for r in crit] == ["C", "B"]
    assert critical_samples(_results(), limit=1)[0].sample_id == "C"

def test_summary_is_read_only_and_hashable():
    s = summarize([_idx(10.0, 0.5, 2.0, "safe")])
    with pytest.raises(TypeError):
        s.distribution["safe"] = None
    assert hash(s) == hash(summarize([_idx(10.0, 0.5, 2.0, "safe")]))
    assert s == summarize([_idx(10.0, 0.5, 2.0, "safe")])
