"""
Example: computing pollution indices for a handful of groundwater samples.

Run from the project root after `pip install -e .`:
    python examples/basic_usage.py
"""
from hmpi import (
    MetalConcentrations,
    SampleRecord,
    StandardsRegistry,
    most_critical_metal,
    process_samples,
    summarize,
)

samples = [
    SampleRecord("BW-01", 28.61, 77.21, MetalConcentrations(lead=0.05, cadmium=0.01, arsenic=0.02, chromium=0.03)),
    SampleRecord("BW-02", 28.63, 77.19, MetalConcentrations(lead=0.004, cadmium=0.001, arsenic=0.003, chromium=0.02)),
    SampleRecord("BW-03", 28.58, 77.25, MetalConcentrations(lead=0.012, cadmium=0.002, arsenic=0.008, chromium=0.06)),
]

results = process_samples(samples)
for r in results:
    crit = most_critical_metal(r.metals)
    print(f"{r.sample_id}: HPI={r.indices.hpi} MI={r.indices.mi} Cd={r.indices.cd} "
          f"-> {r.indices.status_label} (worst: {crit.label} x{crit.ratio})")

summary = summarize(results)
print(f"\n{summary.total} samples, danger share {summary.distribution['danger'].percentage}%")
print(f"average HPI {summary.averages.hpi}, max HPI {summary.maximums.hpi}")

# Same samples under a stricter lead standard
strict = StandardsRegistry.from_mapping(limits={"lead": 0.005})
print("\nwith lead limit 0.005:", [r.indices.status for r in process_samples(samples, strict)])
