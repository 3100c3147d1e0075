from .aggregate import critical_samples, metal_distribution, summarize
from .classify import classify
from .errors import EmptyInputError, HMPIError, InvalidConfigurationError, SampleValidationError
from .indices import (
    calculate_cd,
    calculate_hpi,
    calculate_mi,
    calculate_pollution_indices,
    round_half_away,
)
from .processing import most_critical_metal, process_sample, process_samples
from .records import (
    CriticalMetal,
    MetalConcentrations,
    PollutionIndices,
    SampleRecord,
    SampleResult,
    SummaryStatistics,
)
from .standards import DEFAULT_STANDARDS, StandardsRegistry, load_standards

__all__ = [
    "calculate_hpi",
    "calculate_mi",
    "calculate_cd",
    "calculate_pollution_indices",
    "round_half_away",
    "classify",
    "process_sample",
    "process_samples",
    "most_critical_metal",
    "summarize",
    "metal_distribution",
    "critical_samples",
    "MetalConcentrations",
    "SampleRecord",
    "PollutionIndices",
    "SampleResult",
    "CriticalMetal",
    "SummaryStatistics",
    "StandardsRegistry",
    "DEFAULT_STANDARDS",
    "load_standards",
    "HMPIError",
    "EmptyInputError",
    "InvalidConfigurationError",
    "SampleValidationError",
]

__version__ = "0.1.0"
