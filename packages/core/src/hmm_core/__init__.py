"""
HMM Core — forward sampling of discrete Hidden Markov Models.
"""

from hmm_core.errors import (
    DimensionMismatch,
    HMMError,
    InvalidDistribution,
    InvalidLength,
    InvalidSeed,
)
from hmm_core.sampling import (
    TOLERANCE,
    SequenceGenerator,
    categorical_sample,
    generate,
    validate_parameters,
)

__all__ = [
    "TOLERANCE",
    "DimensionMismatch",
    "HMMError",
    "InvalidDistribution",
    "InvalidLength",
    "InvalidSeed",
    "SequenceGenerator",
    "categorical_sample",
    "generate",
    "validate_parameters",
]
