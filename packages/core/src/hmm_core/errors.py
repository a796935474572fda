"""
Exception hierarchy for HMM sequence generation.
"""


class HMMError(Exception):
    """Base exception for HMM parameter and generation failures."""
    pass


class InvalidDistribution(HMMError, ValueError):
    """A probability vector is negative, non-finite, or does not sum to 1."""
    pass


class DimensionMismatch(HMMError, ValueError):
    """Matrix shapes do not match the state or symbol label sets."""
    pass


class InvalidLength(HMMError, ValueError):
    """Requested sequence length is not a positive integer."""
    pass


class InvalidSeed(HMMError, ValueError):
    """Integer seed outside the range numpy's RandomState accepts."""
    pass
