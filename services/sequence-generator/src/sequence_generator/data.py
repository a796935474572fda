"""
Sequence generation for the service, on top of the CpG-island model.
"""

from cpg_hmm.params import ModelParameters, default_parameters


def generate_sequence(length=30, seed=42, params: ModelParameters | None = None):
    """
    Generate one (state, nucleotide) sequence.

    Parameters
    ----------
    length : int
        Number of positions.
    seed : int or None
        Random seed for reproducibility.
    params : ModelParameters or None
        Model to sample; the AT-rich/GC-rich example when omitted.

    Returns
    -------
    tuple of (state, nucleotide)
    """
    params = params or default_parameters()
    return params.generator().sample(length, random_state=seed)


def to_records(sequence, start=0):
    """Position records numbered from 1, offset by ``start``."""
    return [
        {"position": start + i, "state": state, "nucleotide": symbol}
        for i, (state, symbol) in enumerate(sequence, start=1)
    ]
