"""
Two-state CpG-island model: AT-rich and GC-rich regions of DNA.

Hidden states:
    AT-rich: favours A and T
    GC-rich: favours C and G (sticky, mean run ~10 bases)

Also loads parameters from a JSON keyed table and summarises generated
sequences.
"""

import json
from dataclasses import dataclass
from itertools import groupby

from hmm_core import DimensionMismatch, HMMError, SequenceGenerator

STATES = ("AT-rich", "GC-rich")
NUCLEOTIDES = ("A", "C", "G", "T")

INITIAL = [0.5, 0.5]

TRANSITION = [
    [0.7, 0.3],  # AT-rich -> AT-rich
    [0.1, 0.9],  # GC-rich -> GC-rich (sticky)
]

#            A     C     G     T
EMISSION = [
    [0.39, 0.10, 0.10, 0.41],  # AT-rich
    [0.10, 0.41, 0.39, 0.10],  # GC-rich
]

DEFAULT_LENGTH = 30


class ParameterFileError(HMMError):
    """Parameter file is unreadable or missing a required key."""
    pass


@dataclass(frozen=True)
class ModelParameters:
    """Labels and probabilities of a discrete HMM."""

    states: tuple
    symbols: tuple
    initial: list
    transition: list
    emission: list

    def generator(self) -> SequenceGenerator:
        """Validated sampler for these parameters."""
        return SequenceGenerator(
            self.transition, self.emission, self.initial, self.states, self.symbols
        )


def default_parameters() -> ModelParameters:
    return ModelParameters(
        states=STATES,
        symbols=NUCLEOTIDES,
        initial=list(INITIAL),
        transition=[list(row) for row in TRANSITION],
        emission=[list(row) for row in EMISSION],
    )


def _rows(table, states, name):
    if not isinstance(table, dict):
        raise ParameterFileError(f"'{name}' must map state labels to values")
    missing = [s for s in states if s not in table]
    extra = [s for s in table if s not in states]
    if missing or extra:
        raise DimensionMismatch(
            f"'{name}' rows {sorted(table)} do not match states {list(states)}"
        )
    return [table[s] for s in states]


def load_parameters(path) -> ModelParameters:
    """
    Read model parameters from a JSON keyed table.

    Expected layout (rows keyed by state label, columns in label order)::

        {
          "states": ["AT-rich", "GC-rich"],
          "symbols": ["A", "C", "G", "T"],
          "initial": {"AT-rich": 0.5, "GC-rich": 0.5},
          "transition": {"AT-rich": [0.7, 0.3], "GC-rich": [0.1, 0.9]},
          "emission": {"AT-rich": [...], "GC-rich": [...]}
        }

    Only structure is checked here; probabilities are validated when a
    generator is built.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise ParameterFileError(f"Failed to load parameters from {path}: {e}")

    try:
        states = tuple(raw["states"])
        symbols = tuple(raw["symbols"])
        initial, transition, emission = (
            raw["initial"], raw["transition"], raw["emission"]
        )
    except (KeyError, TypeError) as e:
        raise ParameterFileError(f"Parameter file {path} is missing {e}")

    return ModelParameters(
        states=states,
        symbols=symbols,
        initial=_rows(initial, states, "initial"),
        transition=_rows(transition, states, "transition"),
        emission=_rows(emission, states, "emission"),
    )


def nucleotide_string(sequence) -> str:
    """Observed symbols joined into one string, e.g. 'ATGC...'."""
    return "".join(symbol for _, symbol in sequence)


def gc_content(sequence) -> float:
    """Fraction of positions emitting G or C."""
    if not sequence:
        return 0.0
    gc = sum(1 for _, symbol in sequence if symbol in ("G", "C"))
    return gc / len(sequence)


def state_runs(sequence) -> list:
    """Run-length encoding of the hidden path: [(state, run_length), ...]."""
    return [
        (state, sum(1 for _ in group))
        for state, group in groupby(state for state, _ in sequence)
    ]
