"""
Discrete Hidden Markov Model — forward sequence generation.

Generates one sample path from lambda = (A, B, pi) where:
    A  = transition matrix (n_states x n_states)
    B  = emission matrix (n_states x n_symbols)
    pi = initial state distribution

Sampling order, one shared random stream:
    q_1 ~ pi,          o_1 ~ B[q_1]
    q_t ~ A[q_{t-1}],  o_t ~ B[q_t]      for t = 2..T

The hidden chain has no absorbing state; generation stops at T.
"""

import logging
import numbers

import numpy as np

from hmm_core.errors import (
    DimensionMismatch,
    InvalidDistribution,
    InvalidLength,
    InvalidSeed,
)

logger = logging.getLogger(__name__)

# Allowed deviation of a probability vector's sum from 1
TOLERANCE = 1e-6


def _as_random_state(random_state):
    """
    Turn None, an int seed, or an object with ``random()`` into a
    random source.
    """
    if random_state is None:
        return np.random.RandomState()
    if isinstance(random_state, numbers.Integral) and not isinstance(
        random_state, bool
    ):
        try:
            return np.random.RandomState(random_state)
        except ValueError as e:
            raise InvalidSeed(f"Invalid seed {random_state}: {e}") from e
    if hasattr(random_state, "random"):
        return random_state
    raise TypeError(f"Cannot use {random_state!r} as a random source")


def categorical_sample(labels, probabilities, rng):
    """
    Draw one label from a discrete distribution.

    Draws u ~ U[0, 1) and returns the first label whose cumulative
    probability (summed in label order) exceeds u. Consumes exactly one
    draw from ``rng``.

    Parameters
    ----------
    labels : sequence
        Ordered labels.
    probabilities : array-like
        Probabilities parallel to ``labels``, summing to 1.
    rng : object
        Random source exposing ``random()`` -> float in [0, 1).

    Returns
    -------
    label
        The selected element of ``labels``.
    """
    probabilities = np.asarray(probabilities, dtype=np.float64)
    u = rng.random()
    cumulative = np.cumsum(probabilities)
    index = int(np.searchsorted(cumulative, u, side="right"))
    if index >= len(labels):
        # u landed above a total mass rounded slightly below 1
        index = int(np.flatnonzero(probabilities > 0)[-1])
    return labels[index]


def _check_labels(kind, labels):
    labels = tuple(labels)
    if not labels:
        raise DimensionMismatch(f"{kind} must contain at least one label")
    if len(set(labels)) != len(labels):
        raise DimensionMismatch(f"{kind} contains duplicate labels: {labels}")
    return labels


def _as_matrix(name, values, shape):
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise DimensionMismatch(
            f"{name} cannot be read as a numeric array: {e}"
        ) from e
    if array.shape != shape:
        raise DimensionMismatch(
            f"{name} has shape {array.shape}, expected {shape}"
        )
    return array


def _check_distribution(name, row):
    if not np.all(np.isfinite(row)):
        raise InvalidDistribution(f"{name} has non-finite values: {row.tolist()}")
    if np.any(row < 0):
        raise InvalidDistribution(f"{name} has negative values: {row.tolist()}")
    total = float(row.sum())
    if abs(total - 1.0) > TOLERANCE:
        raise InvalidDistribution(f"{name} sums to {total:.6g}, expected 1")


def _check_length(length):
    if isinstance(length, bool) or not isinstance(length, numbers.Integral):
        raise InvalidLength(f"length must be an integer, got {length!r}")
    if length < 1:
        raise InvalidLength(f"length must be >= 1, got {length}")
    return int(length)


def validate_parameters(transition, emission, initial, states, symbols):
    """
    Check HMM parameters against their label sets.

    Shapes are checked before probabilities.

    Returns
    -------
    transition, emission, initial : ndarray
        Parameters as float64 arrays.
    states, symbols : tuple
        Label sets as tuples.

    Raises
    ------
    DimensionMismatch
        Empty or duplicated labels, or a matrix shape that does not match
        ``len(states)`` / ``len(symbols)``.
    InvalidDistribution
        A row of ``transition`` or ``emission``, or ``initial`` itself, is
        not a probability distribution.
    """
    states = _check_labels("states", states)
    symbols = _check_labels("symbols", symbols)
    N, M = len(states), len(symbols)

    transition = _as_matrix("transition", transition, (N, N))
    emission = _as_matrix("emission", emission, (N, M))
    initial = _as_matrix("initial", initial, (N,))

    _check_distribution("initial", initial)
    for i, state in enumerate(states):
        _check_distribution(f"transition row {state!r}", transition[i])
    for i, state in enumerate(states):
        _check_distribution(f"emission row {state!r}", emission[i])

    return transition, emission, initial, states, symbols


class SequenceGenerator:
    """
    Forward sampler for a discrete HMM with labelled states and symbols.

    Parameters
    ----------
    transition : array-like (n_states, n_states)
        A[i, j] = P(q_t = states[j] | q_{t-1} = states[i]).
    emission : array-like (n_states, n_symbols)
        B[i, k] = P(o_t = symbols[k] | q_t = states[i]).
    initial : array-like (n_states,)
        pi[i] = P(q_1 = states[i]).
    states, symbols : sequence of str
        Ordered label sets indexing the matrices.
    """

    def __init__(self, transition, emission, initial, states, symbols):
        (
            self.transition,
            self.emission,
            self.initial,
            self.states,
            self.symbols,
        ) = validate_parameters(transition, emission, initial, states, symbols)
        self._state_index = {s: i for i, s in enumerate(self.states)}

    @property
    def n_states(self) -> int:
        return len(self.states)

    @property
    def n_symbols(self) -> int:
        return len(self.symbols)

    def sample(self, length, random_state=None):
        """
        Generate one sample path.

        Parameters
        ----------
        length : int
            Number of positions, >= 1.
        random_state : None, int or object with ``random()``
            Random source; an int seeds a fresh ``RandomState``.

        Returns
        -------
        tuple of (state, symbol)
            The generated sequence, in position order.
        """
        length = _check_length(length)
        rng = _as_random_state(random_state)
        logger.debug(
            f"Generating {length} positions over {self.n_states} states "
            f"and {self.n_symbols} symbols"
        )

        path = []
        row = self.initial
        for _ in range(length):
            state = categorical_sample(self.states, row, rng)
            i = self._state_index[state]
            symbol = categorical_sample(self.symbols, self.emission[i], rng)
            path.append((state, symbol))
            row = self.transition[i]
        return tuple(path)


def generate(
    transition, emission, initial, length, states, symbols, random_state=None
):
    """
    Generate a (state, symbol) sequence of ``length`` positions.

    The length is checked first, then the parameters; no random draw
    happens unless every check passes.

    Raises
    ------
    InvalidLength, DimensionMismatch, InvalidDistribution
    """
    _check_length(length)
    generator = SequenceGenerator(transition, emission, initial, states, symbols)
    return generator.sample(length, random_state=random_state)
