"""
CpG-island HMM
==============

Synthetic DNA from a two-state Hidden Markov Model: AT-rich and GC-rich
regions emitting nucleotides A, C, G, T.
"""

from cpg_hmm.params import ModelParameters, default_parameters, load_parameters

__all__ = ["ModelParameters", "default_parameters", "load_parameters"]
