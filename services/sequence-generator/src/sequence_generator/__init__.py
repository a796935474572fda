"""
HTTP service wrapping HMM sequence generation.
"""
