"""Interbinning, harmonic summing and candidate selection for mini-FFTs."""
