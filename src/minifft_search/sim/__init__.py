"""Synthetic mini-FFT generators."""
