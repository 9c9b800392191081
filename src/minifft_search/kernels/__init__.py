"""Fourier-domain interpolation kernels, padding policy and kernel cache."""
