"""Radix-2 fast Hartley transforms, half-spectrum variants and spectral convolution helpers."""

__version__ = "0.1.0"