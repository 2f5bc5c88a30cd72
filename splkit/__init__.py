"""Bit-exact fixed-point signal processing: integer arithmetic, vectors, FFT and resampling."""

__version__ = "0.1.0"