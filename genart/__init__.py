"""Generative-art algorithms: vectors, rotation, projection, curves, clipping, sampling, packing, patterns, a tic-tac-toe engine and small simulations."""

__version__ = "0.1.0"