"""Screens, sprite drawing, input and sound for a Frogger-style arcade game on pygame, plus dot-matrix glyphs."""

__version__ = "0.1.0"