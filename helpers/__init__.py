"""Shared pure helpers - formulas and field parsing."""
