"""Graph storage primitives and helpers.

This package provides the strict multi-directed arena `StrictMultiDiGraph`
and conversion helpers to plain NetworkX graphs (`convert`).
"""
