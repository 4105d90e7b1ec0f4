"""Trajclass core: trajectory models, retention arrays and the pairwise engine.

This package holds the sample and trajectory models, scalar derivation,
the fixed-capacity neighbor retention structure, the all-pairs
classification pass and the query surface over its results.  It has **no**
dependency on typer or any CLI framework.
"""
from __future__ import annotations
