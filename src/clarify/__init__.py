"""Clarify - structured stakeholder interviews driven by spec analysis."""

__version__ = "0.1.0"
