# stencil/components/metadata/__init__.py
"""Summaries of objects described by generated code."""
from stencil.components.metadata.summary import ObjectSummary, SummaryRow, build_summary

__all__ = ['ObjectSummary', 'SummaryRow', 'build_summary']
