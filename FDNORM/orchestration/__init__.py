"""Orchestration of the analysis phases."""

from .pipeline import run_analysis
from .report import render_report

__all__ = ["run_analysis", "render_report"]
