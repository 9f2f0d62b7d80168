"""Analysis package: ranked engine variations for display."""

from pikaqi.analysis.models import AnalysisLine
from pikaqi.analysis.table import AnalysisTable

__all__ = ["AnalysisLine", "AnalysisTable"]
