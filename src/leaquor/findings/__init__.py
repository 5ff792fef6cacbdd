"""Finding models and result aggregation."""

from leaquor.findings.aggregator import ResultAggregator
from leaquor.findings.models import Finding, ScanResult

__all__ = ["Finding", "ResultAggregator", "ScanResult"]
