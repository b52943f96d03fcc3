"""Report exporters."""

from quality_framework.reporters.json_reporter import JSONReporter

__all__ = ['JSONReporter']
