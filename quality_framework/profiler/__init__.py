"""
Analysis engine: type inference, column profiling, correlation,
duplicate-row detection and quality scoring.

Import concrete classes from their modules (e.g.
``quality_framework.profiler.engine.DataQualityAnalyzer``).
"""
