"""
Command-line interface for the data quality analyzer.

Provides commands for:
- Analysing one or more CSV/Excel files
- Printing the version
"""

import click
import sys

from quality_framework import __version__
from quality_framework.core.config import AnalysisConfig
from quality_framework.core.exceptions import ConfigError, ReporterError
from quality_framework.core.logging_config import setup_logging, get_logger
from quality_framework.core.pretty_output import PrettyOutput as po
from quality_framework.profiler.engine import DataQualityAnalyzer
from quality_framework.reporters.json_reporter import JSONReporter

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    Data Quality Analyzer - profile tabular files and score their quality.

    Reports per-column statistics, inferred types, outliers, duplicate rows,
    correlations between numeric columns and a 0-100 quality score.
    """
    pass


@cli.command()
@click.argument('files', nargs=-1, type=click.Path())
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration listing files and processing options')
@click.option('--format', '-f', 'file_format', type=click.Choice(['csv', 'excel'], case_sensitive=False),
              default=None, help='File format (default: inferred from extension)')
@click.option('--delimiter', '-d', default=None, help='Column delimiter for CSV files. Use "\\t" for tab.')
@click.option('--encoding', '-e', default=None, help='Text encoding for CSV files (default: auto-detect)')
@click.option('--sheet', default=None, help='Excel sheet name or index (default: first sheet)')
@click.option('--json-output', '-j', type=click.Path(), help='Path for JSON report output')
@click.option('--max-file-size-mb', type=float, default=None, help='Reject files larger than this (default: 100)')
@click.option('--sequential', is_flag=True, help='Analyse files one at a time instead of in parallel')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default='WARNING', help='Logging level')
@click.option('--log-file', type=click.Path(), help='Optional log file path')
def analyze(files, config_file, file_format, delimiter, encoding, sheet, json_output,
            max_file_size_mb, sequential, log_level, log_file):
    """
    Analyse data quality of CSV/Excel files.

    FILES: One or more data files (optional when --config lists files)

    Examples:

    \b
    # Single file
    dq-analyze analyze customers.csv

    \b
    # Several files with a JSON report
    dq-analyze analyze customers.csv orders.xlsx -j quality.json

    \b
    # Files and options from a configuration file
    dq-analyze analyze --config analysis.yaml
    """
    setup_logging(level=log_level, log_file=log_file)

    try:
        config = AnalysisConfig.from_yaml(config_file) if config_file else AnalysisConfig()
    except ConfigError as e:
        po.error(f"Configuration error: {e.message}")
        sys.exit(2)

    if max_file_size_mb is not None:
        config.max_file_size_mb = max_file_size_mb

    if delimiter:
        delimiter = delimiter.encode().decode('unicode_escape')
    if sheet is not None and sheet.isdigit():
        sheet = int(sheet)

    entries = [
        {
            "path": path,
            "format": file_format.lower() if file_format else None,
            "delimiter": delimiter,
            "encoding": encoding,
            "sheet": sheet,
        }
        for path in files
    ] or config.files

    if not entries:
        po.error("No files to analyse. Pass FILES or --config with an 'analysis.files' list.")
        sys.exit(2)

    analyzer = DataQualityAnalyzer(config=config)
    results = analyzer.analyze_files(entries, parallel=False if sequential else None)

    for result in results:
        _print_result(result)

    json_output = json_output or config.json_report_path
    if json_output:
        reporter = JSONReporter()
        try:
            if len(results) == 1 and results[0].succeeded:
                reporter.generate(results[0].report, json_output)
            else:
                reporter.generate(results, json_output)
        except ReporterError as e:
            po.error(e.message)
            sys.exit(1)
        print()
        po.output_file("JSON", json_output)

    failed = [result for result in results if not result.succeeded]
    if failed:
        po.error(f"{len(failed)} of {len(results)} file(s) could not be analysed")
        sys.exit(1)


def _print_result(result):
    """Print the terminal summary for one file."""
    po.header(result.file_path)

    if not result.succeeded:
        po.error(f"Analysis failed for file {result.file_path}: {result.error['message']}")
        return

    report = result.report
    po.analysis_summary(
        rows=report.total_rows,
        cols=report.total_columns,
        quality=report.quality_score,
        duplicate_rows=report.duplicate_rows,
        duration=result.processing_time_seconds,
    )

    po.section("Columns")
    rows = []
    for column in report.columns:
        top = ", ".join(f"{top.value}: {top.count}" for top in column.top_values)
        rows.append((
            column.name,
            column.inferred_type,
            f"{column.missing_count} ({column.missing_percentage:.1f}%)",
            column.unique_count,
            column.outlier_count,
            top,
        ))
    po.compact_table(["Column", "Type", "Missing", "Unique", "Outliers", "Top Values"], rows)

    pairs = [pair for pair in report.correlation_matrix.pairs() if pair[2] is not None]
    if pairs:
        po.section("Correlations")
        for column1, column2, coefficient in sorted(pairs, key=lambda p: abs(p[2]), reverse=True)[:10]:
            po.metric(f"{column1} ~ {column2}", f"{coefficient:+.3f}")

    po.section(f"Preview (first {len(report.preview) - 1} rows)")
    po.compact_table(list(report.preview[0]), [tuple(row) for row in report.preview[1:]])


@cli.command()
def version():
    """Print the version."""
    click.echo(f"quality-framework {__version__}")


def main():
    cli()


if __name__ == '__main__':
    main()
