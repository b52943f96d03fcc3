"""Configuration parsing and validation for analysis sessions."""

import yaml
import os
from typing import Dict, Any, List, Optional
from pathlib import Path
from quality_framework.core.exceptions import (
    ConfigError,
    YAMLSizeError,
    ConfigValidationError
)
from quality_framework.core.constants import (
    MAX_YAML_FILE_SIZE,
    MAX_YAML_NESTING_DEPTH,
    MAX_YAML_KEY_COUNT,
    MAX_STRING_LENGTH,
    DEFAULT_MAX_FILE_SIZE_MB,
    DEFAULT_MAX_WORKERS,
    FILE_EXTENSION_MAP,
    SUPPORTED_FILE_FORMATS,
)


class AnalysisConfig:
    """
    Configuration for an analysis session.

    Example YAML:

        analysis:
          name: Monthly extracts
          files:
            - path: data/customers.csv
              delimiter: ";"
            - path: data/orders.xlsx
              sheet: Orders
          processing:
            parallel_files: true
            max_workers: 4
            max_file_size_mb: 100
          output:
            json_report: reports/quality.json
    """

    MAX_YAML_FILE_SIZE = MAX_YAML_FILE_SIZE
    MAX_YAML_NESTING_DEPTH = MAX_YAML_NESTING_DEPTH
    MAX_YAML_KEYS = MAX_YAML_KEY_COUNT

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize from configuration dictionary.

        Args:
            config_dict: Parsed configuration; None gives the defaults with no files
        """
        self.raw_config = config_dict or {}
        self._parse_config()

    @classmethod
    def from_yaml(cls, config_path: str) -> "AnalysisConfig":
        """
        Load configuration from YAML file with security validations.

        Raises:
            ConfigError: If file not found or invalid
            YAMLSizeError: If file exceeds size limit
            ConfigValidationError: If YAML structure is too complex or invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        file_size = os.path.getsize(config_file)
        if file_size > cls.MAX_YAML_FILE_SIZE:
            raise YAMLSizeError(
                f"Configuration file too large: {file_size:,} bytes. "
                f"Maximum allowed: {cls.MAX_YAML_FILE_SIZE:,} bytes ({cls.MAX_YAML_FILE_SIZE // (1024*1024)} MB)",
                file_size=file_size,
                max_size=cls.MAX_YAML_FILE_SIZE
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                # safe_load: configuration never constructs Python objects
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Invalid file encoding (expected UTF-8): {str(e)}")

        if config_dict is not None:
            if not isinstance(config_dict, dict):
                raise ConfigValidationError(
                    "Configuration root must be a mapping",
                    expected="mapping",
                    actual=type(config_dict).__name__
                )
            cls._validate_yaml_structure(config_dict)

        return cls(config_dict)

    @classmethod
    def _validate_yaml_structure(cls, obj: Any, current_depth: int = 0, total_keys: List[int] = None) -> None:
        """
        Reject configurations that are too deep, too wide or hold huge strings.

        Raises:
            ConfigValidationError: If structure is too complex
        """
        if total_keys is None:
            total_keys = [0]

        if current_depth > cls.MAX_YAML_NESTING_DEPTH:
            raise ConfigValidationError(
                f"YAML nesting depth exceeds maximum of {cls.MAX_YAML_NESTING_DEPTH} levels."
            )

        if isinstance(obj, dict):
            total_keys[0] += len(obj)
            if total_keys[0] > cls.MAX_YAML_KEYS:
                raise ConfigValidationError(
                    f"YAML structure contains more than {cls.MAX_YAML_KEYS:,} keys/items."
                )
            for key, value in obj.items():
                if isinstance(key, str) and len(key) > 1000:
                    raise ConfigValidationError(
                        f"YAML key exceeds maximum length of 1000 characters: '{key[:50]}...'"
                    )
                cls._validate_yaml_structure(value, current_depth + 1, total_keys)

        elif isinstance(obj, list):
            total_keys[0] += len(obj)
            if total_keys[0] > cls.MAX_YAML_KEYS:
                raise ConfigValidationError(
                    f"YAML structure contains more than {cls.MAX_YAML_KEYS:,} keys/items."
                )
            for item in obj:
                cls._validate_yaml_structure(item, current_depth + 1, total_keys)

        elif isinstance(obj, str):
            if len(obj) > MAX_STRING_LENGTH:
                raise ConfigValidationError(
                    f"YAML contains string exceeding maximum length ({MAX_STRING_LENGTH:,} bytes): '{obj[:50]}...'"
                )

    def _parse_config(self) -> None:
        """Parse and validate configuration."""
        job_config = self.raw_config.get("analysis", {})
        if job_config is None:
            job_config = {}
        if not isinstance(job_config, dict):
            raise ConfigValidationError(
                "'analysis' must be a mapping",
                field="analysis",
                expected="mapping",
                actual=type(job_config).__name__
            )

        self.name: str = job_config.get("name", "Data Quality Analysis")
        self.files = self._parse_files(job_config.get("files") or [])

        processing = self._section(job_config, "processing")
        self.parallel_files: bool = bool(processing.get("parallel_files", True))
        self.max_workers: int = self._positive_number(
            processing.get("max_workers", DEFAULT_MAX_WORKERS),
            "analysis.processing.max_workers",
            integer=True
        )
        max_file_size = processing.get("max_file_size_mb", DEFAULT_MAX_FILE_SIZE_MB)
        self.max_file_size_mb: Optional[float] = (
            None if max_file_size is None
            else self._positive_number(max_file_size, "analysis.processing.max_file_size_mb")
        )

        output = self._section(job_config, "output")
        self.json_report_path: Optional[str] = output.get("json_report")
        if self.json_report_path is not None and not isinstance(self.json_report_path, str):
            raise ConfigValidationError(
                "analysis.output.json_report must be a path",
                field="analysis.output.json_report",
                expected="string",
                actual=type(self.json_report_path).__name__
            )

    @staticmethod
    def _section(job_config: Dict[str, Any], key: str) -> Dict[str, Any]:
        """Return an optional sub-mapping of the analysis block ({} when absent)."""
        section = job_config.get(key)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"'analysis.{key}' must be a mapping",
                field=f"analysis.{key}",
                expected="mapping",
                actual=type(section).__name__
            )
        return section

    @staticmethod
    def _positive_number(value: Any, field: str, integer: bool = False):
        valid_types = (int,) if integer else (int, float)
        if isinstance(value, bool) or not isinstance(value, valid_types) or value <= 0:
            raise ConfigValidationError(
                f"{field} must be a positive {'integer' if integer else 'number'}",
                field=field,
                expected="positive integer" if integer else "positive number",
                actual=repr(value)
            )
        return value

    def _parse_files(self, files_config: List[Any]) -> List[Dict[str, Any]]:
        """
        Parse the files list.

        Entries may be plain path strings or mappings with 'path' and
        optional 'format', 'delimiter', 'encoding' and 'sheet'.
        """
        if not isinstance(files_config, list):
            raise ConfigValidationError(
                "'files' must be a list",
                field="analysis.files",
                expected="list",
                actual=type(files_config).__name__
            )

        parsed_files = []
        for idx, file_config in enumerate(files_config):
            if isinstance(file_config, str):
                file_config = {"path": file_config}
            if not isinstance(file_config, dict) or "path" not in file_config:
                raise ConfigError(f"File configuration {idx} missing 'path'", field=f"analysis.files[{idx}]")

            format_type = file_config.get("format") or self._infer_format(file_config["path"])
            if format_type not in SUPPORTED_FILE_FORMATS:
                raise ConfigValidationError(
                    f"Unsupported format '{format_type}' for file {idx}",
                    field=f"analysis.files[{idx}].format",
                    expected=", ".join(SUPPORTED_FILE_FORMATS),
                    actual=str(format_type)
                )

            parsed_files.append({
                "path": str(file_config["path"]),
                "format": format_type,
                "delimiter": file_config.get("delimiter"),
                "encoding": file_config.get("encoding"),
                "sheet": file_config.get("sheet", 0),
            })

        return parsed_files

    @staticmethod
    def _infer_format(file_path: str) -> str:
        """Infer file format from extension."""
        suffix = Path(file_path).suffix.lower()
        return FILE_EXTENSION_MAP.get(suffix, "csv")
