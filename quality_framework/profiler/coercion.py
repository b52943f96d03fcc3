"""
Explicit value coercion for profiling.

Every numeric or date decision in the engine goes through this module so
that the parsing rules are stated once and never depend on implicit
string-to-number conversion:

    - Missing means None, NaN/NaT/pd.NA, or the empty string. Whitespace-only
      strings are values, not missing.
    - A number is a finite int/float (booleans excluded) or a string holding a
      plain decimal or scientific literal. "" never becomes 0, and "nan",
      "inf" or "1_000" are not numbers.
    - A date is a datetime/date object, or a string shaped like a common
      date layout that also resolves to a real calendar date.

Failed parses are not errors. Callers receive None / False and exclude the
value from the numeric or date population.
"""

import math
import numbers
import re
import warnings
from datetime import date, datetime
from typing import Any, Optional

import numpy as np
import pandas as pd

# Plain decimal or scientific literal, after trimming surrounding whitespace
_NUMBER_RE = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

# Date layouts accepted before calendar validation
DATE_PATTERNS = [
    r'^\d{4}-\d{1,2}-\d{1,2}',  # ISO date (2024-01-15), optional time suffix
    r'^\d{4}/\d{1,2}/\d{1,2}',  # Alternative ISO (2024/01/15)
    r'^\d{1,2}/\d{1,2}/\d{4}',  # US date (01/15/2024)
    r'^\d{1,2}-\d{1,2}-\d{4}',  # EU date (15-01-2024)
    r'^\d{1,2}\.\d{1,2}\.\d{4}',  # Dotted EU date (15.01.2024)
    r'^[A-Za-z]{3,9}\.?\s+\d{1,2},?\s+\d{4}',  # Month name first (Jan 15, 2024)
    r'^\d{1,2}\s+[A-Za-z]{3,9}\.?,?\s+\d{4}',  # Day first (15 Jan 2024)
]

_DATE_REGEXES = [re.compile(p) for p in DATE_PATTERNS]


def is_missing(value: Any) -> bool:
    """Return True for None, NaN-like scalars and the empty string."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    try:
        result = pd.isna(value)
    except (TypeError, ValueError):
        return False
    # pd.isna returns an array for list-like input; those are never missing
    return isinstance(result, (bool, np.bool_)) and bool(result)


def normalize_missing(value: Any) -> Any:
    """
    Map every missing representation to None and numpy scalars to Python.

    Args:
        value: Raw cell value

    Returns:
        None for missing cells, otherwise the value (numpy scalars unwrapped)
    """
    if is_missing(value):
        return None
    if isinstance(value, np.generic):
        return value.item()
    return value


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a value as a finite number.

    Args:
        value: Raw cell value

    Returns:
        The number as float, or None if the value is missing or not numeric
    """
    if isinstance(value, (bool, np.bool_)) or is_missing(value):
        return None

    try:
        if isinstance(value, numbers.Real):
            number = float(value)
        elif isinstance(value, str):
            text = value.strip()
            if not _NUMBER_RE.fullmatch(text):
                return None
            number = float(text)
        else:
            return None
    except OverflowError:
        # Integers beyond float range cannot join the numeric population
        return None

    return number if math.isfinite(number) else None


def is_date_like(value: Any) -> bool:
    """
    Check whether a value represents a valid calendar date.

    Args:
        value: Raw cell value

    Returns:
        True for date/datetime objects and parseable date strings
    """
    if isinstance(value, (datetime, date, np.datetime64)):
        return not is_missing(value)
    if not isinstance(value, str):
        return False

    text = value.strip()
    if not any(regex.match(text) for regex in _DATE_REGEXES):
        return False

    try:
        with warnings.catch_warnings():
            # Day-first and mixed-format inference warnings are irrelevant here
            warnings.simplefilter("ignore")
            parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return False
    return not pd.isna(parsed)
