"""Row-wise validation of pandas DataFrames.

Requires the ``dataframe`` extra (pandas).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TYPE_CHECKING

import numpy as np
import pandas as pd

from .result import ValidationResult

if TYPE_CHECKING:
    from .validators import Validator


logger = logging.getLogger(__name__)


def clean_record(record: Mapping[Any, Any]) -> dict[str, Any]:
    """Prepare one DataFrame record for validation.

    Missing cells (``NaN``, ``None``, ``NaT``, ``pd.NA``) are left out so the
    validator sees them as absent fields. Timestamps become ``datetime``
    objects and numpy scalars become their Python equivalents.
    """
    mapping = {}
    for column, value in record.items():
        if _is_na(value):
            continue
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        elif isinstance(value, np.generic):
            value = value.item()
        mapping[str(column)] = value
    return mapping


def validate_dataframe(
    validator: Validator[Any],
    df: pd.DataFrame,
    stop_on_error: bool = False,
) -> list[ValidationResult]:
    """Validate every row of ``df`` as a mapping.

    Args:
        validator: Validator applied to each row, usually an object validator
        df: DataFrame to validate
        stop_on_error: If True, stop at the first invalid row

    Returns:
        List of ValidationResults in row order
    """
    results = []
    for record in df.to_dict(orient="records"):
        result = validator.validate(clean_record(record))
        results.append(result)
        if not result.is_valid and stop_on_error:
            break

    invalid = sum(1 for result in results if not result.is_valid)
    logger.debug(f"Validated {len(results)} of {len(df)} rows, {invalid} invalid")
    return results


def _is_na(value: Any) -> bool:
    # Container cells are values in their own right, never NA as a whole
    if isinstance(value, (list, tuple, dict, set, np.ndarray)):
        return False
    return bool(pd.isna(value))
