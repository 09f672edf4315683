"""
Tabular views of engine output.

Export collaborators (spreadsheets, documents, image renderers) consume rows.
These helpers turn result and diagnostic lists into DataFrames with exact
fractions rendered as strings, so nothing downstream has to touch floats.
"""

from typing import Optional, Sequence

import pandas as pd

from succession.core.rational import to_string
from succession.schemas.result_contract import (
    ERROR_COLUMNS,
    RESULT_COLUMNS,
    CalculationResult,
    ValidationError,
)


def results_to_dataframe(
    results: Sequence[CalculationResult],
    estate_value: Optional[int] = None,
) -> pd.DataFrame:
    """
    Convert calculation results to a DataFrame.

    Args:
        results: Output of calculate_shares().
        estate_value: Optional estate value; adds an exact 'estate_portion'
            column (e.g. '6000000' or '2000000/3'), never rounded.

    Returns:
        DataFrame with RESULT_COLUMNS (plus 'estate_portion' when requested).

    Example:
        >>> df = results_to_dataframe(results, estate_value=18000000)
        >>> df.loc[0, "statutory_share"]
        '1/3'
    """
    columns = list(RESULT_COLUMNS)
    if estate_value is not None:
        columns.append("estate_portion")

    rows = []
    for result in results:
        row = result.to_dict()
        if estate_value is not None:
            row["estate_portion"] = to_string(result.estate_portion(estate_value))
        rows.append(row)

    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)


def errors_to_dataframe(errors: Sequence[ValidationError]) -> pd.DataFrame:
    """Convert validation diagnostics to a DataFrame with ERROR_COLUMNS."""
    if not errors:
        return pd.DataFrame(columns=ERROR_COLUMNS)
    return pd.DataFrame([e.to_dict() for e in errors], columns=ERROR_COLUMNS)
