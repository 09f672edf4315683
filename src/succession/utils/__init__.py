"""
Utility modules for succession.

Submodules:
    serialize: DataFrame views of results and diagnostics for exporters
"""

from succession.utils.serialize import results_to_dataframe, errors_to_dataframe

__all__ = [
    "results_to_dataframe",
    "errors_to_dataframe",
]
