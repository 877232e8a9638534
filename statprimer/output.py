"""Write analysis results to reproducible CSV files."""

from __future__ import annotations

import os
from typing import Any, Mapping

from .reporting import results_to_dataframe

RESULTS_FILENAME = "results_summary.csv"


def save_results_to_csv(results: Mapping[str, Any], output_dir: str = "output") -> str:
    """Save labelled result records to a long-format CSV file.

    Args:
        results (Mapping[str, Any]): Analysis label mapped to a result record,
            as accepted by :func:`statprimer.reporting.results_to_dataframe`.
        output_dir (str): Directory where the CSV is written. Created if
            missing.

    Returns:
        str: Path to ``results_summary.csv``.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, RESULTS_FILENAME)
    results_to_dataframe(results).to_csv(path, index=False)
    return path
