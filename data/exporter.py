"""Allocation export: allocation maps into DataFrames and CSV files."""

import os
from typing import Dict

import pandas as pd

from models.allocation import Allocation
from config.defaults import ALLOCATION_EXPORT_COLUMNS


def allocations_to_frame(allocations: Dict[str, Allocation]) -> pd.DataFrame:
    """One row per allocation, in the map's order."""
    rows = []
    for applicant_id, alloc in allocations.items():
        rows.append({
            "Applicant ID": applicant_id,
            "Applicant Name": alloc.applicant.name,
            "City": alloc.applicant.city,
            "Center ID": alloc.center.center_id,
            "Center Name": alloc.center.name,
            "Center City": alloc.center.city,
            "Region": alloc.center.region,
            "Reason": alloc.reason,
        })
    return pd.DataFrame(rows, columns=ALLOCATION_EXPORT_COLUMNS)


def export_allocations_csv(allocations: Dict[str, Allocation], path: str) -> str:
    """Write allocations to a CSV file and return the path."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    allocations_to_frame(allocations).to_csv(path, index=False)
    return path
