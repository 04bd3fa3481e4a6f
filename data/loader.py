"""File parsing: CSV/XLSX into typed model lists."""

import os

import pandas as pd
from typing import List, Optional
from models.center import TestCenter
from models.applicant import Applicant
from config.defaults import CENTER_COLUMNS, APPLICANT_COLUMNS


def _optional_str(row, df: pd.DataFrame, column: str) -> Optional[str]:
    if column in df.columns and pd.notna(row.get(column)):
        value = str(row[column]).strip()
        return value or None
    return None


def parse_centers(df: pd.DataFrame) -> List[TestCenter]:
    """Convert a test-center DataFrame into TestCenter objects."""
    cols = CENTER_COLUMNS
    centers = []
    for _, row in df.iterrows():
        current_load = 0
        raw_load = row.get(cols["current_load"])
        if raw_load is not None and pd.notna(raw_load):
            load = pd.to_numeric(raw_load, errors="coerce")
            current_load = int(load) if pd.notna(load) else 0
        centers.append(TestCenter(
            center_id=str(row[cols["center_id"]]).strip(),
            name=str(row[cols["name"]]).strip(),
            city=str(row[cols["city"]]).strip(),
            region=str(row[cols["region"]]).strip().lower(),
            capacity=int(row[cols["capacity"]]),
            current_load=current_load,
            address=_optional_str(row, df, cols["address"]) or "",
        ))
    return centers


def parse_applicants(df: pd.DataFrame) -> List[Applicant]:
    """Convert an applicant DataFrame into Applicant objects."""
    cols = APPLICANT_COLUMNS
    applicants = []
    for _, row in df.iterrows():
        preferred = _optional_str(row, df, cols["preferred_region"])
        applicants.append(Applicant(
            applicant_id=str(row[cols["applicant_id"]]).strip(),
            name=str(row[cols["name"]]).strip(),
            city=str(row[cols["city"]]).strip(),
            preferred_region=preferred.lower() if preferred else None,
        ))
    return applicants


def load_file(source) -> pd.DataFrame:
    """Load a CSV or XLSX file (path or uploaded file object) into a DataFrame."""
    name = str(getattr(source, "name", source)).lower()
    if name.endswith(".csv"):
        return pd.read_csv(source)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(source, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {os.path.basename(name)}. Use CSV or XLSX.")
