"""Schema validation for test-center and applicant tables."""

from dataclasses import dataclass, field
from typing import List, Optional
import pandas as pd

from config.defaults import REGIONS, CENTER_COLUMNS, APPLICANT_COLUMNS
from engine.region_classifier import DEFAULT_CLASSIFIER, RegionClassifier


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


CENTER_REQUIRED_COLUMNS = [
    CENTER_COLUMNS["center_id"],
    CENTER_COLUMNS["name"],
    CENTER_COLUMNS["city"],
    CENTER_COLUMNS["region"],
    CENTER_COLUMNS["capacity"],
]

APPLICANT_REQUIRED_COLUMNS = [
    APPLICANT_COLUMNS["applicant_id"],
    APPLICANT_COLUMNS["name"],
    APPLICANT_COLUMNS["city"],
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    if not result.is_valid:
        return result

    for col in required:
        blank = _blank_mask(df[col])
        if blank.any():
            result.is_valid = False
            result.errors.append(f"{file_label}: {col} is blank in {int(blank.sum())} row(s).")
    return result


def _blank_mask(series: pd.Series) -> pd.Series:
    return series.isna() | (series.astype(str).str.strip() == "")


def _whole_number_mask(series: pd.Series) -> pd.Series:
    """True where a non-blank cell is not a whole number."""
    numbers = pd.to_numeric(series, errors="coerce")
    not_numeric = numbers.isna() & ~_blank_mask(series)
    fractional = numbers.notna() & (numbers % 1 != 0)
    return not_numeric | fractional


def _unknown_regions(series: pd.Series) -> List[str]:
    values = series.dropna().astype(str).str.strip().str.lower()
    values = values[values != ""]
    return sorted(set(values) - set(REGIONS))


def validate_centers(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, CENTER_REQUIRED_COLUMNS, "Test Centers")
    if not result.is_valid:
        return result

    id_col = CENTER_COLUMNS["center_id"]
    capacity_col = CENTER_COLUMNS["capacity"]
    load_col = CENTER_COLUMNS["current_load"]

    unknown = _unknown_regions(df[CENTER_COLUMNS["region"]])
    if unknown:
        result.is_valid = False
        result.errors.append(
            f"Test Centers: Region must be one of {', '.join(REGIONS)}. Found: {unknown}"
        )

    capacity = pd.to_numeric(df[capacity_col], errors="coerce")
    if (_whole_number_mask(df[capacity_col]) | (capacity <= 0)).any():
        result.is_valid = False
        result.errors.append("Test Centers: Capacity must be a positive whole number.")

    if load_col in df.columns:
        loads = pd.to_numeric(df[load_col], errors="coerce").fillna(0)
        if _whole_number_mask(df[load_col]).any() or (loads < 0).any() or (loads > capacity).any():
            result.is_valid = False
            result.errors.append("Test Centers: Current Load must be a whole number between 0 and Capacity.")

    dupes = df.duplicated(subset=[id_col], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Test Centers: Duplicate center IDs: {df[dupes][id_col].unique().tolist()}")

    return result


def validate_applicants(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, APPLICANT_REQUIRED_COLUMNS, "Applicants")
    if not result.is_valid:
        return result

    id_col = APPLICANT_COLUMNS["applicant_id"]
    pref_col = APPLICANT_COLUMNS["preferred_region"]

    if pref_col in df.columns:
        unknown = _unknown_regions(df[pref_col])
        if unknown:
            result.is_valid = False
            result.errors.append(
                f"Applicants: Preferred Region must be blank or one of {', '.join(REGIONS)}. Found: {unknown}"
            )

    dupes = df.duplicated(subset=[id_col], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Applicants: Duplicate applicant IDs: {df[dupes][id_col].unique().tolist()}")

    return result


def validate_cross_file(
    applicants_df: pd.DataFrame,
    centers_df: pd.DataFrame,
    classifier: Optional[RegionClassifier] = None,
) -> ValidationResult:
    """Warn about applicant cities the classifier or the center list does not cover."""
    classifier = classifier or DEFAULT_CLASSIFIER
    result = ValidationResult()
    applicant_cities = set(applicants_df[APPLICANT_COLUMNS["city"]].astype(str).str.strip())
    center_cities = set(centers_df[CENTER_COLUMNS["city"]].astype(str).str.strip().str.lower())

    unknown_cities = sorted(c for c in applicant_cities if c not in classifier)
    no_local_center = sorted(c for c in applicant_cities if c.lower() not in center_cities)

    if unknown_cities:
        result.warnings.append(
            f"Applicant cities without a known region: {', '.join(unknown_cities)}. "
            "These applicants are routed by preference or load only."
        )
    if no_local_center:
        result.warnings.append(
            f"Applicant cities without a local test center: {', '.join(no_local_center)}."
        )
    return result
