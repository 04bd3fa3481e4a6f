"""Generate synthetic test-center and applicant datasets."""

import pandas as pd
import random
import os

from config.locations import LOCATION_TO_REGION


def generate_centers_df() -> pd.DataFrame:
    """Generate test-center master data: two central, one eastern and one western center."""
    rows = [
        {"Center ID": "TC-KTM", "Name": "Kathmandu Medical Center", "City": "Kathmandu",
         "Region": "central", "Capacity": 80, "Current Load": 0, "Address": "Maharajgunj, Kathmandu"},
        {"Center ID": "TC-CTW", "Name": "Bharatpur Health Point", "City": "Bharatpur",
         "Region": "central", "Capacity": 40, "Current Load": 0, "Address": "Narayangarh, Bharatpur"},
        {"Center ID": "TC-BRT", "Name": "Biratnagar Diagnostic Center", "City": "Biratnagar",
         "Region": "eastern", "Capacity": 30, "Current Load": 0, "Address": "Main Road, Biratnagar"},
        {"Center ID": "TC-PKR", "Name": "Pokhara Test Center", "City": "Pokhara",
         "Region": "western", "Capacity": 30, "Current Load": 0, "Address": "Lakeside, Pokhara"},
    ]
    return pd.DataFrame(rows)


def generate_applicants_df(count: int = 100) -> pd.DataFrame:
    """Generate applicants spread across known cities, weighted toward the central region."""
    random.seed(42)
    cities = sorted(LOCATION_TO_REGION)
    weights = [8 if LOCATION_TO_REGION[c] == "central" else 1 for c in cities]
    rows = []
    for i in range(1, count + 1):
        preferred = random.choice([None, None, None, "central", "eastern", "western"])
        rows.append({
            "Applicant ID": f"APP-{i:04d}",
            "Name": f"Applicant {i}",
            "City": random.choices(cities, weights=weights)[0],
            "Preferred Region": preferred,
        })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_centers_df().to_csv(os.path.join(output_dir, "centers.csv"), index=False)
    generate_applicants_df().to_csv(os.path.join(output_dir, "applicants.csv"), index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    print(f"Sample files written to {os.path.abspath(out)}")
