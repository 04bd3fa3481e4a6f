"""Default configuration constants for the test-center allocation engine."""

# Closed set of regions used for quota accounting
REGIONS = ("central", "eastern", "western")

# Classifier result for cities missing from the location table
UNKNOWN_REGION = "unknown"

# Share of each batch that may be routed into a region (floored per batch)
REGION_QUOTA_SHARES = {
    "central": 0.80,
    "eastern": 0.11,
    "western": 0.09,
}

# Allocation reasons, in the order they are checked
REASON_SAME_CITY = "Test center in your city ({city})"
REASON_HOME_REGION = "Nearest available center in {region} region"
REASON_PREFERRED_REGION = "Center in your preferred {region} region"
REASON_BALANCED_LOAD = "Best available center with balanced load"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV_VAR = "ALLOCATION_LOG_LEVEL"

# Tabular column names
CENTER_COLUMNS = {
    "center_id": "Center ID",
    "name": "Name",
    "city": "City",
    "region": "Region",
    "capacity": "Capacity",
    "current_load": "Current Load",
    "address": "Address",
}

APPLICANT_COLUMNS = {
    "applicant_id": "Applicant ID",
    "name": "Name",
    "city": "City",
    "preferred_region": "Preferred Region",
}

ALLOCATION_EXPORT_COLUMNS = [
    "Applicant ID",
    "Applicant Name",
    "City",
    "Center ID",
    "Center Name",
    "Center City",
    "Region",
    "Reason",
]
