"""Post-allocation utilization and load-balance reporting."""

from typing import Sequence

import pandas as pd

from models.center import TestCenter
from models.stats import DistributionStats, RegionStats


def _utilization(allocated: int, capacity: int) -> float:
    return allocated / capacity * 100 if capacity > 0 else 0.0


def get_distribution_stats(test_centers: Sequence[TestCenter]) -> DistributionStats:
    """Aggregate load and capacity overall and per region.

    The balance score is the population standard deviation of current load
    across centers; an empty center list yields all-zero stats.
    """
    if not test_centers:
        return DistributionStats()

    df = pd.DataFrame(
        [(c.region, c.current_load, c.capacity) for c in test_centers],
        columns=["region", "current_load", "capacity"],
    )

    allocated = int(df["current_load"].sum())
    capacity = int(df["capacity"].sum())
    overall = RegionStats(
        centers=len(df),
        allocated=allocated,
        capacity=capacity,
        utilization_rate=_utilization(allocated, capacity),
    )

    by_region = {}
    grouped = df.groupby("region", sort=False).agg(
        centers=("capacity", "count"),
        allocated=("current_load", "sum"),
        capacity=("capacity", "sum"),
    )
    for region, row in grouped.iterrows():
        by_region[region] = RegionStats(
            centers=int(row["centers"]),
            allocated=int(row["allocated"]),
            capacity=int(row["capacity"]),
            utilization_rate=_utilization(int(row["allocated"]), int(row["capacity"])),
        )

    balance_score = float(df["current_load"].std(ddof=0))

    return DistributionStats(overall=overall, by_region=by_region, balance_score=balance_score)


def stats_to_frame(stats: DistributionStats) -> pd.DataFrame:
    """Flatten stats into a table: one row per region plus an 'overall' row."""
    rows = []
    for region, rs in stats.by_region.items():
        rows.append({
            "Region": region,
            "Centers": rs.centers,
            "Allocated": rs.allocated,
            "Capacity": rs.capacity,
            "Utilization %": round(rs.utilization_rate, 1),
        })
    rows.append({
        "Region": "overall",
        "Centers": stats.overall.centers,
        "Allocated": stats.overall.allocated,
        "Capacity": stats.overall.capacity,
        "Utilization %": round(stats.overall.utilization_rate, 1),
    })
    return pd.DataFrame(rows)
