from dataclasses import dataclass, field
from typing import Dict


@dataclass
class RegionStats:
    centers: int = 0
    allocated: int = 0
    capacity: int = 0
    utilization_rate: float = 0.0   # percentage, e.g. 62.5


@dataclass
class DistributionStats:
    overall: RegionStats = field(default_factory=RegionStats)
    by_region: Dict[str, RegionStats] = field(default_factory=dict)
    balance_score: float = 0.0      # population std-dev of per-center load
