from dataclasses import asdict, dataclass
from typing import Dict

from config.defaults import REGIONS


@dataclass
class RegionQuota:
    """Remaining number of applicants each region may still receive in a batch."""
    central: int = 0
    eastern: int = 0
    western: int = 0

    def remaining(self, region: str) -> int:
        if region not in REGIONS:
            return 0
        return getattr(self, region)

    def consume(self, region: str) -> None:
        left = self.remaining(region)
        if left <= 0:
            raise ValueError(f"No quota left for region '{region}'.")
        setattr(self, region, left - 1)

    def total(self) -> int:
        return self.central + self.eastern + self.western

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
