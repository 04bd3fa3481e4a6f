from dataclasses import dataclass

from config.defaults import REGIONS


@dataclass
class TestCenter:
    __test__ = False  # keep pytest from collecting this as a test class

    center_id: str
    name: str
    city: str
    region: str          # one of REGIONS
    capacity: int        # fixed total slots, > 0
    current_load: int = 0
    address: str = ""

    def __post_init__(self):
        if self.region not in REGIONS:
            raise ValueError(
                f"Center {self.center_id}: unknown region '{self.region}'. Expected one of {REGIONS}."
            )
        if self.capacity <= 0:
            raise ValueError(f"Center {self.center_id}: capacity must be positive, got {self.capacity}.")
        if not 0 <= self.current_load <= self.capacity:
            raise ValueError(
                f"Center {self.center_id}: current load {self.current_load} "
                f"outside [0, {self.capacity}]."
            )

    @property
    def available_slots(self) -> int:
        return self.capacity - self.current_load

    @property
    def has_capacity(self) -> bool:
        return self.current_load < self.capacity

    @property
    def load_pct(self) -> float:
        """Current load as a percentage of capacity."""
        return self.current_load / self.capacity * 100
