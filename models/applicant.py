from dataclasses import dataclass
from typing import Optional

from config.defaults import REGIONS


@dataclass(frozen=True)
class Applicant:
    applicant_id: str
    name: str
    city: str
    preferred_region: Optional[str] = None  # "central", "eastern", "western"

    def __post_init__(self):
        if self.preferred_region is not None and self.preferred_region not in REGIONS:
            raise ValueError(
                f"Applicant {self.applicant_id}: unknown preferred region "
                f"'{self.preferred_region}'. Expected one of {REGIONS}."
            )
