from dataclasses import dataclass

from models.applicant import Applicant
from models.center import TestCenter


@dataclass(frozen=True)
class Allocation:
    applicant: Applicant
    center: TestCenter   # snapshot of the center at decision time
    reason: str
