"""Rule-based test-center allocation: the core business engine."""

import copy
import math
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from models.applicant import Applicant
from models.center import TestCenter
from models.quota import RegionQuota
from models.allocation import Allocation
from engine.explainer import explain_allocation
from engine.region_classifier import DEFAULT_CLASSIFIER, RegionClassifier
from config.defaults import REGION_QUOTA_SHARES
from utils.logger import get_logger


logger = get_logger(__name__)


class NoEligibleCenterError(Exception):
    """Raised when no center has both spare capacity and remaining regional quota."""

    def __init__(self, applicant_id: str):
        super().__init__(
            f"No available test centers with remaining quota for applicant {applicant_id}"
        )
        self.applicant_id = applicant_id


@dataclass
class BatchResult:
    allocations: Dict[str, Allocation]   # applicant_id -> Allocation, in processing order
    centers: List[TestCenter]            # private copy with updated loads
    initial_quota: RegionQuota
    remaining_quota: RegionQuota
    skipped_ids: List[str] = field(default_factory=list)


def compute_region_quota(total_applicants: int) -> RegionQuota:
    """Split a batch into per-region allowances, flooring each share."""
    return RegionQuota(**{
        region: math.floor(total_applicants * share)
        for region, share in REGION_QUOTA_SHARES.items()
    })


def filter_eligible_centers(
    centers: Sequence[TestCenter],
    region_quota: RegionQuota,
) -> List[TestCenter]:
    """Centers with spare capacity in a region that still has quota."""
    return [
        c for c in centers
        if c.current_load < c.capacity and region_quota.remaining(c.region) > 0
    ]


def select_least_loaded_center(centers: Sequence[TestCenter]) -> TestCenter:
    """Pick the center with the lowest load-to-capacity ratio (first one wins ties)."""
    return min(centers, key=lambda c: c.current_load / c.capacity)


def allocate_center(
    applicant: Applicant,
    centers: Sequence[TestCenter],
    region_quota: RegionQuota,
    classifier: Optional[RegionClassifier] = None,
) -> TestCenter:
    """Choose a center for one applicant without mutating any state.

    Candidate sets are tried in order and the first non-empty one wins:
    same city, preferred region, home region, then any eligible center.
    """
    classifier = classifier or DEFAULT_CLASSIFIER
    available = filter_eligible_centers(centers, region_quota)
    if not available:
        raise NoEligibleCenterError(applicant.applicant_id)

    city = applicant.city.lower()
    same_city = [c for c in available if c.city.lower() == city]
    if same_city:
        logger.debug("Same-city match | applicant_id=%s | city=%s", applicant.applicant_id, applicant.city)
        return select_least_loaded_center(same_city)

    if applicant.preferred_region:
        preferred = [c for c in available if c.region == applicant.preferred_region]
        if preferred:
            logger.debug(
                "Preferred-region match | applicant_id=%s | region=%s",
                applicant.applicant_id, applicant.preferred_region,
            )
            return select_least_loaded_center(preferred)

    home_region = classifier.home_region(applicant.city)
    if home_region is not None:
        home = [c for c in available if c.region == home_region]
        if home:
            logger.debug("Home-region match | applicant_id=%s | region=%s", applicant.applicant_id, home_region)
            return select_least_loaded_center(home)

    logger.debug("Fallback allocation | applicant_id=%s", applicant.applicant_id)
    return select_least_loaded_center(available)


def run_batch(
    applicants: Sequence[Applicant],
    test_centers: Sequence[TestCenter],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    classifier: Optional[RegionClassifier] = None,
) -> BatchResult:
    """Allocate a whole batch against a private copy of the centers.

    Applicants are processed in shuffled order. Pass `seed` (or a ready
    `rng`) for a reproducible order. Applicants with no eligible center are
    skipped and reported in `skipped_ids`. Duplicate applicant ids raise
    ValueError before any center is touched.
    """
    duplicates = sorted(i for i, n in Counter(a.applicant_id for a in applicants).items() if n > 1)
    if duplicates:
        raise ValueError(f"Duplicate applicant IDs in batch: {duplicates}")

    classifier = classifier or DEFAULT_CLASSIFIER
    rng = rng or random.Random(seed)

    centers = copy.deepcopy(list(test_centers))
    initial_quota = compute_region_quota(len(applicants))
    quota = copy.copy(initial_quota)

    order = list(applicants)
    rng.shuffle(order)

    allocations: Dict[str, Allocation] = {}
    skipped: List[str] = []
    for applicant in order:
        try:
            center = allocate_center(applicant, centers, quota, classifier)
        except NoEligibleCenterError as exc:
            logger.warning("Allocation failed | applicant_id=%s | %s", applicant.applicant_id, exc)
            skipped.append(applicant.applicant_id)
            continue

        allocations[applicant.applicant_id] = Allocation(
            applicant=applicant,
            center=copy.copy(center),
            reason=explain_allocation(applicant, center, classifier),
        )
        center.current_load += 1
        quota.consume(center.region)

    logger.info(
        "Batch allocation completed | applicants=%s | allocated=%s | skipped=%s | remaining_quota=%s",
        len(order),
        len(allocations),
        len(skipped),
        quota.as_dict(),
    )
    return BatchResult(
        allocations=allocations,
        centers=centers,
        initial_quota=initial_quota,
        remaining_quota=quota,
        skipped_ids=skipped,
    )


def batch_allocate(
    applicants: Sequence[Applicant],
    test_centers: Sequence[TestCenter],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    classifier: Optional[RegionClassifier] = None,
) -> Dict[str, Allocation]:
    """Allocate a batch and return only the applicant_id -> Allocation map."""
    return run_batch(applicants, test_centers, seed=seed, rng=rng, classifier=classifier).allocations


def get_unallocated_applicants(
    applicants: Sequence[Applicant],
    allocations: Dict[str, Allocation],
) -> List[Applicant]:
    """Applicants from the input that received no allocation, in input order."""
    return [a for a in applicants if a.applicant_id not in allocations]
