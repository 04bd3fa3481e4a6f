"""Generates human-readable reasons for test-center allocations."""

from typing import Optional

from engine.region_classifier import DEFAULT_CLASSIFIER, RegionClassifier
from models.applicant import Applicant
from models.center import TestCenter
from config.defaults import (
    REASON_SAME_CITY, REASON_HOME_REGION,
    REASON_PREFERRED_REGION, REASON_BALANCED_LOAD,
)


def explain_allocation(
    applicant: Applicant,
    center: TestCenter,
    classifier: Optional[RegionClassifier] = None,
) -> str:
    """Reproduce which routing rule justified placing the applicant at the center.

    Checked in order: same city, home region, preferred region, then the
    generic load-balancing fallback.
    """
    classifier = classifier or DEFAULT_CLASSIFIER
    home_region = classifier.home_region(applicant.city)

    if center.city.lower() == applicant.city.lower():
        return REASON_SAME_CITY.format(city=center.city)

    if home_region is not None and center.region == home_region:
        return REASON_HOME_REGION.format(region=center.region)

    if applicant.preferred_region and center.region == applicant.preferred_region:
        return REASON_PREFERRED_REGION.format(region=center.region)

    return REASON_BALANCED_LOAD
