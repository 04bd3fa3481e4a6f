"""City -> region lookup used for home-region routing."""

from types import MappingProxyType
from typing import List, Mapping, Optional

from config.defaults import UNKNOWN_REGION
from config.locations import LOCATION_TO_REGION


class RegionClassifier:
    """Maps a city name to its region using a fixed lookup table.

    Matching is case-sensitive and exact. Cities missing from the table map
    to UNKNOWN_REGION rather than raising, so callers can treat them as
    having no home-region signal.
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self._table = MappingProxyType(dict(table if table is not None else LOCATION_TO_REGION))

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    def classify(self, city: str) -> str:
        return self._table.get(city, UNKNOWN_REGION)

    def home_region(self, city: str) -> Optional[str]:
        """Region for the city, or None when the city is unknown."""
        region = self.classify(city)
        return None if region == UNKNOWN_REGION else region

    def known_cities(self) -> List[str]:
        return sorted(self._table)

    def __contains__(self, city: str) -> bool:
        return city in self._table


DEFAULT_CLASSIFIER = RegionClassifier()


def get_region(city: str) -> str:
    return DEFAULT_CLASSIFIER.classify(city)


def get_available_locations() -> List[str]:
    """Sorted list of recognized city names, for city pickers."""
    return DEFAULT_CLASSIFIER.known_cities()
