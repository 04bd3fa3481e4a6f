"""Static city -> region table for Nepali cities served by test centers."""

from types import MappingProxyType

LOCATION_TO_REGION = MappingProxyType({
    # Central
    "Kathmandu": "central", "Lalitpur": "central", "Bhaktapur": "central",
    "Bharatpur": "central", "Chitwan": "central", "Hetauda": "central",
    "Makwanpur": "central", "Dhulikhel": "central", "Kavrepalanchok": "central",
    "Banepa": "central", "Birgunj": "central", "Parsa": "central",
    "Gorkha": "central", "Sindhupalchok": "central", "Dhading": "central",
    # Eastern
    "Dharan": "eastern", "Sunsari": "eastern", "Biratnagar": "eastern",
    "Morang": "eastern", "Birtamode": "eastern", "Bhadrapur": "eastern",
    "Damak": "eastern", "Jhapa": "eastern", "Itahari": "eastern",
    "Dhankuta": "eastern", "Ilam": "eastern", "Gaighat": "eastern",
    "Udayapur": "eastern",
    # Western
    "Pokhara": "western", "Kaski": "western", "Butwal": "western",
    "Bhairahawa": "western", "Rupandehi": "western", "Tansen": "western",
    "Palpa": "western", "Syangja": "western", "Nawalparasi": "western",
})
