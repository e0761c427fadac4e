"""Butterfly Gallery - geolocated sightings scraped from photo-gallery pages.

Architecture::

    extraction/    Pure title parsing (entities, coordinates, names, places)
    datasources/   Gallery page fetching and HTML parsing
    analysis/      Completeness grades, filtering, summaries, bounds
    collection.py  SightingsState, the in-memory set the site is built from
    store.py       JSON cache with TTL (live → derived)
    renderers/     Pure data → HTML / GeoJSON (table, popups, features)
    flows/         Prefect orchestration (fetch scrapes, build renders site)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → extraction → store (cache) → collection/analysis → renderers → derived/site/

Extension points (see each package's docstring):
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
  - New renderer:      renderers/__init__.py
"""

__version__ = "0.1.0"

from butterfly_gallery.config import Settings
from butterfly_gallery.extraction import extract_observations, parse_coordinates
from butterfly_gallery.schemas import GalleryObservation, GeoCoordinate

__all__ = [
    "GalleryObservation",
    "GeoCoordinate",
    "Settings",
    "__version__",
    "extract_observations",
    "parse_coordinates",
]
