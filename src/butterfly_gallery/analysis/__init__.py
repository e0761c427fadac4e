"""Derived views over extracted observations.

Dependency rule: analysis/ imports from ``schemas`` and ``extraction``
only. It never fetches data or produces HTML.

Modules:
  - quality: data-completeness grade for a single record
  - summary: filtering, counts, and map bounds for a set of records

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function over
   ``list[GalleryObservation]``.
2. No I/O, no HTTP, no Prefect decorators.
3. Re-export here and add tests in ``tests/test_{name}.py``.
"""

from butterfly_gallery.analysis.quality import grade_observation
from butterfly_gallery.analysis.summary import (
    SightingsSummary,
    bounding_box,
    filter_observations,
    summarize,
)

__all__ = [
    "SightingsSummary",
    "bounding_box",
    "filter_observations",
    "grade_observation",
    "summarize",
]
