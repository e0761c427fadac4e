"""Cached sightings on disk with freshness metadata.

Two tiers:
  - live/: extracted observations per fetch, short TTL (hours)
  - derived/: rendered site output, always rebuilt

Every JSON file is wrapped in a metadata envelope (``source``,
``fetched_at``, optional ``valid_until``) so the fetch flow can skip
re-scraping galleries while the cached copy is still fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any

from pydantic import TypeAdapter

from butterfly_gallery.schemas import GalleryObservation

_OBSERVATIONS = TypeAdapter(list[GalleryObservation])


class DataStore:
    """Read/write of enveloped JSON files under a base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any | None:
        """Return the ``data`` payload, or None if the file doesn't exist."""
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data)."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open(encoding="utf-8") as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write ``data`` wrapped in a metadata envelope.

        Args:
            path: Relative path under the base directory (e.g. ``live/observations.json``).
            data: JSON-serializable payload stored under ``data``.
            source: Where the data came from.
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata fields (source URLs, counts, ...).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        with full.open("w", encoding="utf-8") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2, ensure_ascii=False)
        return full

    def write_observations(
        self,
        path: Path,
        observations: list[GalleryObservation],
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Serialize observations and write them with a metadata envelope."""
        payload = _OBSERVATIONS.dump_python(observations, mode="json")
        return self.write(path, payload, source=source, valid_until=valid_until, **params)

    def read_observations(self, path: Path) -> list[GalleryObservation] | None:
        """Load observations written by ``write_observations``; None if missing."""
        data = self.read(path)
        if data is None:
            return None
        return _OBSERVATIONS.validate_python(data)

    def is_fresh(self, path: Path) -> bool:
        """True if the file exists and its ``valid_until`` is in the future."""
        envelope = self.read_raw(path)
        if envelope is None:
            return False

        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
