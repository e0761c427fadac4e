"""
Prefect flow for scraping gallery pages into cached observations.

Run locally:
    python -m butterfly_gallery.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m butterfly_gallery.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import requests
from prefect import flow, task

from butterfly_gallery.config import get_settings
from butterfly_gallery.datasources import gallery
from butterfly_gallery.schemas import GalleryObservation
from butterfly_gallery.store import DataStore

store = DataStore(get_settings().data_dir)

OBSERVATIONS_PATH = Path("live/observations.json")


def _retry_on_network_error(_task: Any, _task_run: Any, state: Any) -> bool:
    """Retry only request failures; a non-HTML page won't change on retry."""
    try:
        state.result()
    except requests.RequestException:
        return True
    except gallery.GalleryContentError:
        return False
    return False


@task(
    name="fetch-gallery",
    retries=2,
    retry_delay_seconds=5,
    retry_condition_fn=_retry_on_network_error,
)
def fetch_gallery(url: str) -> list[GalleryObservation]:
    """Fetch one gallery page and extract its observations."""
    return gallery.fetch_gallery_observations(url)


@task(name="save-observations")
def save_observations(
    observations: list[GalleryObservation],
    sources: list[str],
    failed: dict[str, str],
) -> Path:
    """Save combined observations via store."""
    return store.write_observations(
        OBSERVATIONS_PATH,
        observations,
        source="gallery",
        valid_until=datetime.now(UTC) + timedelta(hours=get_settings().cache_hours),
        sources=sources,
        failed=failed,
    )


def _cache_matches(urls: list[str]) -> bool:
    """Cached data is usable only if fresh and scraped from the same pages."""
    if not store.is_fresh(OBSERVATIONS_PATH):
        return False
    raw = store.read_raw(OBSERVATIONS_PATH) or {}
    return bool(raw.get("meta", {}).get("sources") == urls)


@flow(name="fetch-sightings", log_prints=True)
def fetch_all(urls: list[str] | None = None, *, force: bool = False) -> dict[str, Any]:
    """
    Scrape every configured gallery page.

    Skips the fetch when cached observations are still fresh for the same
    set of pages. A page that fails to load is reported and skipped; the
    others are still saved. Nothing is written if every page fails.
    """
    urls = list(urls) if urls is not None else list(get_settings().gallery_urls)
    if not urls:
        print("No gallery URLs configured. Set BUTTERFLY_GALLERY_GALLERY_URLS.")
        return {"error": "no sources"}

    if not force and _cache_matches(urls):
        print("Gallery observations are fresh, skipping fetch.")
        cached = store.read_observations(OBSERVATIONS_PATH) or []
        return {"observations": len(cached), "sources": len(urls), "failed": {}, "cached": True}

    observations: list[GalleryObservation] = []
    failed: dict[str, str] = {}
    for url in urls:
        print(f"Fetching {url}...")
        try:
            page_observations = fetch_gallery(url)
        except (requests.RequestException, gallery.GalleryContentError) as exc:
            print(f"Warning: could not load {url}: {exc}")
            failed[url] = str(exc)
            continue
        print(f"Found {len(page_observations)} observations with coordinates on {url}")
        observations.extend(page_observations)

    if len(failed) == len(urls):
        print("Every gallery failed to load; keeping the previous cache.")
        return {"error": "all sources failed", "failed": failed}

    output_path = save_observations(observations, urls, failed)
    print(f"Saved {len(observations)} observations to {output_path}")

    return {
        "observations": len(observations),
        "sources": len(urls),
        "failed": failed,
        "cached": False,
    }


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
