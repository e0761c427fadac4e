"""
Prefect flows for the sightings pipeline.

Flows:
- fetch: Scrape gallery pages into live/observations.json
- build: Render the cached observations into the static site

Usage (local):
    python -m butterfly_gallery.flows.fetch
    python -m butterfly_gallery.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'fetch-sightings/default'
"""
