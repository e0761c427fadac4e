"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # Fetching, content checks, parsing
    └── {feature}.py      # Source -> GalleryObservation records

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``gallery/`` for the HTML gallery source.

2. Fetch through the shared session::

       from butterfly_gallery.services.http import session

       def fetch_something(url: str) -> str:
           resp = session.get(url)
           resp.raise_for_status()
           return resp.text

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into ``flows/fetch.py`` as a ``@task`` and add tests in
   ``tests/test_{name}.py``.
"""
