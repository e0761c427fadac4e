"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import json
import sys
from pathlib import Path

from butterfly_gallery import __version__
from butterfly_gallery.analysis import filter_observations, grade_observation
from butterfly_gallery.config import get_settings
from butterfly_gallery.datasources.gallery import GalleryContentError, load_gallery_file
from butterfly_gallery.flows.build import build_all
from butterfly_gallery.flows.fetch import fetch_all
from butterfly_gallery.log import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="butterfly-gallery",
        description="Extract geolocated butterfly sightings from photo-gallery pages",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'extract' command - parse a saved gallery page
    extract_parser = subparsers.add_parser(
        "extract", help="Extract observations from a local HTML file"
    )
    extract_parser.add_argument("file", type=Path, help="Saved gallery HTML page")
    extract_parser.add_argument(
        "--source-url",
        type=str,
        default=None,
        help="URL to record as the source (default: file URI)",
    )
    extract_parser.add_argument(
        "--query",
        type=str,
        default="",
        help="Only print observations matching this species/location text",
    )

    # 'refresh' command - fetch galleries and build site
    refresh_parser = subparsers.add_parser("refresh", help="Fetch galleries and build site")
    refresh_parser.add_argument(
        "--force",
        action="store_true",
        help="Fetch even if cached observations are fresh",
    )
    refresh_parser.add_argument(
        "--query",
        type=str,
        default="",
        help="Only include observations matching this species/location text",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data directory: {settings.data_dir}")
    print(f"Gallery URLs: {len(settings.gallery_urls)}")
    return 0


def cmd_extract(args: argparse.Namespace) -> int:
    """Handle the 'extract' command: print observations from a file as JSON."""
    try:
        observations = load_gallery_file(args.file, args.source_url)
    except FileNotFoundError:
        print(f"Error: file not found: {args.file}", file=sys.stderr)
        return 1
    except GalleryContentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    matching = filter_observations(observations, args.query)
    payload = [
        {**obs.model_dump(mode="json"), "grade": grade_observation(obs).value}
        for obs in matching
    ]
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch galleries then build site."""
    settings = get_settings()
    print(f"Fetching {len(settings.gallery_urls)} gallery page(s)...")
    result = fetch_all(settings.gallery_urls, force=args.force)
    if "error" in result and result["error"] != "all sources failed":
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print("Building site...")
    build_result = build_all(query=args.query)
    if "error" in build_result:
        print(f"Error: {build_result['error']}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.data_dir / "derived" / "site"

    if not site_dir.exists():
        print(
            "No site directory found. Run 'butterfly-gallery refresh' first.", file=sys.stderr
        )
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    commands = {
        "info": cmd_info,
        "extract": cmd_extract,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
