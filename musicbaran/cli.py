#!/usr/bin/env python3
"""Command-line interface for finding an artist's missing downloads.

Scans the local music library for the artist, scrapes the artist page on
the site and writes the download URLs of everything not owned yet to
``<artist>.json``.
"""

import argparse
import asyncio
import logging
import os
import sys

from musicbaran import __version__
from musicbaran.core import DownloadFinder
from musicbaran.dataclasses import DEFAULT_MUSIC_DIR, DownloadReport, ScraperConfig


def setup_logging(debug: bool = False):
    """Configure logging for CLI."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Find download URLs for albums and tracks missing from the local library',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s the-weeknd
  %(prog)s the-weeknd --music-dir ~/Music
  %(prog)s the-weeknd -j 8 --timeout 60000 --debug

Environment Variables:
  MUSICBARAN_MUSIC_DIR  Default music library directory
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'artist_name',
        metavar='ARTIST_NAME',
        help='Artist name as used in the site URL'
    )

    parser.add_argument(
        '-m', '--music-dir',
        default=os.environ.get('MUSICBARAN_MUSIC_DIR', DEFAULT_MUSIC_DIR),
        help='Music library root directory (default: %(default)s)'
    )

    parser.add_argument(
        '-o', '--output-dir',
        default='.',
        help='Directory for the result file (default: current directory)'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    # Browser options
    browser_group = parser.add_argument_group('browser options')
    browser_group.add_argument(
        '-j', '--concurrency',
        type=int,
        default=4,
        help='Detail pages loaded in parallel (default: %(default)s)'
    )
    browser_group.add_argument(
        '--timeout',
        type=int,
        default=30000,
        help='Navigation timeout in milliseconds (default: %(default)s)'
    )
    browser_group.add_argument(
        '--retries',
        type=int,
        default=3,
        help='Attempts per page before giving up (default: %(default)s)'
    )
    browser_group.add_argument(
        '--base-url',
        default=ScraperConfig.base_url,
        help='Site base URL (default: %(default)s)'
    )
    browser_group.add_argument(
        '--no-headless',
        dest='headless',
        action='store_false',
        help='Show the browser window'
    )
    browser_group.add_argument(
        '--no-resource-blocking',
        dest='resource_blocking',
        action='store_false',
        help='Load images, fonts and stylesheets'
    )

    return parser.parse_args(argv)


def create_config_from_args(args) -> ScraperConfig:
    """Create ScraperConfig from command-line arguments."""
    return ScraperConfig(
        base_url=args.base_url,
        music_dir=os.path.expanduser(args.music_dir),
        output_dir=args.output_dir,
        max_concurrency=max(1, args.concurrency),
        page_timeout=args.timeout,
        max_retries=max(1, args.retries),
        headless=args.headless,
        resource_blocking_enabled=args.resource_blocking,
    )


def print_summary(report: DownloadReport):
    """Print per-kind counts of found, owned and missing downloads."""
    labels = {
        'found': 'to download',
        'already_owned': 'already owned',
        'no_candidates': 'no download link',
        'low_bitrate_only': 'only 128kbps',
    }
    print(f"\n{'='*60}")
    print("Summary:")
    for key, per_status in report.counts().items():
        total = sum(per_status.values())
        details = ', '.join(f"{count} {labels[status]}" for status, count in sorted(per_status.items()))
        print(f"  {key.capitalize()}: {total}" + (f" ({details})" if details else ""))
    print(f"{'='*60}")


def main(argv=None):
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    config = create_config_from_args(args)

    try:
        finder = DownloadFinder(args.artist_name, config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Library errors abort before the browser is started
    print(f"Scanning local library: {config.music_dir}")
    try:
        snapshot = finder.scan_library()
    except OSError as e:
        print(f"Error: cannot read music library: {e}", file=sys.stderr)
        return 1

    print(f"Found {len(snapshot.albums)} album(s) and {len(snapshot.tracks)} track(s) locally")

    try:
        report = asyncio.run(finder.find_downloads(snapshot))
        output_path = finder.write_report(report)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Fatal error: {e}")
        if args.debug:
            raise
        return 1

    print_summary(report)
    print(f"Results written to {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
