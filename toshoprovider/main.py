import argparse
import json
import logging
import sys

from .config import settings
from .exceptions import FeedError
from .feed_client import create_client
from .models import AnimeTorrent, Media, SearchOptions, SmartSearchOptions
from .provider import ToshoProvider

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search the AnimeTosho feed and print normalized torrents"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=settings.api_url,
        help=f"AnimeTosho feed URL (default: {settings.api_url})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Free-text search")
    search_parser.add_argument("query", type=str, help="Search terms")

    subparsers.add_parser("latest", help="List the most recent torrents")

    smart_parser = subparsers.add_parser(
        "smart", help="Search by AniDB anime or episode ID"
    )
    smart_parser.add_argument("--aid", type=int, default=0, help="AniDB anime ID")
    smart_parser.add_argument("--eid", type=int, default=0, help="AniDB episode ID")
    smart_parser.add_argument(
        "--batch", action="store_true", help="Search for batches (requires --aid)"
    )
    smart_parser.add_argument(
        "--resolution", type=str, default="", help="Resolution, e.g. 1080p"
    )
    smart_parser.add_argument(
        "--format", type=str, default="TV", help="Media format (default: TV)"
    )
    smart_parser.add_argument(
        "--episode-count",
        type=int,
        default=-1,
        help="Total episodes of the media (default: -1, unknown)",
    )

    return parser


def run(args: argparse.Namespace, provider: ToshoProvider) -> list[AnimeTorrent]:
    """Dispatch a parsed command to the provider."""
    if args.command == "latest":
        return provider.get_latest()

    if args.command == "search":
        media = Media(id=0)
        return provider.search(SearchOptions(media=media, query=args.query))

    media = Media(id=0, format=args.format, episode_count=args.episode_count)
    opts = SmartSearchOptions(
        media=media,
        batch=args.batch,
        resolution=args.resolution,
        anidb_aid=args.aid,
        anidb_eid=args.eid,
    )
    return provider.smart_search(opts)


def main() -> None:
    """Main entry point for the command line."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    client = create_client()
    try:
        provider = ToshoProvider(client, args.api_url)
        torrents = run(args, provider)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except FeedError as e:
        logger.error(f"Search failed: {e}", exc_info=True)
        sys.exit(1)
    finally:
        client.close()

    json.dump(
        [t.model_dump(mode="json", by_alias=True) for t in torrents],
        sys.stdout,
        indent=2,
        ensure_ascii=False,
    )
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
