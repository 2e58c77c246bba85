import logging

import httpx

from .config import settings
from .feed_client import FeedClient
from .language import detect_language
from .models import (
    AnimeTorrent,
    LanguageInfo,
    ProviderSettings,
    SearchOptions,
    SmartSearchOptions,
    ToshoTorrent,
)
from .normalizer import to_anime_torrent
from .query import aid_query, eid_query, plain_query

logger = logging.getLogger(__name__)

PROVIDER_SETTINGS = ProviderSettings(
    can_smart_search=True,
    smart_search_filters=("batch", "episodeNumber", "resolution", "query"),
    supports_adult=False,
    type="main",
)


class ToshoProvider:
    """AnimeTosho torrent provider for the host's search interface."""

    def __init__(
        self,
        client: httpx.Client,
        api_url: str = settings.api_url,
        counter_threshold: int = settings.counter_threshold,
    ):
        self.feed = FeedClient(client, api_url, counter_threshold)

    def get_settings(self) -> ProviderSettings:
        return PROVIDER_SETTINGS

    def search(self, opts: SearchOptions) -> list[AnimeTorrent]:
        """Free-text search. Results are never confirmed matches."""
        logger.info(f"Searching for '{opts.query}'")
        torrents = self.feed.fetch_torrents(plain_query(opts.query))
        return [to_anime_torrent(t) for t in torrents]

    def smart_search(self, opts: SmartSearchOptions) -> list[AnimeTorrent]:
        """Search by AniDB anime ID (batch) or AniDB episode ID."""
        if opts.batch:
            return self._search_batches(opts)
        return self._search_episode(opts)

    def _search_batches(self, opts: SmartSearchOptions) -> list[AnimeTorrent]:
        if not opts.anidb_aid:
            logger.debug(f"No AniDB anime ID for media {opts.media.id}, skipping batch search")
            return []

        torrents = self.search_by_aid(opts.anidb_aid, opts.resolution)

        # Single-file torrents can't be batches, unless there's only one file to release
        if not (opts.media.format == "MOVIE" or opts.media.episode_count == 1):
            torrents = [t for t in torrents if t.num_files > 1]

        results = []
        for torrent in torrents:
            anime_torrent = to_anime_torrent(torrent, confirmed=True)
            anime_torrent.is_batch = True
            results.append(anime_torrent)

        logger.info(f"Found {len(results)} batches for AniDB anime {opts.anidb_aid}")
        return results

    def _search_episode(self, opts: SmartSearchOptions) -> list[AnimeTorrent]:
        if not opts.anidb_eid:
            logger.debug(f"No AniDB episode ID for media {opts.media.id}, skipping episode search")
            return []

        torrents = self.search_by_eid(opts.anidb_eid, opts.resolution)
        return [to_anime_torrent(t, confirmed=True) for t in torrents]

    def get_latest(self) -> list[AnimeTorrent]:
        """Most recent torrents on the feed, unfiltered."""
        torrents = self.feed.fetch_torrents(plain_query(""))
        return [to_anime_torrent(t) for t in torrents]

    def search_by_aid(self, aid: int, resolution: str) -> list[ToshoTorrent]:
        """Fetch torrents for an AniDB anime, largest first."""
        return self.feed.fetch_torrents(aid_query(aid, resolution))

    def search_by_eid(self, eid: int, resolution: str) -> list[ToshoTorrent]:
        """Fetch torrents for an AniDB episode."""
        return self.feed.fetch_torrents(eid_query(eid, resolution))

    def get_torrent_info_hash(self, torrent: AnimeTorrent) -> str:
        return torrent.info_hash or ""

    def get_torrent_magnet_link(self, torrent: AnimeTorrent) -> str:
        return torrent.magnet_link or ""

    @staticmethod
    def detect_language(title: str) -> LanguageInfo:
        return detect_language(title)
