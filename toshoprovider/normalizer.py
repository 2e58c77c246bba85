from whenever import Instant

from .models import AnimeTorrent, ToshoTorrent


def format_timestamp(timestamp: int) -> str:
    """Format seconds since the epoch as an RFC3339 UTC instant."""
    return Instant.from_timestamp(timestamp).format_common_iso()


def to_anime_torrent(entry: ToshoTorrent, confirmed: bool = False) -> AnimeTorrent:
    """Map a feed entry onto the canonical torrent record.

    Resolution, episode number and batch status are left for the host to
    parse from the name. ``confirmed`` should only be set when the entry was
    found through an AniDB identifier.
    """
    return AnimeTorrent(
        name=entry.title,
        date=format_timestamp(entry.timestamp),
        size=entry.total_size,
        formatted_size="",
        seeders=entry.seeders,
        leechers=entry.leechers,
        download_count=entry.torrent_download_count,
        link=entry.link,
        download_url=entry.torrent_url,
        magnet_link=entry.magnet_uri,
        info_hash=entry.info_hash,
        resolution="",
        episode_number=-1,
        is_best_release=False,
        confirmed=confirmed,
    )
