import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import settings
from .exceptions import FeedDecodeError, FeedTransportError
from .models import ToshoTorrent

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[ToshoTorrent])


def create_client() -> httpx.Client:
    """Create an HTTP client configured from settings."""
    return httpx.Client(
        timeout=settings.request_timeout_seconds,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )


def correct_counters(
    entry: ToshoTorrent, threshold: int = settings.counter_threshold
) -> ToshoTorrent:
    """Reset seeder/leecher counts the feed is known to misreport.

    AnimeTosho sometimes reports counts in the tens of thousands that are
    artifacts rather than real swarms. Each counter is checked on its own.
    """
    updates = {}
    if entry.seeders > threshold:
        updates["seeders"] = 0
    if entry.leechers > threshold:
        updates["leechers"] = 0

    if not updates:
        return entry

    logger.debug(f"Clamping counters {updates} for torrent {entry.id}")
    return entry.model_copy(update=updates)


class FeedClient:
    def __init__(
        self,
        client: httpx.Client,
        api_url: str = settings.api_url,
        counter_threshold: int = settings.counter_threshold,
    ):
        self.client = client
        self.api_url = api_url
        self.counter_threshold = counter_threshold

    def fetch_torrents(self, params: dict[str, str]) -> list[ToshoTorrent]:
        """Fetch feed entries matching the query parameters.

        Makes exactly one request. Counter anomalies are corrected on every
        returned entry.
        """
        logger.debug(f"Fetching {self.api_url} with {params}")

        try:
            response = self.client.get(self.api_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Feed request failed with status {status}: {e}")
            raise FeedTransportError(
                f"Failed to fetch torrents, {status} {e.response.reason_phrase}",
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Feed request failed: {e}")
            raise FeedTransportError(f"Failed to fetch torrents, {e}") from e

        try:
            entries = _ENTRIES.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Failed to decode feed response: {e}")
            raise FeedDecodeError(f"Error decoding torrents: {e}") from e

        logger.info(f"Fetched {len(entries)} torrents from feed")
        return [correct_counters(entry, self.counter_threshold) for entry in entries]
