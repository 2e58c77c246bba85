from unittest.mock import Mock

import httpx
import pytest

from toshoprovider.feed_client import FeedClient
from toshoprovider.models import Media, ToshoTorrent
from toshoprovider.provider import ToshoProvider

API_URL = "https://feed.animetosho.org/json"


def make_entry(**overrides) -> dict:
    """Build a raw feed entry as returned by the JSON API."""
    entry = {
        "id": 608123,
        "title": "[SubsPlease] Frieren - 01 (1080p) [F02B9CEE].mkv",
        "link": "https://animetosho.org/view/subsplease-frieren-01-1080p.n1728123",
        "timestamp": 1136214245,
        "status": "complete",
        "nyaa_id": 1728123,
        "torrent_url": "https://animetosho.org/storage/torrent/abc/frieren-01.torrent",
        "info_hash": "4b0ea5cfa5cbbb5ae6d2f0a1e0d5f7c5fbd8e5a1",
        "info_hash_v2": None,
        "magnet_uri": "magnet:?xt=urn:btih:4b0ea5cfa5cbbb5ae6d2f0a1e0d5f7c5fbd8e5a1",
        "seeders": 120,
        "leechers": 8,
        "torrent_download_count": 4500,
        "tracker_updated": 1136300000,
        "total_size": 1445068800,
        "num_files": 1,
        "anidb_aid": 17617,
        "anidb_eid": 277518,
        "anidb_fid": 3312345,
        "article_url": None,
        "article_title": None,
        "website_url": "https://subsplease.org",
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def entry_factory():
    """Factory for raw feed entry dicts."""
    return make_entry


@pytest.fixture
def tosho_torrent():
    """A parsed feed entry."""
    return ToshoTorrent(**make_entry())


@pytest.fixture
def tv_media():
    """A 28-episode TV series."""
    return Media(id=154587, id_mal=52991, format="TV", episode_count=28, romaji_title="Sousou no Frieren")


@pytest.fixture
def movie_media():
    """A movie with a single release."""
    return Media(id=21519, format="MOVIE", episode_count=1, romaji_title="Kimi no Na wa.")


@pytest.fixture
def mock_client():
    """Create a mock HTTP client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def feed_client(mock_client):
    """Create feed client instance."""
    return FeedClient(mock_client, api_url=API_URL)


@pytest.fixture
def provider(mock_client):
    """Create provider instance."""
    return ToshoProvider(mock_client, api_url=API_URL)


@pytest.fixture
def json_response():
    """Factory for mock responses whose body decodes to the given payload."""

    def _make(payload):
        response = Mock()
        response.json.return_value = payload
        response.raise_for_status = Mock()
        return response

    return _make
