"""Pydantic models for toshoprovider data structures."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SmartSearchFilter = Literal["batch", "episodeNumber", "resolution", "query", "bestReleases"]
ProviderType = Literal["main", "special"]


class FuzzyDate(BaseModel):
    """Partial calendar date, as reported by AniList."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int | None = None
    day: int | None = None


class Media(BaseModel):
    """The work being searched for. Supplied by the host, never mutated."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    id_mal: int | None = None
    # e.g. "FINISHED", "RELEASING", "NOT_YET_RELEASED"
    status: str | None = None
    # e.g. "TV", "TV_SHORT", "MOVIE", "SPECIAL", "OVA", "ONA", "MUSIC"
    format: str | None = None
    english_title: str | None = None
    romaji_title: str | None = None
    # -1 when unknown
    episode_count: int | None = None
    absolute_season_offset: int | None = None
    synonyms: list[str] = Field(default_factory=list)
    is_adult: bool = False
    start_date: FuzzyDate | None = None


class SearchOptions(BaseModel):
    """Free-text search request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    media: Media
    query: str = ""


class SmartSearchOptions(BaseModel):
    """Identifier-keyed search request.

    ``anidb_aid`` is used for batch searches and ``anidb_eid`` for single
    episode searches. Zero means the identifier is unknown.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    media: Media
    query: str = ""
    batch: bool = False
    episode_number: int = Field(default=0, alias="episodeNumber")
    resolution: str = ""
    anidb_aid: int = Field(default=0, alias="anidbAID")
    anidb_eid: int = Field(default=0, alias="anidbEID")
    best_releases: bool = Field(default=False, alias="bestReleases")


class ToshoTorrent(BaseModel):
    """A single entry of the AnimeTosho JSON feed."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    link: str
    timestamp: int
    status: str | None = None
    tosho_id: int | None = None
    nyaa_id: int | None = None
    anidex_id: int | None = None
    torrent_url: str | None = None
    info_hash: str | None = None
    info_hash_v2: str | None = None
    magnet_uri: str | None = None
    seeders: int = 0
    leechers: int = 0
    torrent_download_count: int = 0
    nzb_url: str | None = None
    total_size: int = 0
    num_files: int = 0
    anidb_aid: int | None = None
    anidb_eid: int | None = None
    anidb_fid: int | None = None
    article_url: str | None = None
    article_title: str | None = None
    website_url: str | None = None

    @field_validator(
        "seeders",
        "leechers",
        "torrent_download_count",
        "total_size",
        "num_files",
        mode="before",
    )
    @classmethod
    def _null_as_zero(cls, value):
        # The feed reports null counters for torrents the tracker hasn't scraped
        return 0 if value is None else value


class AnimeTorrent(BaseModel):
    """Canonical torrent record handed back to the host.

    Sentinel values ask the host to work a field out from the name itself:
    an empty ``resolution``, ``is_batch`` of ``None`` and an
    ``episode_number`` of -1.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    # RFC3339, e.g. "2006-01-02T15:04:05Z"
    date: str
    size: int
    formatted_size: str = ""
    seeders: int
    leechers: int
    download_count: int
    link: str
    download_url: str | None = None
    magnet_link: str | None = None
    info_hash: str | None = None
    resolution: str = ""
    is_batch: bool | None = None
    episode_number: int = -1
    release_group: str | None = None
    is_best_release: bool = False
    confirmed: bool = False


class ProviderSettings(BaseModel):
    """Capabilities advertised to the host."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    can_smart_search: bool
    smart_search_filters: tuple[SmartSearchFilter, ...]
    supports_adult: bool
    type: ProviderType


class LanguageInfo(BaseModel):
    """Audio language classification guessed from a torrent title."""

    model_config = ConfigDict(frozen=True)

    is_dub: bool
    is_sub: bool
    is_multi: bool
