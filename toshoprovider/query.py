"""Builders for AnimeTosho feed query parameters."""

# Resolutions the feed titles commonly carry
KNOWN_RESOLUTIONS: tuple[str, ...] = ("480", "540", "720", "1080")


def format_quality_query(resolution: str) -> str:
    """Build a boolean query fragment matching only the wanted resolution.

    "1080p" becomes ``("1080" !"480" !"540" !"720")``. The fragment needs
    ``qx=1`` on the request for the feed to honour the syntax. An empty
    resolution yields an empty fragment.
    """
    if resolution == "":
        return ""

    resolution = resolution.removesuffix("p")

    excluded = [f'!"{r}"' for r in KNOWN_RESOLUTIONS if r != resolution]
    return f'("{resolution}" {" ".join(excluded)})'


def plain_query(query: str) -> dict[str, str]:
    """Free-text query restricted to torrent entries."""
    return {"q": query, "only_tor": "1"}


def aid_query(aid: int, resolution: str) -> dict[str, str]:
    """Largest-first query scoped to an AniDB anime, used for batches."""
    return {
        "qx": "1",
        "order": "size-d",
        "aid": str(aid),
        "q": format_quality_query(resolution),
    }


def eid_query(eid: int, resolution: str) -> dict[str, str]:
    """Query scoped to a single AniDB episode."""
    return {
        "qx": "1",
        "eid": str(eid),
        "q": format_quality_query(resolution),
    }
