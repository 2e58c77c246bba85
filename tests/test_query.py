"""Tests for feed query construction."""

import pytest

from toshoprovider.query import (
    KNOWN_RESOLUTIONS,
    aid_query,
    eid_query,
    format_quality_query,
    plain_query,
)


def test_format_quality_query_empty():
    """No resolution means no filtering."""
    assert format_quality_query("") == ""


def test_format_quality_query_1080():
    assert format_quality_query("1080") == '("1080" !"480" !"540" !"720")'


@pytest.mark.parametrize("resolution", ["480", "540", "720", "1080"])
def test_format_quality_query_strips_p_suffix(resolution):
    assert format_quality_query(f"{resolution}p") == format_quality_query(resolution)


@pytest.mark.parametrize("resolution", KNOWN_RESOLUTIONS)
def test_format_quality_query_excludes_only_others(resolution):
    fragment = format_quality_query(resolution)

    assert fragment.startswith(f'("{resolution}" ')
    assert f'!"{resolution}"' not in fragment
    for other in KNOWN_RESOLUTIONS:
        if other != resolution:
            assert f'!"{other}"' in fragment


def test_format_quality_query_unknown_resolution():
    """Unknown resolutions are still included, with every known one excluded."""
    assert format_quality_query("2160p") == '("2160" !"480" !"540" !"720" !"1080")'


def test_plain_query():
    assert plain_query("frieren") == {"q": "frieren", "only_tor": "1"}
    assert plain_query("") == {"q": "", "only_tor": "1"}


def test_aid_query():
    assert aid_query(17617, "720p") == {
        "qx": "1",
        "order": "size-d",
        "aid": "17617",
        "q": '("720" !"480" !"540" !"1080")',
    }


def test_eid_query_without_resolution():
    assert eid_query(277518, "") == {"qx": "1", "eid": "277518", "q": ""}
