import pytest

from wego.search.aggregator import NO_DESCRIPTION, ResultAggregator, build_remote_records
from wego.search.models import Destination, FetchResult, SourceRecord
from wego.search.text import truncate_description

PLACEHOLDER = "https://img.example/placeholder.jpg"


def _local(n: int) -> list[Destination]:
    return [
        Destination(name=f"Local {i}", country="Testland", img=f"https://img.example/local-{i}.jpg", desc=f"Local {i}.")
        for i in range(n)
    ]


def _remote(n: int) -> list[SourceRecord]:
    return [
        SourceRecord(title="Remote", image_url=f"https://img.example/remote-{i}.jpg", description=f"Remote {i}.")
        for i in range(n)
    ]


@pytest.mark.parametrize(("m", "r"), [(0, 0), (0, 3), (2, 3), (1, 5), (3, 4), (6, 2), (8, 0), (0, 10)])
def test_merge_count_and_order(m: int, r: int) -> None:
    local = _local(m)
    records = ResultAggregator().merge(local, _remote(r), "keyword")

    assert len(records) == min(m + r, 6)
    local_count = min(m, 6)
    assert [rec.title for rec in records[:local_count]] == [d.name for d in local[:local_count]]
    remote_urls = [rec.image_url for rec in records[local_count:]]
    assert remote_urls == [f"https://img.example/remote-{i}.jpg" for i in range(len(remote_urls))]


def test_merge_respects_custom_cap() -> None:
    records = ResultAggregator().merge(_local(2), _remote(2), "k", max_results=3)
    assert len(records) == 3

    assert ResultAggregator().merge(_local(2), _remote(2), "k", max_results=0) == []


def test_local_record_fields_and_detail_link() -> None:
    dest = Destination(name="New York", country="United States", img="https://img.example/ny.jpg", desc="z" * 200)
    record = ResultAggregator().merge([dest], [], "new york")[0]

    assert record.title == "New York"
    assert record.image_url == "https://img.example/ny.jpg"
    assert record.description == "z" * 150 + "..."
    assert record.detail_link == "details.html?destination=New%20York"


def test_remote_record_gets_placeholder_and_default_text() -> None:
    aggregator = ResultAggregator(placeholder_image=PLACEHOLDER, details_url_template="/d/{name}")
    record = aggregator.merge([], [SourceRecord(title="", image_url=None)], "Oslo")[0]

    assert record.image_url == PLACEHOLDER
    assert record.title == "Oslo"
    assert record.description == NO_DESCRIPTION
    assert record.detail_link == "/d/Oslo"


def test_build_remote_records_pairs_photos_with_description() -> None:
    images = FetchResult(
        "images",
        "ok",
        records=[
            SourceRecord(title="rome", image_url="https://img.example/1.jpg", description="alt 1"),
            SourceRecord(title="rome", image_url="https://img.example/2.jpg", description="alt 2"),
        ],
    )
    description = FetchResult(
        "descriptions",
        "ok",
        records=[SourceRecord(title="Rome", description="Eternal city.")],
    )

    records = build_remote_records(images, description, "rome", PLACEHOLDER)

    assert [r.image_url for r in records] == ["https://img.example/1.jpg", "https://img.example/2.jpg"]
    assert all(r.title == "Rome" for r in records)
    assert all(r.description == "Eternal city." for r in records)


def test_build_remote_records_uses_alt_text_without_description() -> None:
    images = FetchResult("images", "ok", records=[SourceRecord(title="rome", image_url="u", description="alt")])
    description = FetchResult("descriptions", "transport_error")

    records = build_remote_records(images, description, "rome", PLACEHOLDER)

    assert records[0].title == "rome"
    assert records[0].description == "alt"


def test_build_remote_records_placeholder_when_only_description() -> None:
    images = FetchResult("images", "server_error")
    description = FetchResult("descriptions", "ok", records=[SourceRecord(title="Rome", description="Eternal city.")])

    records = build_remote_records(images, description, "rome", PLACEHOLDER)

    assert len(records) == 1
    assert records[0].image_url == PLACEHOLDER
    assert records[0].description == "Eternal city."


def test_build_remote_records_never_invents() -> None:
    images = FetchResult("images", "empty")
    description = FetchResult("descriptions", "unavailable")

    assert build_remote_records(images, description, "rome", PLACEHOLDER) == []


def test_remote_description_is_shown_as_cached() -> None:
    cached = truncate_description("a" * 149 + " " + "b" * 50)
    assert cached == "a" * 149 + "..."

    record = ResultAggregator().merge([], [SourceRecord(title="Lima", description=cached)], "lima")[0]

    assert record.description == cached


def test_build_remote_records_truncates_raw_alt_text() -> None:
    images = FetchResult("images", "ok", records=[SourceRecord(title="rome", image_url="u", description="x" * 400)])
    description = FetchResult("descriptions", "unavailable")

    records = build_remote_records(images, description, "rome", PLACEHOLDER, max_chars=20)

    assert records[0].description == "x" * 20 + "..."
