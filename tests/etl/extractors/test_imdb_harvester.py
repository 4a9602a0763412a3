"""Unit tests for chart link harvesting."""

import pytest

from imdbchart.etl.extractors.imdb.client import InvalidChartURLError
from imdbchart.etl.extractors.imdb.harvester import ChartLinkHarvester
from imdbchart.etl.types import LinkEntry
from tests.helpers import CHART_URL, build_chart_html, parse


@pytest.fixture
def harvester() -> ChartLinkHarvester:
    """Harvester de test."""
    return ChartLinkHarvester()


class TestHarvest:
    @staticmethod
    def test_document_order_and_positions(harvester: ChartLinkHarvester) -> None:
        page = parse(
            build_chart_html(
                [
                    ("/title/tt0111161/", "The Shawshank Redemption"),
                    ("/title/tt0068646/", "The Godfather"),
                    ("/title/tt0468569/", "The Dark Knight"),
                ]
            )
        )

        entries = harvester.harvest(page, CHART_URL)

        assert entries == [
            LinkEntry(0, "https://www.imdb.com/title/tt0111161/", "The Shawshank Redemption"),
            LinkEntry(1, "https://www.imdb.com/title/tt0068646/", "The Godfather"),
            LinkEntry(2, "https://www.imdb.com/title/tt0468569/", "The Dark Knight"),
        ]

    @staticmethod
    def test_empty_chart(harvester: ChartLinkHarvester) -> None:
        page = parse("<html><body><table></table></body></html>")
        assert harvester.harvest(page, CHART_URL) == []

    @staticmethod
    def test_resolves_against_scheme_and_host_only(harvester: ChartLinkHarvester) -> None:
        page = parse(build_chart_html([("/title/tt0000001/", "Film")]))
        entries = harvester.harvest(page, "http://m.imdb.com/chart/moviemeter?ref_=nv")
        assert entries[0].url == "http://m.imdb.com/title/tt0000001/"

    @staticmethod
    def test_query_string_kept(harvester: ChartLinkHarvester) -> None:
        page = parse(build_chart_html([("/title/tt0000001/?ref_=chttp_t_1", "Film")]))
        entries = harvester.harvest(page, CHART_URL)
        assert entries[0].url == "https://www.imdb.com/title/tt0000001/?ref_=chttp_t_1"

    @staticmethod
    def test_duplicate_names_kept(harvester: ChartLinkHarvester) -> None:
        page = parse(
            build_chart_html([("/title/tt1/", "Solaris"), ("/title/tt2/", "Solaris")])
        )
        entries = harvester.harvest(page, CHART_URL)
        assert [e.position for e in entries] == [0, 1]
        assert [e.display_name for e in entries] == ["Solaris", "Solaris"]

    @staticmethod
    def test_anchor_without_href_skipped(harvester: ChartLinkHarvester) -> None:
        html = (
            '<table><tr><td class="titleColumn"><a>Broken</a></td></tr>'
            '<tr><td class="titleColumn"><a href="/title/tt9/">Ok</a></td></tr></table>'
        )
        entries = harvester.harvest(parse(html), CHART_URL)
        assert entries == [LinkEntry(0, "https://www.imdb.com/title/tt9/", "Ok")]

    @staticmethod
    def test_malformed_href_skipped(harvester: ChartLinkHarvester) -> None:
        page = parse(
            build_chart_html([("/title/tt1/", "Heat"), ("//[bad", "Broken"), ("/title/tt3/", "Ran")])
        )

        entries = harvester.harvest(page, CHART_URL)

        assert entries == [
            LinkEntry(0, "https://www.imdb.com/title/tt1/", "Heat"),
            LinkEntry(1, "https://www.imdb.com/title/tt3/", "Ran"),
        ]

    @staticmethod
    def test_ignores_links_outside_title_column(harvester: ChartLinkHarvester) -> None:
        html = (
            '<a href="/news/">News</a>'
            '<table><tr><td class="posterColumn"><a href="/title/tt1/">poster</a></td>'
            '<td class="titleColumn"><a href="/title/tt1/">Heat</a></td></tr></table>'
        )
        entries = harvester.harvest(parse(html), CHART_URL)
        assert [e.display_name for e in entries] == ["Heat"]

    @staticmethod
    def test_invalid_seed_url(harvester: ChartLinkHarvester) -> None:
        page = parse(build_chart_html([("/title/tt1/", "Heat")]))
        with pytest.raises(InvalidChartURLError):
            harvester.harvest(page, "not a url")
