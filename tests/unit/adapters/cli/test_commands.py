"""
Tests pour les commandes CLI get, search et episodes.

Le container est remplace par un mock : aucune requete HTTP n'est faite.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from imdb_api.core.entities import Episode, Movie, SearchResult, SearchResultPage, TVShow
from imdb_api.core.errors import UpstreamError
from imdb_api.core.value_objects import MovieRequest, RequestType, SearchRequest
from imdb_api.main import app

runner = CliRunner()


@pytest.fixture
def mock_client() -> MagicMock:
    """Client OMDb mocke, methodes async."""
    client = MagicMock()
    client.get = AsyncMock()
    client.search = AsyncMock()
    client.episodes = AsyncMock()
    return client


@pytest.fixture
def mock_container(mock_client: MagicMock):
    """Remplace le Container utilise par les commandes."""
    with patch("imdb_api.adapters.cli.helpers.Container") as MockContainer:
        container = MagicMock()
        container.client.return_value = mock_client
        container.transport.return_value.close = AsyncMock()
        MockContainer.return_value = container
        yield container


class TestGetCommand:
    """Tests pour la commande get."""

    def test_get_by_name_prints_record(self, mock_container, mock_client) -> None:
        mock_client.get.return_value = Movie(
            imdb_id="tt0078748", title="Alien", type="movie", year=1979, year_data="1979"
        )

        result = runner.invoke(app, ["get", "Alien", "--year", "1979"])

        assert result.exit_code == 0
        assert "Alien" in result.output
        mock_client.get.assert_awaited_once_with(MovieRequest(name="Alien", year=1979))
        mock_container.transport.return_value.close.assert_awaited_once()

    def test_get_by_id(self, mock_container, mock_client) -> None:
        mock_client.get.return_value = Movie(imdb_id="tt0078748", title="Alien", type="movie")

        result = runner.invoke(app, ["get", "--id", "tt0078748", "--short-plot"])

        assert result.exit_code == 0
        mock_client.get.assert_awaited_once_with(
            MovieRequest(id="tt0078748", short_plot=True)
        )

    def test_upstream_error_exits_with_code_1(self, mock_container, mock_client) -> None:
        mock_client.get.side_effect = UpstreamError("Movie not found!: Nope")

        result = runner.invoke(app, ["get", "Nope"])

        assert result.exit_code == 1
        assert "Movie not found!" in result.output
        mock_container.transport.return_value.close.assert_awaited_once()


class TestSearchCommand:
    """Tests pour la commande search."""

    def test_search_prints_table(self, mock_container, mock_client) -> None:
        mock_client.search.return_value = SearchResultPage(
            results=(SearchResult(title="Lost", year=2004, imdb_id="tt0411008", type="series"),),
            total_results=1,
        )

        result = runner.invoke(app, ["search", "Lost", "--type", "series", "--page", "2"])

        assert result.exit_code == 0
        assert "tt0411008" in result.output
        mock_client.search.assert_awaited_once_with(
            SearchRequest(name="Lost", type=RequestType.SERIES), page=2
        )

    def test_search_without_results(self, mock_container, mock_client) -> None:
        mock_client.search.return_value = SearchResultPage()

        result = runner.invoke(app, ["search", "zzzz"])

        assert result.exit_code == 0
        assert "Aucun resultat" in result.output


class TestEpisodesCommand:
    """Tests pour la commande episodes."""

    def test_episodes_lists_every_episode(self, mock_container, mock_client) -> None:
        show = TVShow(imdb_id="tt0944947", title="Game of Thrones", type="series", total_seasons=1)
        mock_client.get.return_value = show
        mock_client.episodes.return_value = (
            Episode(imdb_id="tt1480055", title="Winter Is Coming", season=1, episode_number=1),
            Episode(imdb_id="tt1668746", title="The Kingsroad", season=1, episode_number=2),
        )

        result = runner.invoke(app, ["episodes", "tt0944947"])

        assert result.exit_code == 0
        assert "tt1668746" in result.output
        mock_client.episodes.assert_awaited_once_with(show)

    def test_episodes_of_a_movie_fails(self, mock_container, mock_client) -> None:
        mock_client.get.return_value = Movie(imdb_id="tt0078748", title="Alien", type="movie")

        result = runner.invoke(app, ["episodes", "tt0078748"])

        assert result.exit_code == 1
        mock_client.episodes.assert_not_called()

    def test_episodes_by_id_sends_id(self, mock_container, mock_client) -> None:
        mock_client.get.return_value = TVShow(imdb_id="tt0944947", type="series")
        mock_client.episodes.return_value = ()

        result = runner.invoke(app, ["episodes", "tt0944947"])

        assert result.exit_code == 0
        mock_client.get.assert_awaited_once_with(MovieRequest(id="tt0944947"))

    def test_episodes_by_name_sends_title(self, mock_container, mock_client) -> None:
        show = TVShow(imdb_id="tt0944947", title="Game of Thrones", type="series", total_seasons=1)
        mock_client.get.return_value = show
        mock_client.episodes.return_value = (
            Episode(imdb_id="tt1480055", title="Winter Is Coming", season=1, episode_number=1),
        )

        result = runner.invoke(app, ["episodes", "Game of Thrones"])

        assert result.exit_code == 0
        assert "tt1480055" in result.output
        mock_client.get.assert_awaited_once_with(MovieRequest(name="Game of Thrones"))
