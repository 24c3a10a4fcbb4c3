"""
Tests pour les objets valeur de requete (MovieOptions, MovieRequest, SearchRequest).
"""

import dataclasses

import pytest

from imdb_api.core.value_objects import MovieOptions, MovieRequest, RequestType, SearchRequest


class TestMovieOptions:
    """Tests pour la fusion des options."""

    def test_override_wins_key_by_key(self) -> None:
        base = MovieOptions(api_key="base", timeout=10)
        merged = base.merge(MovieOptions(timeout=30))

        assert merged == MovieOptions(api_key="base", timeout=30)

    def test_merge_without_override_copies(self) -> None:
        base = MovieOptions(api_key="base", timeout=10)
        merged = base.merge()

        assert merged == base
        assert merged is not base

    def test_merge_does_not_modify_base(self) -> None:
        base = MovieOptions(api_key="base")
        base.merge(MovieOptions(api_key="other", timeout=5))

        assert base == MovieOptions(api_key="base")

    def test_options_are_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            MovieOptions(api_key="k").api_key = "x"


class TestRequests:
    """Tests pour MovieRequest et SearchRequest."""

    def test_query_term_prefers_name(self) -> None:
        assert MovieRequest(name="Alien", id="tt0078748").query_term == "Alien"
        assert MovieRequest(id="tt0078748").query_term == "tt0078748"
        assert MovieRequest().query_term is None

    def test_movie_request_defaults_to_full_plot(self) -> None:
        assert MovieRequest(name="Alien").short_plot is False

    def test_search_request_type(self) -> None:
        request = SearchRequest(name="Lost", type=RequestType.SERIES)

        assert request.type.value == "series"
        assert RequestType("game") is RequestType.GAME
