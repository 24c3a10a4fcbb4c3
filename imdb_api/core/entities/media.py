"""
Media metadata records.

Records built from OMDb responses. Movie holds the attributes shared by
every variant; Episode, TVShow and Game extend it, and each class carries
a MediaKind tag so callers can branch with a match statement instead of
isinstance checks.

Records are created once by the builders in adapters/api/builders.py and
are not mutated afterwards. The only exception is the episode cache of a
TVShow, which is filled at most once.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Awaitable, Callable, ClassVar, Optional

from imdb_api.core.errors import ImdbError
from imdb_api.core.value_objects import MovieOptions, SearchRequest

IMDB_TITLE_URL = "https://www.imdb.com/title/"


class MediaKind(Enum):
    """Variant tag of a record."""

    MOVIE = "movie"
    EPISODE = "episode"
    TVSHOW = "series"
    GAME = "game"


@dataclass(frozen=True)
class Rating:
    """
    Rating for a piece of media.

    Attributes:
        source: Site the rating came from
        value: Rating as reported by that site (e.g. "8.1/10", "91%")
    """

    source: str
    value: str


@dataclass(frozen=True)
class Movie:
    """
    A movie as returned by Client.get or the module-level get.

    Not meant to be created directly, the builders produce it from an
    OMDb payload. Text fields are kept as OMDb sends them ("N/A" included).

    Attributes:
        imdb_id: IMDb id of the movie (e.g. "tt0090190")
        title: English title
        year: Release year, None when OMDb reports a year range
        type: Type of media as reported by OMDb
        genres: Comma separated genres
        languages: Languages the movie was released in
        country: Countries the movie was released in
        votes: Votes received on IMDb, as reported ("45,123")
        rating: IMDb rating, 0.0 when unavailable
        runtime: Runtime ("82 min")
        poster: Link to the poster
        metascore: Metacritic score
        plot: Short or full plot depending on the request
        rated: Rating in the country of release
        director: Directors
        writer: Writers
        actors: Leading actors
        released: Original release date
        awards: Awards won
        website: Official website
        ratings: Ratings from various sources
        dvd_release: DVD release date
        production: Production studio
        box_office: Box office earnings
        extras: Unrecognized OMDb fields, keys lower-cased
        year_data: Raw OMDb year string, kept for range-aware variants
    """

    kind: ClassVar[MediaKind] = MediaKind.MOVIE

    imdb_id: str = ""
    title: str = ""
    year: Optional[int] = None
    type: str = ""
    genres: str = ""
    languages: str = ""
    country: str = ""
    votes: str = ""
    rating: float = 0.0
    runtime: str = ""
    poster: str = ""
    metascore: str = ""
    plot: str = ""
    rated: str = ""
    director: str = ""
    writer: str = ""
    actors: str = ""
    released: Optional[date] = None
    awards: str = ""
    website: Optional[str] = None
    ratings: tuple[Rating, ...] = ()
    dvd_release: Optional[date] = None
    production: Optional[str] = None
    box_office: Optional[str] = None
    extras: dict[str, Any] = field(default_factory=dict, hash=False)
    year_data: str = field(default="", repr=False)

    @property
    def name(self) -> str:
        """Title of the movie."""
        return self.title

    @property
    def series(self) -> bool:
        """Whether or not this is a TV series (anything but a movie)."""
        return self.type != "movie"

    @property
    def imdb_url(self) -> str:
        """Direct URL to the title on IMDb."""
        return f"{IMDB_TITLE_URL}{self.imdb_id}"


@dataclass(frozen=True)
class Game(Movie):
    """A game. Same attributes as Movie, distinguished by its kind."""

    kind: ClassVar[MediaKind] = MediaKind.GAME


@dataclass(frozen=True)
class Episode(Movie):
    """
    A single episode of a series.

    Attributes:
        season: Season this episode belongs to
        episode_number: Number of the episode in its season, if known
        series_id: IMDb id of the parent series
    """

    kind: ClassVar[MediaKind] = MediaKind.EPISODE

    season: int = 0
    episode_number: Optional[int] = None
    series_id: Optional[str] = None


EpisodeFetcher = Callable[["TVShow", MovieOptions], Awaitable[tuple[Episode, ...]]]


class EpisodeCache:
    """
    Write-once cell holding the episodes of a show.

    The lock makes concurrent first calls wait for a single computation.
    A failed computation stores nothing, the next call computes again.
    """

    def __init__(self) -> None:
        self._episodes: Optional[tuple[Episode, ...]] = None
        self._lock = asyncio.Lock()

    @property
    def is_populated(self) -> bool:
        return self._episodes is not None

    async def get_or_compute(
        self, compute: Callable[[], Awaitable[tuple[Episode, ...]]]
    ) -> tuple[Episode, ...]:
        if self._episodes is not None:
            return self._episodes
        async with self._lock:
            if self._episodes is None:
                self._episodes = tuple(await compute())
        return self._episodes


@dataclass(frozen=True)
class TVShow(Movie):
    """
    A TV series.

    Keeps the options it was fetched with so that episodes can be fetched
    later without supplying them again.

    Attributes:
        start_year: Year the show started
        end_year: Year the show ended, None if still running
        total_seasons: Number of seasons
    """

    kind: ClassVar[MediaKind] = MediaKind.TVSHOW

    start_year: Optional[int] = None
    end_year: Optional[int] = None
    total_seasons: int = 0
    _options: MovieOptions = field(default_factory=MovieOptions, repr=False, compare=False)
    _episode_fetcher: Optional[EpisodeFetcher] = field(default=None, repr=False, compare=False)
    _episode_cache: EpisodeCache = field(
        default_factory=EpisodeCache, init=False, repr=False, compare=False
    )

    async def episodes(self) -> tuple[Episode, ...]:
        """
        Fetches every episode of the show, season by season.

        The first successful call stores the episodes; later calls return the
        same tuple without any request.

        Returns:
            Episodes of all seasons, in ascending season order

        Raises:
            UpstreamError: If OMDb reports an error for any season
        """
        if self._episode_fetcher is None:
            raise ImdbError(f"No episode source attached to {self.imdb_id}")
        fetcher = self._episode_fetcher
        return await self._episode_cache.get_or_compute(
            lambda: fetcher(self, self._options)
        )


@dataclass(frozen=True)
class SearchResult:
    """
    A single search result.

    Attributes:
        title: Title of the media
        year: Release year (first year for series)
        imdb_id: IMDb id
        type: Type of media found
        poster: Link to the poster
    """

    title: str = ""
    year: Optional[int] = None
    imdb_id: str = ""
    type: str = ""
    poster: str = ""

    @property
    def name(self) -> str:
        """Title of the media."""
        return self.title


SearchFunction = Callable[
    [SearchRequest, int, MovieOptions], Awaitable["SearchResultPage"]
]


@dataclass(frozen=True)
class SearchResultPage:
    """
    One page of search results.

    Stores the original request and options so that next() can fetch the
    following page without the caller.

    Attributes:
        results: Results of this page, in OMDb order
        total_results: Total number of results across all pages
        page: Number of this page (1-indexed)
        options: Options the page was fetched with
        request: Original search request
    """

    results: tuple[SearchResult, ...] = ()
    total_results: int = 0
    page: int = 1
    options: MovieOptions = field(default_factory=MovieOptions, repr=False)
    request: Optional[SearchRequest] = None
    _searcher: Optional[SearchFunction] = field(default=None, repr=False, compare=False)

    async def next(self) -> "SearchResultPage":
        """
        Fetches the next page of results.

        Does not check whether a next page exists: past the end, OMDb
        answers with an error or an empty page, which is passed through.
        """
        if self._searcher is None or self.request is None:
            raise ImdbError("This page cannot fetch a next page")
        return await self._searcher(self.request, self.page + 1, self.options)
