"""
Mock OMDb API responses for testing.

These fixtures simulate the responses of https://www.omdbapi.com for
single-item lookups (?t= / ?i=), searches (?s=) and season listings
(?i=&Season=).
"""

TEST_API_KEY = "test-api-key"

# GET ?t=The Toxic Avenger
OMDB_MOVIE_RESPONSE = {
    "Title": "The Toxic Avenger",
    "Year": "1984",
    "Rated": "R",
    "Released": "04 Apr 1986",
    "Runtime": "82 min",
    "Genre": "Action, Comedy, Horror",
    "Director": "Michael Herz, Lloyd Kaufman",
    "Writer": "Lloyd Kaufman, Joe Ritter, Gay Partington Terry",
    "Actors": "Andree Maranda, Mitch Cohen, Jennifer Babtist",
    "Plot": "Tromaville has a monstrous new hero.",
    "Language": "English",
    "Country": "United States",
    "Awards": "1 nomination",
    "Poster": "https://m.media-amazon.com/images/M/toxic.jpg",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "6.2/10"},
        {"Source": "Rotten Tomatoes", "Value": "70%"},
    ],
    "Metascore": "N/A",
    "imdbRating": "6.2",
    "imdbVotes": "29,403",
    "imdbID": "tt0090190",
    "Type": "movie",
    "DVD": "N/A",
    "BoxOffice": "$363,561",
    "Production": "N/A",
    "Website": "N/A",
    "Response": "True",
}

# GET ?i=tt0944947
OMDB_SERIES_RESPONSE = {
    "Title": "Game of Thrones",
    "Year": "2011–2019",
    "Rated": "TV-MA",
    "Released": "17 Apr 2011",
    "Runtime": "57 min",
    "Genre": "Action, Adventure, Drama",
    "Director": "N/A",
    "Writer": "David Benioff, D.B. Weiss",
    "Actors": "Emilia Clarke, Peter Dinklage, Kit Harington",
    "Plot": "Nine noble families fight for control over the lands of Westeros.",
    "Language": "English",
    "Country": "United States, United Kingdom",
    "Awards": "Won 59 Primetime Emmys",
    "Poster": "https://m.media-amazon.com/images/M/got.jpg",
    "Ratings": [{"Source": "Internet Movie Database", "Value": "9.2/10"}],
    "Metascore": "N/A",
    "imdbRating": "9.2",
    "imdbVotes": "2,235,715",
    "imdbID": "tt0944947",
    "Type": "series",
    "totalSeasons": "2",
    "Response": "True",
}

# GET ?i=tt1480055
OMDB_EPISODE_RESPONSE = {
    "Title": "Winter Is Coming",
    "Year": "2011",
    "Rated": "TV-MA",
    "Released": "17 Apr 2011",
    "Season": "1",
    "Episode": "1",
    "Runtime": "62 min",
    "Genre": "Action, Adventure, Drama",
    "Director": "Tim Van Patten",
    "Writer": "David Benioff, D.B. Weiss",
    "Actors": "Sean Bean, Mark Addy, Nikolaj Coster-Waldau",
    "Plot": "Eddard Stark is torn between his family and an old friend.",
    "Language": "English",
    "Country": "United States, United Kingdom",
    "Awards": "N/A",
    "Poster": "https://m.media-amazon.com/images/M/wic.jpg",
    "Ratings": [{"Source": "Internet Movie Database", "Value": "8.9/10"}],
    "Metascore": "N/A",
    "imdbRating": "8.9",
    "imdbVotes": "54,321",
    "imdbID": "tt1480055",
    "seriesID": "tt0944947",
    "Type": "episode",
    "Response": "True",
}

# GET ?t=Sonic the Hedgehog&y=1991
OMDB_GAME_RESPONSE = {
    "Title": "Sonic the Hedgehog",
    "Year": "1991",
    "Rated": "E",
    "Released": "23 Jun 1991",
    "Runtime": "N/A",
    "Genre": "Action, Adventure, Family",
    "Director": "N/A",
    "Writer": "Yuji Naka, Naoto Ohshima",
    "Actors": "N/A",
    "Plot": "A blue hedgehog races to stop Dr. Robotnik.",
    "Language": "English",
    "Country": "Japan",
    "Awards": "N/A",
    "Poster": "https://m.media-amazon.com/images/M/sonic.jpg",
    "Ratings": [],
    "Metascore": "N/A",
    "imdbRating": "8.1",
    "imdbVotes": "3,210",
    "imdbID": "tt0284848",
    "Type": "game",
    "Response": "True",
}

# GET ?s=Toxic Avenger
OMDB_SEARCH_RESPONSE = {
    "Search": [
        {
            "Title": "The Toxic Avenger",
            "Year": "1984",
            "imdbID": "tt0090190",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/toxic.jpg",
        },
        {
            "Title": "The Toxic Avenger Part II",
            "Year": "1989",
            "imdbID": "tt0098503",
            "Type": "movie",
            "Poster": "N/A",
        },
    ],
    "totalResults": "25",
    "Response": "True",
}

OMDB_SEARCH_PAGE_2_RESPONSE = {
    "Search": [
        {
            "Title": "Toxic Avenger: The Musical",
            "Year": "2018",
            "imdbID": "tt8001234",
            "Type": "movie",
            "Poster": "N/A",
        },
    ],
    "totalResults": "25",
    "Response": "True",
}

OMDB_NOT_FOUND_RESPONSE = {
    "Response": "False",
    "Error": "Movie not found!",
}

OMDB_INVALID_KEY_RESPONSE = {
    "Response": "False",
    "Error": "Invalid API key!",
}

OMDB_UNKNOWN_TYPE_RESPONSE = {
    "Title": "Something",
    "Year": "2020",
    "imdbID": "tt9999999",
    "Type": "podcast",
    "Response": "True",
}


def season_response(season: int, count: int, upstream_season: str | None = None) -> dict:
    """
    Builds a season listing (GET ?i=tt0944947&Season=N) with count episodes.

    upstream_season lets a test put a Season value that disagrees with the
    season that was requested.
    """
    announced = upstream_season if upstream_season is not None else str(season)
    return {
        "Title": "Game of Thrones",
        "Season": announced,
        "totalSeasons": "2",
        "Episodes": [
            {
                "Title": f"Episode {season}x{number}",
                "Released": "2011-04-17",
                "Episode": str(number),
                "Season": announced,
                "imdbRating": "8.5",
                "imdbID": f"tt{season:02d}{number:05d}",
            }
            for number in range(1, count + 1)
        ],
        "Response": "True",
    }
