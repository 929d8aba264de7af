from catalog.domains.movies.entities import Movie, MovieStatus
from catalog.domains.movies.schemas import (
    MovieBase, MovieCreate, MovieUpdate, MovieResponse, MovieStatsResponse
)
from catalog.domains.movies.services import MovieService, movie_validator

__all__ = [
    "Movie", "MovieStatus",
    "MovieBase", "MovieCreate", "MovieUpdate", "MovieResponse", "MovieStatsResponse",
    "MovieService", "movie_validator"
]
