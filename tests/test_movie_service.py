"""Тесты сервиса фильмов."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from catalog.core.errors import EntityNotFoundError, InvalidArgumentError
from catalog.domains.movies.entities import Movie, MovieStatus
from catalog.domains.movies.schemas import MovieCreate, MovieUpdate
from catalog.domains.movies.services import MovieService


@pytest.fixture
def seeded_movie_service(movie_service: MovieService) -> MovieService:
    movie_service.save_all([
        Movie.create_movie("Alien", "Sci-Fi", "Ridley Scott", date(1979, 5, 25), 8.5, tags=["space", "classic"]),
        Movie.create_movie("Heat", "Crime", "Michael Mann", date(1995, 12, 15), 8.3, tags=["heist", "classic"]),
        Movie.create_movie("Dune", "Sci-Fi", "Denis Villeneuve", rating=8.0, status=MovieStatus.INACTIVE, tags=["space"]),
        Movie.create_movie("Untitled Project", status=MovieStatus.UPCOMING),
    ])
    return movie_service


class TestMovieQueries:
    def test_find_by_genre(self, seeded_movie_service: MovieService) -> None:
        assert {m.title for m in seeded_movie_service.find_by_genre("sci-fi")} == {"Alien", "Dune"}
        assert seeded_movie_service.find_by_genre(None) == []

    def test_search_by_title(self, seeded_movie_service: MovieService) -> None:
        assert [m.title for m in seeded_movie_service.search_by_title("HEA")] == ["Heat"]
        assert seeded_movie_service.search_by_title("  ") == []

    def test_unique_genres(self, seeded_movie_service: MovieService) -> None:
        assert seeded_movie_service.get_all_unique_genres() == {"Sci-Fi", "Crime"}

    def test_group_by_genre_matches_group_by_category(self, seeded_movie_service: MovieService) -> None:
        by_genre = seeded_movie_service.group_by_genre()
        by_category = seeded_movie_service.group_by_category()
        assert {genre: [m.title for m in movies] for genre, movies in by_genre.items()} == {
            "Sci-Fi": ["Alien", "Dune"],
            "Crime": ["Heat"],
        }
        assert by_genre == by_category

    def test_count_by_status(self, seeded_movie_service: MovieService) -> None:
        assert seeded_movie_service.count_by_status() == {
            MovieStatus.ACTIVE: 2, MovieStatus.INACTIVE: 1, MovieStatus.UPCOMING: 1
        }

    def test_tags(self, seeded_movie_service: MovieService) -> None:
        service = seeded_movie_service
        assert service.get_all_unique_tags() == {"space", "classic", "heist"}
        assert [m.title for m in service.find_by_all_tags({"space", "classic"})] == ["Alien"]
        assert {m.title for m in service.find_by_any_tag({"heist", "space"})} == {"Alien", "Heat", "Dune"}
        assert service.get_most_popular_tags(2) == ["classic", "space"]

    def test_search_includes_genre_and_tags(self, seeded_movie_service: MovieService) -> None:
        assert {m.title for m in seeded_movie_service.search("sci")} == {"Alien", "Dune"}
        assert [m.title for m in seeded_movie_service.search("heist")] == ["Heat"]
        assert seeded_movie_service.search(" ") == []

    def test_archive_inactive_movies(self, seeded_movie_service: MovieService) -> None:
        assert seeded_movie_service.archive_inactive_movies() == 1
        assert seeded_movie_service.find_by_status(MovieStatus.INACTIVE) == []
        assert [m.title for m in seeded_movie_service.find_by_status(MovieStatus.ARCHIVED)] == ["Dune"]

    def test_movie_statistics(self, seeded_movie_service: MovieService) -> None:
        stats = seeded_movie_service.get_movie_statistics()
        assert stats["total_movies"] == 4
        assert stats["status_counts"][MovieStatus.ACTIVE] == 2
        assert stats["genre_counts"] == {"Sci-Fi": 2, "Crime": 1}
        assert stats["total_unique_tags"] == 3
        assert stats["average_tags_per_movie"] == pytest.approx(5 / 4)


class TestMovieUpdate:
    def test_explicit_zero_rating_is_applied(self, movie_service: MovieService) -> None:
        movie = movie_service.create_movie(MovieCreate(title="Heat", rating=8.3, favorite=True))
        updated = movie_service.update_movie(movie.id, MovieUpdate(rating=0.0))
        assert updated.rating == 0.0
        assert updated.favorite is True
        assert updated.title == "Heat"

    def test_explicit_false_favorite_is_applied(self, movie_service: MovieService) -> None:
        movie = movie_service.create_movie(MovieCreate(title="Heat", favorite=True))
        updated = movie_service.update_movie(movie.id, MovieUpdate(favorite=False))
        assert updated.favorite is False

    def test_omitted_fields_are_kept(self, movie_service: MovieService) -> None:
        movie = movie_service.create_movie(
            MovieCreate(title="Heat", genre="Crime", director="Michael Mann", tags=["heist"])
        )
        updated = movie_service.update_movie(movie.id, MovieUpdate(release_date=date(1995, 12, 15)))
        assert (updated.genre, updated.director, updated.tags) == ("Crime", "Michael Mann", ["heist"])
        assert updated.release_date == date(1995, 12, 15)

    def test_update_tags_and_status(self, movie_service: MovieService) -> None:
        movie = movie_service.create_movie(MovieCreate(title="Heat"))
        updated = movie_service.update_movie(
            movie.id, MovieUpdate(tags=["Heist", "LA"], status=MovieStatus.RELEASED)
        )
        assert updated.tags == ["heist", "la"]
        assert updated.status == MovieStatus.RELEASED

    def test_explicit_null_for_required_flags_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MovieUpdate(rating=None)
        with pytest.raises(ValidationError):
            MovieUpdate(status=None)

    def test_invalid_update_is_rejected(self, movie_service: MovieService) -> None:
        movie = movie_service.create_movie(MovieCreate(title="Heat"))
        with pytest.raises(InvalidArgumentError, match="Title is required"):
            movie_service.update_movie(movie.id, MovieUpdate(title="  "))
        assert movie_service.find_by_id(movie.id).title == "Heat"

    def test_update_missing_movie(self, movie_service: MovieService) -> None:
        with pytest.raises(EntityNotFoundError, match="Movie not found: 9"):
            movie_service.update_movie(9, MovieUpdate(title="x"))

    def test_replace_movie(self, movie_service: MovieService) -> None:
        movie = movie_service.create_movie(MovieCreate(title="Heat", rating=8.3))
        replaced = movie_service.replace_movie(movie.id, MovieCreate(title="Heat (1995)"))
        assert replaced.id == movie.id
        assert replaced.rating == 0.0
        assert movie_service.count() == 1


def test_blank_genre_rejected_on_create(movie_service: MovieService) -> None:
    with pytest.raises(InvalidArgumentError, match="Genre cannot be empty if provided"):
        movie_service.create_movie(MovieCreate(title="Heat", genre=""))
    assert movie_service.count() == 0
