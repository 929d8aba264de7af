"""Тесты хранилища в памяти и доменных запросов репозиториев."""

from __future__ import annotations

import threading

from catalog.db.repositories import InMemoryRepository, ItemRepository, MovieRepository
from catalog.domains.items.entities import Item, ItemStatus
from catalog.domains.movies.entities import Movie, MovieStatus


# ---------------------------------------------------------------------------
# Базовые CRUD-операции
# ---------------------------------------------------------------------------


class TestInMemoryRepository:
    def test_save_assigns_increasing_ids(self) -> None:
        repo = InMemoryRepository()
        saved = [repo.save(Item(title=f"Item {i}")) for i in range(5)]
        assert [item.id for item in saved] == [1, 2, 3, 4, 5]

    def test_save_returns_same_object(self) -> None:
        repo = InMemoryRepository()
        item = Item(title="Same")
        assert repo.save(item) is item

    def test_save_keeps_existing_id(self) -> None:
        repo = InMemoryRepository()
        item = repo.save(Item(title="First"))
        item.title = "Renamed"
        repo.save(item)
        assert item.id == 1
        assert repo.count() == 1
        assert repo.find_by_id(1).title == "Renamed"

    def test_find_by_id_missing_returns_none(self) -> None:
        repo = InMemoryRepository()
        assert repo.find_by_id(42) is None

    def test_find_all_returns_new_list(self) -> None:
        repo = InMemoryRepository()
        repo.save(Item(title="A"))
        repo.save(Item(title="B"))
        snapshot = repo.find_all()
        snapshot.clear()
        assert repo.count() == 2
        assert len(repo.find_all()) == 2

    def test_find_all_preserves_insertion_order(self) -> None:
        repo = InMemoryRepository()
        for title in ("C", "A", "B"):
            repo.save(Item(title=title))
        assert [item.title for item in repo.find_all()] == ["C", "A", "B"]

    def test_delete_by_id_is_idempotent(self) -> None:
        repo = InMemoryRepository()
        item = repo.save(Item(title="Gone"))
        repo.delete_by_id(item.id)
        repo.delete_by_id(item.id)
        repo.delete_by_id(999)
        assert not repo.exists_by_id(item.id)
        assert repo.count() == 0

    def test_delete_by_id_does_not_reset_ids(self) -> None:
        repo = InMemoryRepository()
        first = repo.save(Item(title="First"))
        repo.delete_by_id(first.id)
        second = repo.save(Item(title="Second"))
        assert second.id == 2

    def test_delete_all_resets_id_counter(self) -> None:
        repo = InMemoryRepository()
        repo.save(Item(title="A"))
        repo.save(Item(title="B"))
        repo.delete_all()
        assert repo.count() == 0
        assert repo.save(Item(title="C")).id == 1

    def test_explicit_id_moves_counter_forward(self) -> None:
        repo = InMemoryRepository()
        explicit = repo.save(Item(title="Explicit", id=2))
        generated = [repo.save(Item(title=title)) for title in ("A", "B", "C")]

        assert [item.id for item in generated] == [3, 4, 5]
        assert repo.count() == 4
        assert repo.find_by_id(2) is explicit

    def test_explicit_lower_id_keeps_counter(self) -> None:
        repo = InMemoryRepository()
        repo.save(Item(title="A"))
        repo.save(Item(title="B"))
        repo.save(Item(title="Explicit", id=1))
        assert repo.save(Item(title="C")).id == 3

    def test_save_all_keeps_input_order(self) -> None:
        repo = InMemoryRepository()
        items = [Item(title=title) for title in ("X", "Y", "Z")]
        saved = repo.save_all(items)
        assert [item.title for item in saved] == ["X", "Y", "Z"]
        assert [item.id for item in saved] == [1, 2, 3]

    def test_update_replaces_only_present_entities(self) -> None:
        repo = InMemoryRepository()
        item = repo.save(Item(title="Present"))
        assert repo.update(item) is item

        repo.delete_by_id(item.id)
        assert repo.update(item) is None
        assert repo.count() == 0

    def test_update_without_id_returns_none(self) -> None:
        repo = InMemoryRepository()
        assert repo.update(Item(title="New")) is None

    def test_concurrent_saves_assign_unique_ids(self) -> None:
        repo = InMemoryRepository()
        per_thread = 200

        def worker() -> None:
            for i in range(per_thread):
                repo.save(Item(title=f"Item {i}"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [item.id for item in repo.find_all()]
        assert len(ids) == 8 * per_thread
        assert len(set(ids)) == len(ids)
        assert sorted(ids) == list(range(1, 8 * per_thread + 1))


# ---------------------------------------------------------------------------
# Доменные запросы
# ---------------------------------------------------------------------------


class TestItemRepository:
    def _seed(self) -> ItemRepository:
        repo = ItemRepository()
        repo.save(Item(title="Write report", category="Work", status=ItemStatus.ACTIVE, tags=["urgent"]))
        repo.save(Item(title="Buy milk", category="home", status=ItemStatus.INACTIVE, tags=["Shopping"]))
        repo.save(Item(title="Weekly REPORT", category="work", status=ItemStatus.ACTIVE))
        return repo

    def test_find_by_status(self) -> None:
        repo = self._seed()
        assert [item.title for item in repo.find_by_status(ItemStatus.INACTIVE)] == ["Buy milk"]
        assert repo.find_by_status(None) == []

    def test_find_by_category_ignores_case(self) -> None:
        repo = self._seed()
        titles = {item.title for item in repo.find_by_category("WORK")}
        assert titles == {"Write report", "Weekly REPORT"}
        assert repo.find_by_category("  ") == []

    def test_find_by_tag_normalizes(self) -> None:
        repo = self._seed()
        assert [item.title for item in repo.find_by_tag(" shopping ")] == ["Buy milk"]
        assert repo.find_by_tag(None) == []

    def test_find_by_title_containing(self) -> None:
        repo = self._seed()
        titles = {item.title for item in repo.find_by_title_containing("report")}
        assert titles == {"Write report", "Weekly REPORT"}
        assert repo.find_by_title_containing("") == []


class TestMovieRepository:
    def test_find_by_genre_and_title(self) -> None:
        repo = MovieRepository()
        repo.save(Movie(title="Alien", genre="Sci-Fi"))
        repo.save(Movie(title="Aliens", genre="sci-fi", status=MovieStatus.RELEASED))
        repo.save(Movie(title="Heat", genre="Crime"))

        assert {movie.title for movie in repo.find_by_genre("SCI-FI")} == {"Alien", "Aliens"}
        assert repo.find_by_genre(None) == []
        assert {movie.title for movie in repo.find_by_title_containing("alien")} == {"Alien", "Aliens"}
        assert [movie.title for movie in repo.find_by_status(MovieStatus.RELEASED)] == ["Aliens"]

    def test_find_by_tag(self) -> None:
        repo = MovieRepository()
        repo.save(Movie(title="Heat", tags=["Heist", "classic"]))
        repo.save(Movie(title="Alien", tags=["space"]))

        assert [movie.title for movie in repo.find_by_tag("HEIST")] == ["Heat"]
        assert repo.find_by_tag("  ") == []
