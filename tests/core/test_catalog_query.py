"""
Unit tests for the catalog listing pipeline.

Movies are transient ORM objects served from an in-memory source, so no
database is involved.
"""

import asyncio
from datetime import date
from decimal import Decimal

import pytest

from app.core.catalog import (
    CatalogQueryService,
    DataAccessFailure,
    FilterCriteria,
    InMemoryMovieSource,
    QueryResult,
    collect_genres,
    filter_by_genre,
    filter_by_title,
    list_movies,
)
from app.database.models import Genre, Movie


def make_movie(movie_id, title, genre, genre_id=None):
    return Movie(
        movie_id=movie_id,
        title=title,
        release_date=date(2000, 1, 1),
        price=Decimal("9.99"),
        genre_id=genre.genre_id if genre is not None else genre_id,
        genre=genre,
    )


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def scifi():
    return Genre(genre_id=1, name="Sci-Fi")


@pytest.fixture
def comedy():
    return Genre(genre_id=2, name="Comedy")


@pytest.fixture
def dune_and_clue(scifi, comedy):
    """Two movies in two genres."""
    return [make_movie(1, "Dune", scifi), make_movie(2, "Clue", comedy)]


@pytest.fixture
def catalog(scifi, comedy):
    """A larger catalog with repeated genres and an untitled movie."""
    return [
        make_movie(1, "Alien", scifi),
        make_movie(2, "Airplane!", comedy),
        make_movie(3, "Aliens", scifi),
        make_movie(4, None, comedy),
        make_movie(5, "Arrival", scifi),
    ]


class FailingSource:
    async def fetch_all_movies_with_genre(self):
        raise DataAccessFailure("database unreachable")


class TestScenarios:
    """Worked examples for the listing."""

    def test_search_keeps_matching_titles(self, dune_and_clue, scifi, comedy):
        """Search keeps every title containing the text."""
        result = run(list_movies(InMemoryMovieSource(dune_and_clue), FilterCriteria(search="u")))

        # "Dune" and "Clue" both contain "u"
        assert [m.movie_id for m in result.movies] == [1, 2]
        assert result.genres == [scifi, comedy]

    def test_search_is_case_sensitive(self, dune_and_clue):
        """Search matches case exactly."""
        result = run(list_movies(InMemoryMovieSource(dune_and_clue), FilterCriteria(search="D")))

        assert [m.title for m in result.movies] == ["Dune"]

    def test_genre_filter_keeps_genre_list(self, dune_and_clue, scifi, comedy):
        """Genre filter narrows movies, not genres."""
        result = run(list_movies(InMemoryMovieSource(dune_and_clue), FilterCriteria(genre_id=2)))

        assert [m.movie_id for m in result.movies] == [2]
        assert result.genres == [scifi, comedy]

    def test_empty_search_and_no_genre_lists_everything(self, dune_and_clue):
        """Empty search and no genre return the full catalog."""
        result = run(list_movies(
            InMemoryMovieSource(dune_and_clue),
            FilterCriteria(search="", genre_id=None),
        ))

        assert result.movies == dune_and_clue

    def test_empty_source(self):
        """An empty source gives an empty result."""
        result = run(list_movies(
            InMemoryMovieSource([]),
            FilterCriteria(search="a", genre_id=3),
        ))

        assert result == QueryResult(movies=[], genres=[])

    def test_untitled_movie_never_matches_search(self, catalog):
        """Movies without a title never match a search."""
        result = run(list_movies(InMemoryMovieSource(catalog), FilterCriteria(search="A")))

        assert 4 not in [m.movie_id for m in result.movies]
        assert [m.movie_id for m in result.movies] == [1, 2, 3, 5]


class TestFilters:
    """Filter ordering and edge cases."""

    def test_no_criteria_returns_source_order(self, catalog):
        """Without criteria, movies come back in source order."""
        result = run(list_movies(InMemoryMovieSource(catalog)))

        assert result.movies == catalog

    def test_filters_compose(self, catalog):
        """Genre filter applies to the search results."""
        result = run(list_movies(
            InMemoryMovieSource(catalog),
            FilterCriteria(search="Alien", genre_id=1),
        ))

        assert [m.movie_id for m in result.movies] == [1, 3]

    def test_filters_compose_to_empty(self, catalog):
        """Filters that exclude each other give no movies."""
        result = run(list_movies(
            InMemoryMovieSource(catalog),
            FilterCriteria(search="Airplane", genre_id=1),
        ))

        assert result.movies == []

    def test_whitespace_search_is_no_filter(self, catalog):
        """Whitespace-only search is ignored."""
        result = run(list_movies(InMemoryMovieSource(catalog), FilterCriteria(search="   ")))

        assert result.movies == catalog

    def test_search_is_not_trimmed(self, catalog):
        """Non-blank search text is matched as given."""
        result = run(list_movies(InMemoryMovieSource(catalog), FilterCriteria(search="Alien ")))

        assert result.movies == []

    def test_genre_zero_is_a_real_filter(self, catalog):
        """Genre ID 0 filters instead of meaning no filter."""
        orphan = make_movie(6, "Zero", None, genre_id=0)
        result = run(list_movies(
            InMemoryMovieSource(catalog + [orphan]),
            FilterCriteria(genre_id=0),
        ))

        assert result.movies == [orphan]

    def test_unknown_genre_is_not_an_error(self, catalog):
        """An unknown genre ID gives no movies, not an error."""
        result = run(list_movies(InMemoryMovieSource(catalog), FilterCriteria(genre_id=999)))

        assert result.movies == []
        assert len(result.genres) == 2

    def test_search_results_all_contain_term(self, catalog):
        """Search keeps exactly the titles containing the text."""
        term = "Ali"
        result = run(list_movies(InMemoryMovieSource(catalog), FilterCriteria(search=term)))

        assert all(m.title is not None and term in m.title for m in result.movies)
        excluded = [m for m in catalog if m not in result.movies]
        assert not any(m.title is not None and term in m.title for m in excluded)

    def test_source_list_is_not_mutated(self, catalog):
        """Filtering leaves the source list untouched."""
        source = InMemoryMovieSource(catalog)
        before = list(source.movies)

        run(list_movies(source, FilterCriteria(search="Alien", genre_id=1)))

        assert source.movies == before


class TestGenreList:
    """The drop-down genres come from the unfiltered catalog."""

    def test_genres_ignore_filters(self, catalog):
        """Genre list is the same under any criteria."""
        source = InMemoryMovieSource(catalog)
        unfiltered = run(list_movies(source))

        for criteria in [
            FilterCriteria(search="Alien"),
            FilterCriteria(genre_id=2),
            FilterCriteria(search="nothing matches", genre_id=1),
        ]:
            result = run(list_movies(source, criteria))
            assert result.genres == unfiltered.genres

    def test_genres_are_distinct_in_first_seen_order(self, catalog, scifi, comedy):
        """Genres appear once, in first-seen order."""
        assert collect_genres(catalog) == [scifi, comedy]

    def test_genres_distinct_by_id(self):
        """Genre objects sharing an ID count once."""
        first = Genre(genre_id=7, name="Drama")
        copy = Genre(genre_id=7, name="Drama")
        movies = [make_movie(1, "A", first), make_movie(2, "B", copy)]

        assert collect_genres(movies) == [first]

    def test_transient_genres_distinct_by_identity(self):
        """Unsaved genres are told apart by identity."""
        drama = Genre(name="Drama")
        other = Genre(name="Drama")
        movies = [make_movie(1, "A", drama), make_movie(2, "B", drama), make_movie(3, "C", other)]

        assert collect_genres(movies) == [drama, other]

    def test_missing_genre_is_skipped(self, scifi):
        """Movies without a genre add nothing to the genre list."""
        movies = [make_movie(1, "Orphan", None, genre_id=42), make_movie(2, "Dune", scifi)]

        assert collect_genres(movies) == [scifi]


class TestHelpers:
    """The pure pipeline steps."""

    def test_filter_by_title(self, catalog):
        """filter_by_title keeps substring matches."""
        assert [m.movie_id for m in filter_by_title(catalog, "rr")] == [5]

    def test_filter_by_genre(self, catalog):
        """filter_by_genre keeps matching genre IDs."""
        assert [m.movie_id for m in filter_by_genre(catalog, 2)] == [2, 4]

    def test_has_search(self):
        """has_search is false for missing or blank text."""
        assert FilterCriteria(search="x").has_search
        assert not FilterCriteria(search=" \t").has_search
        assert not FilterCriteria().has_search


class TestService:
    """CatalogQueryService behaviour."""

    def test_idempotent(self, catalog):
        """Same criteria and source give equal results."""
        service = CatalogQueryService(InMemoryMovieSource(catalog))
        criteria = FilterCriteria(search="A", genre_id=1)

        assert run(service.list_movies(criteria)) == run(service.list_movies(criteria))

    def test_result_lists_are_fresh(self, catalog):
        """Result lists do not alias the source."""
        source = InMemoryMovieSource(catalog)
        result = run(CatalogQueryService(source).list_movies())

        result.movies.clear()
        assert len(source.movies) == 5

    def test_data_access_failure_propagates(self):
        """DataAccessFailure from the source reaches the caller."""
        service = CatalogQueryService(FailingSource())

        with pytest.raises(DataAccessFailure, match="unreachable"):
            run(service.list_movies(FilterCriteria(search="a")))

    def test_cancellation_propagates(self):
        """Cancelling during the fetch cancels the listing."""
        class BlockingSource:
            def __init__(self):
                self.started = asyncio.Event()

            async def fetch_all_movies_with_genre(self):
                self.started.set()
                await asyncio.sleep(3600)
                return []

        async def scenario():
            source = BlockingSource()
            task = asyncio.create_task(list_movies(source, FilterCriteria(search="a")))
            await source.started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        run(scenario())
