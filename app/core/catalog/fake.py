"""
Generated demo catalog.

Produces a believable but fake set of genres and movies with Faker, for
demos and for running the front-end without a populated database, plus
the recent news items shown on the home page.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from faker import Faker

from app.database.models import Genre, Movie

GENRE_NAMES = [
    "Action", "Adult", "Adventure", "Animation", "Biography", "Comedy",
    "Crime", "Documentary", "Drama", "Family", "Fantasy", "Film Noir",
    "Game Show", "History", "Horror", "Musical", "Music", "Mystery", "News",
    "Reality-TV", "Romance", "Sci-Fi", "Short", "Sport", "Talk-Show",
    "Thriller", "War", "Western",
]

POSTERS = [
    "/s1VzVhXlqsevi8zeCMG9A16nEUf.jpg",
    "/cvsXj3I9Q2iyyIo95AecSd1tad7.jpg",
    "/t6HIqrRAclMCA60NsSmeqe9RmNV.jpg",
    "/3GrRgt6CiLIUXUtoktcv1g2iwT5.jpg",
    "/qNBAXBIQlnOThrVvA6mA2B5ggV6.jpg",
    "/ngl2FKBlU4fhbdsrtdom9LVLBXw.jpg",
    "/rzRb63TldOKdKydCvWJM8B6EkPM.jpg",
]

NEWS_URL = "https://devblogs.microsoft.com/dotnet/"
NEWS_IMAGE_URL = "https://loremflickr.com/300/300/movie?lock={lock}"


@dataclass(frozen=True)
class NewsItem:
    """A headline for the recent news panel."""

    title: str
    summary: str
    url: str
    image_url: str
    published_on: date


def generate_movie(fake: Faker, genre: Genre, movie_id: Optional[int] = None) -> Movie:
    """
    Generate one fake movie in ``genre``.

    Args:
        fake: Faker instance
        genre: Genre the movie belongs to
        movie_id: Optional primary key to assign

    Returns:
        Transient Movie instance
    """
    release_date: date = fake.date_between(start_date="-50y", end_date="today")
    return Movie(
        movie_id=movie_id,
        title=" ".join(fake.words(nb=3)).title(),
        release_date=release_date,
        price=Decimal(fake.random_int(min=500, max=5000)) / 100,
        genre_id=genre.genre_id,
        genre=genre,
        plot=fake.paragraph(nb_sentences=3),
        poster=fake.random_element(POSTERS),
    )


def generate_catalog(
    count: int = 100,
    seed: Optional[int] = None,
    assign_ids: bool = True
) -> Tuple[List[Genre], List[Movie]]:
    """
    Generate genres and ``count`` movies spread randomly across them.

    Args:
        count: Number of movies to generate
        seed: Seed for reproducible output
        assign_ids: Give genres and movies sequential primary keys. Turn off
            when the objects are going to be inserted into a database.

    Returns:
        Tuple of (genres, movies)
    """
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    genres = [
        Genre(genre_id=i if assign_ids else None, name=name)
        for i, name in enumerate(GENRE_NAMES, start=1)
    ]
    movies = [
        generate_movie(fake, fake.random_element(genres), movie_id=i if assign_ids else None)
        for i in range(1, count + 1)
    ]
    return genres, movies


def generate_news(count: int = 10, seed: Optional[int] = None) -> List[NewsItem]:
    """
    Generate ``count`` recent news items, newest first.

    Each item has a five-word title, a three-sentence summary, a 300x300
    movie image and a date within the last 50 days.
    """
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    items = [
        NewsItem(
            title=" ".join(fake.words(nb=5)),
            summary=" ".join(fake.sentences(nb=3)),
            url=NEWS_URL,
            image_url=NEWS_IMAGE_URL.format(lock=fake.random_int(min=1, max=99999)),
            published_on=fake.date_between(start_date="-50d", end_date="today"),
        )
        for _ in range(count)
    ]
    return sorted(items, key=lambda item: item.published_on, reverse=True)


class FakeMovieSource:
    """
    Movie source serving a generated catalog.

    The catalog is generated once per instance, so repeated fetches return
    the same movies.
    """

    def __init__(self, count: int = 100, seed: Optional[int] = None):
        self.count = count
        self.seed = seed
        self.genres, self.movies = generate_catalog(count=count, seed=seed)

    async def fetch_all_movies_with_genre(self) -> List[Movie]:
        return list(self.movies)
