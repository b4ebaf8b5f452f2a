# tests/services/test_analytics.py
"""Tests for bloglist/services/analytics.py module."""

from typing import Any

import pytest

from bloglist.errors import EmptyCollectionError
from bloglist.models import BlogDB
from bloglist.schemas import BlogCreate
from bloglist.services.analytics import (
    AuthorBlogs,
    AuthorLikes,
    dummy,
    favorite_blog,
    most_blogs,
    most_likes,
    summarize,
    total_likes,
)

LIST_WITH_ONE_BLOG = [
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf",
        "likes": 5,
    },
]


class TestDummy:
    """Tests for the dummy canary function."""

    def test_empty_list_returns_one(self) -> None:
        assert dummy([]) == 1

    def test_returns_length_plus_one(self, initial_blogs: list[dict[str, Any]]) -> None:
        assert dummy(initial_blogs) == len(initial_blogs) + 1


class TestTotalLikes:
    """Tests for total_likes."""

    def test_empty_list_is_zero(self) -> None:
        assert total_likes([]) == 0

    def test_one_blog_equals_its_likes(self) -> None:
        assert total_likes(LIST_WITH_ONE_BLOG) == 5

    def test_two_blogs_are_summed(self) -> None:
        assert total_likes([{"likes": 5}, {"likes": 3}]) == 8

    def test_bigger_list_is_calculated_right(self, initial_blogs: list[dict[str, Any]]) -> None:
        assert total_likes(initial_blogs) == 36

    def test_missing_likes_count_as_zero(self) -> None:
        assert total_likes([{"title": "no likes field"}, {"likes": 4}]) == 4


class TestFavoriteBlog:
    """Tests for favorite_blog."""

    def test_returns_blog_with_most_likes(self, initial_blogs: list[dict[str, Any]]) -> None:
        favorite = favorite_blog(initial_blogs)
        assert favorite == initial_blogs[2]
        assert favorite["title"] == "Canonical string reduction"

    def test_tie_returns_first_maximum(self) -> None:
        blogs = [{"likes": 5}, {"likes": 12}, {"likes": 12}]
        assert favorite_blog(blogs) is blogs[1]

    def test_returns_the_record_itself(self) -> None:
        blogs = [BlogCreate(title="a", url="u", likes=1), BlogCreate(title="b", url="u", likes=3)]
        assert favorite_blog(blogs) is blogs[1]

    def test_empty_list_raises(self) -> None:
        with pytest.raises(EmptyCollectionError) as exc_info:
            favorite_blog([])
        assert exc_info.value.status_code == 404
        assert exc_info.value.statistic == "favorite blog"


class TestMostBlogs:
    """Tests for most_blogs."""

    def test_author_with_most_blogs(self, initial_blogs: list[dict[str, Any]]) -> None:
        assert most_blogs(initial_blogs) == AuthorBlogs(author="Robert C. Martin", blogs=3)

    def test_one_blog(self) -> None:
        assert most_blogs(LIST_WITH_ONE_BLOG) == AuthorBlogs(author="Edsger W. Dijkstra", blogs=1)

    def test_counts_by_author(self) -> None:
        blogs = [{"author": "A"}, {"author": "B"}, {"author": "A"}]
        assert most_blogs(blogs) == AuthorBlogs(author="A", blogs=2)

    def test_tie_goes_to_first_author_seen(self) -> None:
        blogs = [{"author": "B"}, {"author": "A"}, {"author": "A"}, {"author": "B"}]
        assert most_blogs(blogs).author == "B"

    def test_empty_author_is_its_own_group(self) -> None:
        blogs = [{"author": ""}, {"author": "A"}, {"title": "no author"}]
        assert most_blogs(blogs) == AuthorBlogs(author="", blogs=2)

    def test_empty_list_raises(self) -> None:
        with pytest.raises(EmptyCollectionError):
            most_blogs([])


class TestMostLikes:
    """Tests for most_likes."""

    def test_author_with_most_likes(self, initial_blogs: list[dict[str, Any]]) -> None:
        assert most_likes(initial_blogs) == AuthorLikes(author="Edsger W. Dijkstra", likes=17)

    def test_sums_likes_per_author(self) -> None:
        blogs = [
            {"author": "A", "likes": 5},
            {"author": "B", "likes": 7},
            {"author": "A", "likes": 3},
        ]
        assert most_likes(blogs) == AuthorLikes(author="A", likes=8)

    def test_tie_goes_to_first_author_seen(self) -> None:
        blogs = [{"author": "B", "likes": 4}, {"author": "A", "likes": 4}]
        assert most_likes(blogs) == AuthorLikes(author="B", likes=4)

    def test_empty_list_raises(self) -> None:
        with pytest.raises(EmptyCollectionError):
            most_likes([])


class TestSummarize:
    """Tests for summarize."""

    def test_empty_collection_has_no_maxima(self) -> None:
        stats = summarize([])
        assert stats.count == 0
        assert stats.total_likes == 0
        assert stats.favorite_blog is None
        assert stats.most_blogs is None
        assert stats.most_likes is None

    def test_works_on_database_records(self, initial_blogs: list[dict[str, Any]]) -> None:
        blogs = [BlogDB(**blog) for blog in initial_blogs]
        stats = summarize(blogs)
        assert stats.count == 6
        assert stats.total_likes == 36
        assert stats.favorite_blog is blogs[2]
        assert stats.most_blogs == AuthorBlogs(author="Robert C. Martin", blogs=3)
        assert stats.most_likes == AuthorLikes(author="Edsger W. Dijkstra", likes=17)
