"""
Article Model Test Suite
========================

Tests for the immutable Article and Image models.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from feedsig.models.article import Article, Image, NEW_ARTICLE_WINDOW


class TestImage:
    """Test Image model validation."""

    def test_image_creation(self):
        image = Image(url="https://cdn.example.com/cat.jpg", width=640, height=480, title="A cat")

        assert str(image.url) == "https://cdn.example.com/cat.jpg"
        assert image.width == 640
        assert image.height == 480
        assert str(image) == "Image(https://cdn.example.com/cat.jpg)"

    def test_image_dimensions_optional(self):
        image = Image(url="https://cdn.example.com/logo.png")

        assert image.width is None
        assert image.height is None

    def test_invalid_image(self):
        with pytest.raises(ValidationError):
            Image(url="not a url")
        with pytest.raises(ValidationError):
            Image(url="https://cdn.example.com/cat.jpg", width=0)

    def test_image_is_immutable(self):
        image = Image(url="https://cdn.example.com/cat.jpg")

        with pytest.raises(ValidationError):
            image.width = 10


class TestArticle:
    """Test Article construction, accessors and immutability."""

    def test_accessors(self, make_article, published_at):
        logo = Image(url="https://news.example.com/logo.png")
        icon = Image(url="https://news.example.com/favicon.ico")
        picture = Image(url="https://news.example.com/cat.jpg")

        article = make_article(images=[picture], feed_logo=logo, feed_icon=icon)

        assert article.headline == "Cats running"
        assert article.text == "The cat sat on the mat. The cat ran."
        assert str(article.url) == "https://news.example.com/cats"
        assert article.date == published_at
        assert article.images == (picture,)
        assert article.feed_title == "Example News"
        assert article.feed_logo == logo
        assert article.feed_icon == icon

    def test_optional_fields_default_to_absent(self):
        article = Article(headline="Headline", text="Body", url="https://news.example.com/a")

        assert article.date is None
        assert article.images == ()
        assert article.feed_logo is None
        assert article.feed_icon is None
        assert article.feed_title == ""

    def test_absent_text_is_empty(self, make_article):
        article = make_article(headline=None, text=None, feed_title=None)

        assert article.headline == ""
        assert article.text == ""
        assert article.feed_title == ""

    def test_fields_cannot_be_reassigned(self, make_article):
        article = make_article()

        with pytest.raises(ValidationError):
            article.headline = "Changed"
        with pytest.raises(ValidationError):
            article.images = ()

    def test_images_not_affected_by_caller_list(self, make_article):
        """Mutating the list passed in does not reach the article."""
        images = [Image(url="https://news.example.com/1.jpg")]
        article = make_article(images=images)

        images.append(Image(url="https://news.example.com/2.jpg"))

        assert len(article.images) == 1
        assert isinstance(article.images, tuple)

    def test_images_keep_order(self, make_article):
        urls = [f"https://news.example.com/{i}.jpg" for i in range(5)]

        article = make_article(images=[Image(url=url) for url in urls])

        assert [str(image.url) for image in article.images] == urls

    def test_none_images_is_empty(self, make_article):
        assert make_article(images=None).images == ()

    def test_invalid_url_rejected(self):
        with pytest.raises(ValidationError):
            Article(headline="Headline", text="Body", url="ftp://")

    def test_naive_date_interpreted_as_utc(self, make_article):
        article = make_article(date=datetime(2024, 3, 1, 12, 0))

        assert article.date == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_str_representation(self, make_article):
        assert str(make_article()) == "Article(Cats running...)"


class TestArticleIsNew:
    """Test the half-hour freshness rule."""

    def test_window_is_half_an_hour(self):
        assert NEW_ARTICLE_WINDOW == timedelta(seconds=1800)

    def test_just_inside_window(self, make_article, published_at):
        article = make_article()

        assert article.is_new(published_at + timedelta(seconds=1799))

    def test_window_boundary_is_exclusive(self, make_article, published_at):
        article = make_article()

        assert not article.is_new(published_at + timedelta(seconds=1800))
        assert not article.is_new(published_at + timedelta(hours=5))

    def test_no_date_is_never_new(self, make_article, published_at):
        article = make_article(date=None)

        assert not article.is_new(published_at)
        assert not article.is_new(datetime.now(timezone.utc))

    def test_naive_now_interpreted_as_utc(self, make_article):
        article = make_article()

        assert article.is_new(datetime(2024, 3, 1, 12, 10))

    def test_custom_window(self, make_article, published_at):
        article = make_article()

        assert not article.is_new(published_at + timedelta(minutes=10), window=timedelta(minutes=5))

    def test_future_date_counts_as_new(self, make_article, published_at):
        article = make_article()

        assert article.is_new(published_at - timedelta(minutes=10))
        assert article.is_new(published_at - timedelta(days=2))
