"""Tests for llmsgen.paths."""

from __future__ import annotations

from llmsgen.paths import PathNormalizer, category, site_url, url_path


def test_index_file_is_named_after_its_directory() -> None:
    path = "posts/my-article/index.mdx"

    assert category(path) == "posts"
    assert url_path(path) == "posts/my-article/my-article.md"
    assert site_url(path) == "/md/posts/my-article/my-article.md"


def test_locale_suffix_is_removed() -> None:
    assert url_path("blog/post.en.md") == "blog/post.md"
    assert url_path("blog/post.ru.mdx") == "blog/post.md"
    assert url_path("blog/post.de.md") == "blog/post.de.md"


def test_underscore_index_and_localized_index() -> None:
    assert url_path("apps/todo/_index.md") == "apps/todo/todo.md"
    assert url_path("apps/todo/index.en.mdx") == "apps/todo/todo.md"


def test_root_files_keep_their_name_and_fall_into_other() -> None:
    assert url_path("index.mdx") == "index.md"
    assert category("index.mdx") == "other"
    assert category("about.md") == "other"


def test_windows_separators_are_normalized() -> None:
    assert url_path("posts\\deep\\index.md") == "posts/deep/deep.md"
    assert category("posts\\deep\\index.md") == "posts"


def test_url_path_is_idempotent() -> None:
    samples = [
        "posts/my-article/index.mdx",
        "blog/post.en.md",
        "blog/post.en.en.mdx",
        "research/paper.mdx",
        "index.md",
        "posts/index/index.md",
        "apps/todo/_index.ru.md",
    ]

    for sample in samples:
        once = url_path(sample)
        assert url_path(once) == once


def test_custom_locales() -> None:
    normalizer = PathNormalizer(["de"])

    assert normalizer.url_path("blog/post.de.md") == "blog/post.md"
    assert normalizer.url_path("blog/post.en.md") == "blog/post.en.md"
    assert PathNormalizer([]).url_path("blog/post.en.mdx") == "blog/post.en.md"
