"""Tests for llmsgen.metadata.exports."""

from __future__ import annotations

from llmsgen.metadata.exports import extract_metadata_values, parse_metadata_export


def test_parse_metadata_export_reads_fields_and_removes_declaration() -> None:
    text = "export const metadata = {title: 'X', slug: 'x'};\nimport Foo from 'bar';\n<Foo/>\nHello world"

    metadata, body = parse_metadata_export(text)

    assert metadata == {"title": "X", "slug": "x"}
    assert body == "import Foo from 'bar';\n<Foo/>\nHello world"


def test_parse_metadata_export_handles_multiline_objects() -> None:
    text = (
        "import Chart from '../components/Chart';\n"
        "\n"
        "export const metadata = {\n"
        '  title: "Sorting Algorithms",\n'
        "  description: 'A tour of comparison sorts',\n"
        "  date: '2024-03-01',\n"
        "  tags: ['algorithms', \"sorting\", ''],\n"
        "}\n"
        "\n"
        "# Sorting\n"
    )

    metadata, body = parse_metadata_export(text)

    assert metadata == {
        "title": "Sorting Algorithms",
        "description": "A tour of comparison sorts",
        "tags": ["algorithms", "sorting"],
    }
    assert "export const" not in body
    assert body.startswith("import Chart from '../components/Chart';\n\n")
    assert body.rstrip().endswith("# Sorting")


def test_parse_metadata_export_ignores_other_properties() -> None:
    metadata = extract_metadata_values("{ author: 'Jane', readingTime: 5, subtitle: 'Nope' }")

    assert metadata == {}


def test_parse_metadata_export_without_declaration_is_noop() -> None:
    text = "# Plain\n\nexport default function Page() {}\n"

    assert parse_metadata_export(text) == ({}, text)


def test_extract_metadata_values_allows_apostrophes_in_double_quotes() -> None:
    metadata = extract_metadata_values('{ title: "It\'s here", description: \'Say "hi"\' }')

    assert metadata == {"title": "It's here", "description": 'Say "hi"'}


def test_extract_metadata_values_skips_empty_tag_lists() -> None:
    assert extract_metadata_values("{ tags: ['', ' '] }") == {}


def test_parse_metadata_export_stops_at_first_closing_brace() -> None:
    text = (
        "export const metadata = {\n"
        "  title: 'Nested',\n"
        "  slug: 'kept',\n"
        "  openGraph: {\n"
        "    images: ['cover.png']\n"
        "  }\n"
        "};\n"
        "Body\n"
    )

    metadata, body = parse_metadata_export(text)

    assert metadata == {"title": "Nested", "slug": "kept"}
    assert body == "};\nBody\n"
