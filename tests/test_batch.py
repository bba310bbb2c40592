"""Tests for batch calendar generation."""

import logging
from datetime import datetime, timezone

from weddings.calendar import generate_all, generate_file, list_slugs
from weddings.loader import DetailsLoader

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def test_list_slugs_excludes_reserved(config, write_details, details_document):
    write_details("priya-dev", details_document)
    write_details("asha-rohan", details_document)
    write_details("template", details_document)
    (config.data_dir / "notes.txt").write_text("not a document")

    assert list_slugs(config.data_dir, config.reserved_slugs) == ["asha-rohan", "priya-dev"]


def test_list_slugs_missing_directory(tmp_path):
    assert list_slugs(tmp_path / "nowhere") == []


def test_generate_file_writes_crlf(config, write_details, details_document):
    write_details("priya-dev", details_document)
    path = generate_file("priya-dev", config, now=NOW)

    assert path == config.calendar_dir / "priya-dev.ics"
    raw = path.read_bytes()
    assert raw.startswith(b"BEGIN:VCALENDAR\r\n")
    assert b"UID:priya-dev-brunch@jiteshgosar.com\r\n" in raw
    assert b"\n" not in raw.replace(b"\r\n", b"")


def test_generate_file_warns_without_password(config, write_details, details_document, caplog):
    del details_document["password"]
    write_details("priya-dev", details_document)

    with caplog.at_level(logging.WARNING):
        path = generate_file("priya-dev", config, loader=DetailsLoader(), now=NOW)

    assert path.exists()
    assert 'priya-dev.json missing "password"' in caplog.text


def test_generate_all_skips_bad_files(config, write_details, details_document, caplog):
    """A broken document is reported and the others are still written."""
    write_details("asha-rohan", details_document)
    write_details("broken", "{not json")
    write_details("list", "[1, 2, 3]")
    write_details("priya-dev", details_document)
    write_details("template", details_document)

    with caplog.at_level(logging.ERROR):
        result = generate_all(config, now=NOW)

    assert sorted(result.written) == ["asha-rohan", "priya-dev"]
    assert sorted(result.failed) == ["broken", "list"]
    assert not result.ok
    assert "Skipping 'broken'" in caplog.text
    assert (config.calendar_dir / "asha-rohan.ics").exists()
    assert (config.calendar_dir / "priya-dev.ics").exists()
    assert not (config.calendar_dir / "broken.ics").exists()
    assert not (config.calendar_dir / "template.ics").exists()


def test_generate_all_explicit_slugs(config, write_details, details_document):
    write_details("priya-dev", details_document)
    result = generate_all(config, slugs=["priya-dev", "missing"], now=NOW)

    assert list(result.written) == ["priya-dev"]
    assert list(result.failed) == ["missing"]


def test_generate_all_is_idempotent(config, write_details, details_document):
    write_details("priya-dev", details_document)
    generate_all(config, now=NOW)
    first = (config.calendar_dir / "priya-dev.ics").read_bytes()
    generate_all(config, now=NOW)
    assert (config.calendar_dir / "priya-dev.ics").read_bytes() == first


def test_generate_all_empty(config):
    result = generate_all(config, now=NOW)
    assert result.ok
    assert result.written == {}
