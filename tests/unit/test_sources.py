"""Tests for loading shader sources from disk."""
from __future__ import annotations

import pytest

from glsl_include.core.exceptions import DuplicateSourceError, SourceNotFoundError
from glsl_include.core.sources import load_sources, merge_files, merger_from_paths


def test_files_registered_under_their_file_name(fixtures_dir):
    case = fixtures_dir / "case6"
    sources = load_sources([case / "base.frag", case / "incl2.frag"])
    assert list(sources) == ["base.frag", "incl2.frag"]
    assert sources["incl2.frag"] == "#pragma once\nfloat incl2() { return 2.0; }\n"


def test_directory_filtered_by_extension(tmp_path):
    (tmp_path / "main.frag").write_text("#include <lib.glsl>\n", encoding="utf-8")
    (tmp_path / "lib.glsl").write_text("float lib;\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignore me\n", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "deep.glsl").write_text("float deep;\n", encoding="utf-8")

    sources = load_sources([tmp_path], extensions=[".frag", ".glsl"])
    assert sorted(sources) == ["lib.glsl", "main.frag"]


def test_directory_without_extension_filter_takes_every_file(tmp_path):
    (tmp_path / "a").write_text("A", encoding="utf-8")
    (tmp_path / "b.txt").write_text("B", encoding="utf-8")
    assert sorted(load_sources([tmp_path])) == ["a", "b.txt"]


def test_line_endings_preserved(tmp_path):
    (tmp_path / "crlf.glsl").write_bytes(b"float a;\r\nfloat b;\r\n")
    assert load_sources([tmp_path / "crlf.glsl"])["crlf.glsl"] == "float a;\r\nfloat b;\r\n"


def test_missing_path(tmp_path):
    with pytest.raises(SourceNotFoundError) as exc_info:
        load_sources([tmp_path / "nope.frag"])
    assert exc_info.value.context == {"path": str(tmp_path / "nope.frag")}


def test_duplicate_names(tmp_path):
    for sub in ("one", "two"):
        (tmp_path / sub).mkdir()
        (tmp_path / sub / "common.glsl").write_text("float c;\n", encoding="utf-8")

    with pytest.raises(DuplicateSourceError) as exc_info:
        load_sources([tmp_path / "one", tmp_path / "two"])
    assert exc_info.value.context["name"] == "common.glsl"


def test_merge_files(fixtures_dir, read_case):
    case = fixtures_dir / "case6"
    paths = [case / name for name in ("base.frag", "incl0.frag", "incl1.frag", "incl2.frag")]
    assert merge_files(paths) == read_case("case6", "result.frag")


def test_merger_from_paths_passes_options(tmp_path):
    (tmp_path / "main.frag").write_text("/*\n#include <x>\n*/\n", encoding="utf-8")
    merger = merger_from_paths([tmp_path], [".frag"], skip_block_comments=True)
    assert merger.scanner.skip_block_comments
    assert merger.merge() == "/*\n#include <x>\n*/\n"
