"""End-to-end tests for IncludeMerger using the fixture shader sets."""
from __future__ import annotations

import logging

import pytest

from glsl_include import (
    AmbiguousRootError,
    CyclicDependencyError,
    IncludeMerger,
    MergeError,
    MissingDependencyError,
    merge_sources,
)


def _merger(sources, **kwargs):
    merger = IncludeMerger(**kwargs)
    for name, content in sources.items():
        merger.add(name, content)
    return merger


# Ensure that each file is only included once.
def test_case0_pragma_once_sources_included_once(case_sources, read_case):
    sources = case_sources(
        "case0", ["base.frag", "incl0.frag", "incl1.frag", "incl2.frag", "incl3.frag"]
    )
    assert _merger(sources).merge() == read_case("case0", "result.frag")


# Ensure that #includes in comments are ignored.
def test_case1_commented_includes_ignored(case_sources, read_case):
    sources = case_sources("case1", ["base.frag", "incl0.frag"])
    assert _merger(sources).merge() == read_case("case1", "result.frag")


# Ensure that the number of whitespaces before and between the #include does not matter.
def test_case2_whitespace_does_not_matter(case_sources, read_case):
    sources = case_sources("case2", ["base.frag", "incl0.frag"])
    assert _merger(sources).merge() == read_case("case2", "result.frag")


def test_case3_missing_source(case_sources):
    merger = _merger(case_sources("case3", ["base.frag"]))
    with pytest.raises(MissingDependencyError) as exc_info:
        merger.merge()
    assert str(exc_info.value) == "Cannot include missing source incl0.frag."
    assert exc_info.value.name == "incl0.frag"


def test_case4_cyclic_dependency(case_sources):
    merger = _merger(
        case_sources("case4", ["base.frag", "incl0.frag", "incl1.frag", "incl2.frag"])
    )
    with pytest.raises(CyclicDependencyError) as exc_info:
        merger.merge()
    assert str(exc_info.value) == "Cyclic dependency detected."
    assert sorted(exc_info.value.names) == ["incl0.frag", "incl1.frag", "incl2.frag"]


# Ensure that there is only 1 "base" file.
def test_case5_single_base(read_case):
    merger = IncludeMerger()
    merger.add("base0.frag", read_case("case5", "base.frag"))
    merger.add("base1.frag", read_case("case5", "base.frag"))
    merger.add("incl0.frag", read_case("case5", "incl0.frag"))
    merger.add("incl1.frag", read_case("case5", "incl1.frag"))
    with pytest.raises(AmbiguousRootError) as exc_info:
        merger.merge()
    assert exc_info.value.candidates == ["base0.frag", "base1.frag"]

    merger.remove("base1.frag")
    assert "float incl1() { return 1.0; }" in merger.merge()


# Ensure that #pragma once works
def test_case6_pragma_once(case_sources, read_case):
    sources = case_sources("case6", ["base.frag", "incl0.frag", "incl1.frag", "incl2.frag"])
    merged = _merger(sources).merge()
    assert merged == read_case("case6", "result.frag")
    assert merged.count("float incl2()") == 1
    assert "#pragma once" not in merged


def test_build_is_merge(case_sources):
    merger = _merger(case_sources("case6", ["base.frag", "incl0.frag", "incl1.frag", "incl2.frag"]))
    assert merger.build() == merger.merge()


def test_merge_is_idempotent(case_sources):
    sources = case_sources(
        "case0", ["base.frag", "incl0.frag", "incl1.frag", "incl2.frag", "incl3.frag"]
    )
    merger = _merger(sources)
    first = merger.merge()
    assert merger.merge() == first
    assert {name: merger.get(name) for name in merger.names} == sources


def test_registration_order_does_not_change_output(case_sources, read_case):
    names = ["incl3.frag", "incl1.frag", "base.frag", "incl2.frag", "incl0.frag"]
    merged = _merger(case_sources("case0", names)).merge()
    assert merged == read_case("case0", "result.frag")


def test_add_replaces_existing_source():
    merger = IncludeMerger()
    merger.add("main.frag", "void old() {}\n")
    merger.add("main.frag", "void main() {}\n")
    assert len(merger) == 1
    assert merger.get("main.frag") == "void main() {}\n"
    assert merger.merge() == "void main() {}\n"


def test_registry_operations():
    merger = IncludeMerger()
    assert merger.get("missing") is None
    merger.remove("missing")

    merger.add("a", "A")
    merger.add("b", "B")
    assert "a" in merger
    assert list(merger) == ["a", "b"]

    merger.remove("a")
    assert "a" not in merger
    assert merger.names == ("b",)

    merger.clear()
    assert len(merger) == 0


def test_no_validation_until_merge():
    merger = IncludeMerger()
    merger.add("base", "#include <later>\n")
    with pytest.raises(MissingDependencyError):
        merger.merge()
    merger.add("later", "float later;\n")
    assert merger.merge() == "float later;\n\n"


def test_single_root_invariant():
    merger = IncludeMerger()
    merger.add("base", "#include <lib>\n")
    merger.add("lib", "float lib;\n")
    merger.merge()

    merger.add("other", "void other() {}\n")
    with pytest.raises(AmbiguousRootError):
        merger.merge()


def test_order_and_graph():
    merger = IncludeMerger()
    merger.add("base", "#include <a>\n#include <b>\n")
    merger.add("a", "#include <b>\n")
    merger.add("b", "")
    assert merger.order() == ["b", "a", "base"]
    assert merger.graph().in_edges["b"] == {"a", "base"}


def test_errors_share_merge_base_class():
    merger = IncludeMerger()
    with pytest.raises(MergeError) as exc_info:
        merger.merge()
    assert exc_info.value.to_json_error() == {
        "message": "There must be exactly 1 file which is not included by any other file.",
        "code": "AmbiguousRootError",
        "context": {"candidates": []},
    }


def test_skip_block_comments_option():
    sources = {
        "base": "/*\n#include <debug.glsl>\n*/\n#include <lib.glsl>\n",
        "lib.glsl": "float lib;\n",
    }
    # Baseline line anchoring sees the commented directive and fails on it.
    with pytest.raises(MissingDependencyError):
        _merger(sources).merge()

    merged = _merger(sources, skip_block_comments=True).merge()
    assert merged == "/*\n#include <debug.glsl>\n*/\nfloat lib;\n\n"


def test_merge_sources_helper():
    assert merge_sources({"base": "#include <a>\n", "a": "A\n"}) == "A\n\n"


def test_pragma_once_with_trailing_comment():
    merged = merge_sources(
        {
            "base": "#include <x>\n#include <y>\n",
            "x": "#include <c>\n",
            "y": "#include <c>\n",
            "c": "#pragma once // guard\nfloat c;\n",
        }
    )
    assert merged == "// guard\nfloat c;\n\n\n\n"
    assert merged.count("float c;") == 1


def test_form_feed_does_not_start_a_line():
    merged = merge_sources({"base": "float x;\f#include <a>\n#include <b>\n", "b": "B\n"})
    assert merged == "float x;\f#include <a>\nB\n\n"


def test_merge_logs_root(caplog):
    with caplog.at_level(logging.DEBUG, logger="glsl_include"):
        merge_sources({"base": "#include <a>\n", "a": "A\n"})
    assert "root base" in caplog.text
