# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from pathlib import Path

from jbr_resolver.bundled import DEPENDENCIES_FILE, bundled_runtime_build, parse_properties


def test_parse_properties_handles_separators_and_comments() -> None:
    text = """
# build metadata
! legacy comment
runtimeBuild=17.0.9b1087.7
kotlin : 1.9.20
javaVersion 17
long = first \\
       second
empty
"""

    properties = parse_properties(text)

    assert properties == {
        "runtimeBuild": "17.0.9b1087.7",
        "kotlin": "1.9.20",
        "javaVersion": "17",
        "long": "first second",
        "empty": "",
    }


def test_bundled_runtime_build_prefers_runtime_build(tmp_path: Path) -> None:
    (tmp_path / DEPENDENCIES_FILE).write_text("jdkBuild=11_0_10b1341.41\nruntimeBuild=17.0.6b829.5\n", encoding="utf-8")

    assert bundled_runtime_build(tmp_path) == "17.0.6b829.5"


def test_bundled_runtime_build_falls_back_to_jdk_build(tmp_path: Path) -> None:
    (tmp_path / DEPENDENCIES_FILE).write_text("jdkBuild=11_0_10b1341.41\n", encoding="utf-8")

    assert bundled_runtime_build(tmp_path) == "11_0_10b1341.41"


def test_bundled_runtime_build_missing(tmp_path: Path) -> None:
    assert bundled_runtime_build(tmp_path) is None
    (tmp_path / DEPENDENCIES_FILE).write_text("kotlin=1.9.20\n", encoding="utf-8")
    assert bundled_runtime_build(tmp_path) is None


def test_parse_properties_consumes_a_single_separator() -> None:
    assert parse_properties("runtimeBuild==17.0.8\n") == {"runtimeBuild": "=17.0.8"}
    assert parse_properties("runtimeBuild : =17\n") == {"runtimeBuild": "=17"}


def test_parse_properties_counts_trailing_backslashes() -> None:
    text = "odd=a\\\\\\\n  b\neven=c\\\\\nnext=d\n"

    properties = parse_properties(text)

    assert properties == {"odd": "a\\b", "even": "c\\", "next": "d"}


def test_parse_properties_unescapes_keys_and_values() -> None:
    text = "key\\:with\\=separators = tab\\there\nunicode=\\u0041\\u00e9\nplain\\ key=value\n"

    properties = parse_properties(text)

    assert properties == {
        "key:with=separators": "tab\there",
        "unicode": "Aé",
        "plain key": "value",
    }


def test_parse_properties_keeps_comment_text_inside_continuation() -> None:
    assert parse_properties("a=1\\\n# not a comment\n") == {"a": "1# not a comment"}
