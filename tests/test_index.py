"""Folder index tests."""

from __future__ import annotations

from pathlib import Path

from ctxkit.index import (
    collect_files,
    generate_index,
    generate_index_readable,
    group_by_directory,
)


def build_tree(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    (root / "guides" / "deep").mkdir(parents=True)
    (root / "b.txt").write_text("b")
    (root / "a.MD").write_text("a")
    (root / "logo.png").write_bytes(b"\x89PNG")
    (root / "guides" / "setup.txt").write_text("setup")
    (root / "guides" / "intro.mdx").write_text("intro")
    (root / "guides" / "deep" / "notes.md").write_text("notes")
    return root


def test_collect_files_matches_extensions_case_insensitively(tmp_path: Path) -> None:
    root = build_tree(tmp_path)
    assert sorted(collect_files(root)) == [
        "a.MD",
        "b.txt",
        "guides/deep/notes.md",
        "guides/intro.mdx",
        "guides/setup.txt",
    ]


def test_group_by_directory() -> None:
    tree = group_by_directory(["z.md", "a.md", "dir/b.md"])
    assert tree == {".": ["a.md", "z.md"], "dir": ["b.md"]}


def test_generate_index_compact_format(tmp_path: Path) -> None:
    root = build_tree(tmp_path)
    assert generate_index(root, name="docs") == (
        "<!-- INDEX -->[docs]|root:.|Read files from this folder as needed."
        "|{a.MD,b.txt}"
        "|guides:{intro.mdx,setup.txt}"
        "|guides/deep:{notes.md}"
        "|<!-- /INDEX -->"
    )


def test_generate_index_custom_extensions_and_instruction(tmp_path: Path) -> None:
    root = build_tree(tmp_path)
    index = generate_index(root, extensions=(".txt",), instruction="Ask first.")
    assert index == (
        "<!-- INDEX -->[Docs Index]|root:.|Ask first.|{b.txt}"
        "|guides:{setup.txt}|<!-- /INDEX -->"
    )


def test_generate_index_empty_folder(tmp_path: Path) -> None:
    assert generate_index(tmp_path, name="empty") == (
        "<!-- INDEX -->[empty]|root:.|Read files from this folder as needed.|<!-- /INDEX -->"
    )


def test_generate_index_readable(tmp_path: Path) -> None:
    root = build_tree(tmp_path)
    lines = generate_index_readable(root, name="docs").splitlines()
    assert lines == [
        "# docs",
        f"Root: {root}",
        "Use retrieval to read specific files as needed.",
        "",
        "Files:",
        "  (root): a.MD, b.txt",
        "  guides: intro.mdx, setup.txt",
        "  guides/deep: notes.md",
    ]
