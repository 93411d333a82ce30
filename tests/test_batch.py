"""Batch folder compression tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ctxkit.batch import (
    compress_folder,
    default_output_dir,
    get_markdown_files,
    get_output_path,
)


class WordCounter:
    def count(self, text: str) -> int:
        return len(text.split())


def build_docs(tmp_path: Path) -> Path:
    docs = tmp_path / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "a.md").write_text("# A\n\nHello **world**.\n", encoding="utf-8")
    (docs / "guide" / "b.mdx").write_text("- item one\n- item two\n", encoding="utf-8")
    (docs / "notes.txt").write_text("not markdown", encoding="utf-8")
    return docs


def test_get_markdown_files_filters_extensions(tmp_path: Path) -> None:
    docs = build_docs(tmp_path)
    files = [f.relative_to(docs).as_posix() for f in get_markdown_files(docs)]
    assert files == ["a.md", "guide/b.mdx"]


def test_get_output_path_mirrors_tree() -> None:
    out = get_output_path(Path("/in/docs/guide/b.mdx"), Path("/in/docs"), Path("/out"))
    assert out == Path("/out/guide/b.txt")
    assert get_output_path(Path("/in/a.md"), Path("/in"), Path("/out")) == Path("/out/a.txt")


def test_default_output_dir_is_sibling() -> None:
    assert default_output_dir(Path("/work/docs")) == Path("/work/docs.compressed")


def test_compress_folder_writes_mirrored_txt_files(tmp_path: Path) -> None:
    docs = build_docs(tmp_path)
    result = compress_folder(docs)

    out = docs.resolve().parent / "docs.compressed"
    assert result.output_dir == out
    assert result.num_files == 2
    assert (out / "a.txt").read_text(encoding="utf-8") == "A Hello world."
    assert (out / "guide" / "b.txt").read_text(encoding="utf-8") == "item one item two"
    assert not (out / "notes.txt").exists()
    assert result.stats == []


def test_compress_folder_custom_output_and_stats(tmp_path: Path) -> None:
    docs = build_docs(tmp_path)
    target = tmp_path / "custom"
    result = compress_folder(docs, target, collect_stats=True, counter=WordCounter())

    assert result.output_dir == target.resolve()
    assert (target / "a.txt").exists()
    assert [s.file for s in result.stats] == ["a.md", "guide/b.mdx"]
    assert result.stats[0].original_tokens == 4
    assert result.stats[0].compressed_tokens == 3


def test_compress_folder_skips_oversized_files(tmp_path: Path) -> None:
    docs = build_docs(tmp_path)
    (docs / "big.md").write_text("word " * 100, encoding="utf-8")

    result = compress_folder(docs, tmp_path / "out", max_input_chars=50)

    assert [p.name for p in result.skipped] == ["big.md"]
    assert not (tmp_path / "out" / "big.txt").exists()
    assert result.num_files == 2


def test_compress_folder_rejects_file(tmp_path: Path) -> None:
    docs = build_docs(tmp_path)
    with pytest.raises(NotADirectoryError):
        compress_folder(docs / "a.md")


def test_compress_folder_rejects_missing_folder(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        compress_folder(tmp_path / "missing")


def test_compress_folder_requires_markdown(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    with pytest.raises(ValueError, match="No markdown files"):
        compress_folder(empty)


def test_compress_folder_stats_need_counter(tmp_path: Path) -> None:
    docs = build_docs(tmp_path)
    with pytest.raises(ValueError, match="token counter"):
        compress_folder(docs, collect_stats=True)
