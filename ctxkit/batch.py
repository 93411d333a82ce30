"""Compress every markdown file in a folder tree into a mirrored output tree."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from ctxkit.compression import compress
from ctxkit.stats import CompressionStats, SupportsCount, calculate_stats

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md", ".mdx")
_MARKDOWN_SUFFIX = re.compile(r"\.mdx?$")


@dataclass
class BatchResult:
    """Outcome of compressing one folder."""

    output_dir: Path
    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    stats: list[CompressionStats] = field(default_factory=list)

    @property
    def num_files(self) -> int:
        return len(self.written)


def get_markdown_files(root: Path) -> list[Path]:
    """Recursively list ``.md``/``.mdx`` files under root, sorted."""
    return sorted(
        path
        for path in root.rglob("*")
        if path.is_file() and path.name.endswith(MARKDOWN_EXTENSIONS)
    )


def get_output_path(file: Path, input_base: Path, output_base: Path) -> Path:
    """Mirror file's location under output_base with a ``.txt`` extension."""
    relative = file.relative_to(input_base).as_posix()
    return output_base / _MARKDOWN_SUFFIX.sub(".txt", relative)


def default_output_dir(input_dir: Path) -> Path:
    """``docs/`` -> ``docs.compressed/`` next to it."""
    return input_dir.parent / f"{input_dir.name}.compressed"


def compress_folder(
    input_dir: str | Path,
    output_dir: str | Path | None = None,
    collect_stats: bool = False,
    counter: SupportsCount | None = None,
    max_input_chars: int | None = None,
    show_progress: bool = False,
) -> BatchResult:
    """Compress all markdown files in a folder.

    Args:
        input_dir: Folder to read markdown from.
        output_dir: Destination folder (default: ``<input>.compressed``).
        collect_stats: Compute per-file statistics (needs a counter).
        counter: Token counter used for statistics.
        max_input_chars: Skip files longer than this many characters.
        show_progress: Show a tqdm progress bar.

    Returns:
        BatchResult listing written and skipped files.
    """
    input_path = Path(input_dir).resolve()
    if not input_path.exists():
        raise FileNotFoundError(f"Folder not found: {input_dir}")
    if not input_path.is_dir():
        raise NotADirectoryError(f"compress requires a folder, not a file: {input_dir}")
    if collect_stats and counter is None:
        raise ValueError("collect_stats requires a token counter")

    files = get_markdown_files(input_path)
    if not files:
        raise ValueError(f"No markdown files found in folder: {input_dir}")

    output_path = (
        Path(output_dir).resolve() if output_dir else default_output_dir(input_path)
    )
    output_path.mkdir(parents=True, exist_ok=True)
    result = BatchResult(output_dir=output_path)

    iterator = tqdm(files, desc="Compressing") if show_progress else files
    for file in iterator:
        content = file.read_text(encoding="utf-8")
        if max_input_chars is not None and len(content) > max_input_chars:
            logger.warning(
                f"Skipping {file}: {len(content)} chars exceeds limit of {max_input_chars}"
            )
            result.skipped.append(file)
            continue

        compressed = compress(content)
        out_file = get_output_path(file, input_path, output_path)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(compressed, encoding="utf-8")
        result.written.append(out_file)
        logger.debug(f"Compressed {file} -> {out_file}")

        if collect_stats:
            label = file.relative_to(input_path).as_posix()
            result.stats.append(calculate_stats(label, content, compressed, counter))

    logger.info(f"Compressed {result.num_files} files into {output_path}")
    return result
