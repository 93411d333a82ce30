"""Folder index generation.

The compact index is a single pipe-delimited line meant to be pasted into a
prompt so the model knows which files exist and can ask for them:

    <!-- INDEX -->[Name]|root:.|instruction|{a.txt,b.txt}|guides:{setup.txt}|<!-- /INDEX -->
"""

from collections import defaultdict
from pathlib import Path, PurePosixPath

DEFAULT_EXTENSIONS = (".md", ".mdx", ".txt")


def collect_files(root: str | Path, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS) -> list[str]:
    """Recursively collect files with the given extensions.

    Args:
        root: Folder to walk.
        extensions: Extensions to keep (compared case-insensitively).

    Returns:
        POSIX-style paths relative to root.
    """
    root = Path(root)
    wanted = {ext.lower() for ext in extensions}
    return [
        path.relative_to(root).as_posix()
        for path in root.rglob("*")
        if path.is_file() and path.suffix.lower() in wanted
    ]


def group_by_directory(files: list[str]) -> dict[str, list[str]]:
    """Map each directory (``.`` for root) to its sorted file names."""
    tree: dict[str, list[str]] = defaultdict(list)
    for file in files:
        path = PurePosixPath(file)
        tree[str(path.parent)].append(path.name)
    return {directory: sorted(names) for directory, names in tree.items()}


def generate_index(
    root: str | Path,
    name: str = "Docs Index",
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    instruction: str = "Read files from this folder as needed.",
) -> str:
    """Generate a compressed one-line index of a documentation folder."""
    tree = group_by_directory(collect_files(root, extensions))

    # "." as root since the index lives in the folder
    parts = [f"<!-- INDEX -->[{name}]", "root:.", instruction]
    for directory in sorted(tree):
        file_list = ",".join(tree[directory])
        if directory == ".":
            parts.append(f"{{{file_list}}}")
        else:
            parts.append(f"{directory}:{{{file_list}}}")
    parts.append("<!-- /INDEX -->")

    return "|".join(parts)


def generate_index_readable(
    root: str | Path,
    name: str = "Docs Index",
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    instruction: str = "Use retrieval to read specific files as needed.",
) -> str:
    """Generate a multi-line index for humans."""
    tree = group_by_directory(collect_files(root, extensions))

    lines = [f"# {name}", f"Root: {root}", instruction, "", "Files:"]
    for directory in sorted(tree):
        display_dir = "(root)" if directory == "." else directory
        lines.append(f"  {display_dir}: {', '.join(tree[directory])}")

    return "\n".join(lines)
