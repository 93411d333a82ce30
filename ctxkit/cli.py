"""ctxkit command line.

Usage:
    ctxkit compress docs/                  # creates docs.compressed/
    ctxkit compress docs/ -o .compressed/  # creates .compressed/
    ctxkit compress docs/ --stats          # show compression statistics
    ctxkit index docs.compressed/          # creates docs.compressed/index.txt
    ctxkit index docs/ -o my-index.txt --readable
"""

import argparse
import logging
import sys
from pathlib import Path

from ctxkit.batch import compress_folder
from ctxkit.config import Settings
from ctxkit.index import generate_index, generate_index_readable
from ctxkit.stats import TokenCounter, format_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctxkit",
        description="Pre-compress markdown documentation for LLM token efficiency",
        epilog="Typical workflow: ctxkit compress docs/ && ctxkit index docs.compressed/",
    )
    subparsers = parser.add_subparsers(dest="command")

    compress_parser = subparsers.add_parser(
        "compress", help="Compress all markdown files in folder"
    )
    compress_parser.add_argument("folder", type=str, help="Folder of .md/.mdx files")
    compress_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output folder (default: <folder>.compressed)",
    )
    compress_parser.add_argument(
        "--stats",
        action="store_true",
        help="Show compression statistics",
    )
    compress_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar (shown by default when stderr is a terminal)",
    )

    index_parser = subparsers.add_parser(
        "index", help="Generate index of folder contents"
    )
    index_parser.add_argument("folder", type=str, help="Folder to index")
    index_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file (default: <folder>/index.txt)",
    )
    index_parser.add_argument(
        "--readable",
        action="store_true",
        help="Write the multi-line human-readable index",
    )
    return parser


def run_compress(args: argparse.Namespace, settings: Settings) -> int:
    counter = TokenCounter(settings.tokenizer_model) if args.stats else None
    result = compress_folder(
        args.folder,
        output_dir=args.output,
        collect_stats=args.stats,
        counter=counter,
        max_input_chars=settings.max_input_chars,
        show_progress=not args.no_progress and sys.stderr.isatty(),
    )

    print(f"Compressed {result.num_files} files → {result.output_dir}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} files over {settings.max_input_chars} chars")

    if args.stats and result.stats:
        print(format_stats(result.stats, settings.tokenizer_model))
    return 0


def run_index(args: argparse.Namespace) -> int:
    input_path = Path(args.folder).resolve()
    if not input_path.exists():
        raise FileNotFoundError(f"Folder not found: {args.folder}")
    if not input_path.is_dir():
        raise NotADirectoryError(f"index requires a folder, not a file: {args.folder}")

    output_path = Path(args.output).resolve() if args.output else input_path / "index.txt"
    generate = generate_index_readable if args.readable else generate_index
    content = generate(input_path, name=input_path.name)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")

    print(f"Index created → {output_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    try:
        settings = Settings.from_env()
        logging.basicConfig(
            level=settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
        if args.command == "compress":
            return run_compress(args, settings)
        return run_index(args)
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
