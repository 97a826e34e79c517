from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from variant_diff import __version__
from variant_diff.algorithm.config import (
    DEFAULT_MODIFY_THRESHOLD,
    DEFAULT_SUGGESTION_THRESHOLD,
    DiffConfig,
    SuggestionConfig,
)
from variant_diff.algorithm.pairing import LineDiffComposer
from variant_diff.algorithm.similarity import content_similarity, string_similarity
from variant_diff.comparator import VariantComparator
from variant_diff.logging_config import configure_logging, get_logger
from variant_diff.render import build_split_view, summarize
from variant_diff.result import LineDiffEntry, LineKind
from variant_diff.suggester import MappingSuggester
from variant_diff.tree import FileMapping, read_file_tree

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2

_PREFIXES = {
    LineKind.EQUAL: " ",
    LineKind.REMOVE: "-",
    LineKind.ADD: "+",
    LineKind.MODIFY: "~",
}


def _add_json_flag(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", action="store_true", help="Emit JSON instead of text.")


def _add_max_bytes_flag(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--max-bytes",
        type=_positive_int,
        default=None,
        help="Skip files larger than this many bytes.",
    )


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        msg = f"must be a positive integer, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="variant-diff",
        description="Line diffs and rename suggestions for exam variants.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages written to stderr.",
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Write logs as JSON lines."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    diff_p = subparsers.add_parser("diff", help="Line diff of two files.")
    diff_p.add_argument("base", type=Path)
    diff_p.add_argument("variant", type=Path)
    diff_p.add_argument(
        "--modify-threshold",
        type=float,
        default=DEFAULT_MODIFY_THRESHOLD,
        help="Similarity a removed/added pair must exceed to become a modify.",
    )
    diff_p.add_argument(
        "--no-cleanup",
        action="store_true",
        help="Skip semantic cleanup of inline character segments (JSON only).",
    )
    _add_json_flag(diff_p)

    sim_p = subparsers.add_parser(
        "similarity", help="Content similarity of two files, or of two lines."
    )
    sim_p.add_argument("a")
    sim_p.add_argument("b")
    sim_p.add_argument(
        "--lines",
        action="store_true",
        help="Treat A and B as single lines of text and report string similarity.",
    )
    _add_json_flag(sim_p)

    suggest_p = subparsers.add_parser(
        "suggest", help="Suggest renamed files between two directories."
    )
    suggest_p.add_argument("base_dir", type=Path)
    suggest_p.add_argument("variant_dir", type=Path)
    suggest_p.add_argument(
        "--label", default=None, help="Variant label (defaults to the folder name)."
    )
    _add_max_bytes_flag(suggest_p)
    suggest_p.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_SUGGESTION_THRESHOLD,
        help="Minimum content similarity percentage (0-100).",
    )
    _add_json_flag(suggest_p)

    compare_p = subparsers.add_parser(
        "compare", help="Compare a base directory with variant directories."
    )
    compare_p.add_argument("base_dir", type=Path)
    compare_p.add_argument("variant_dirs", type=Path, nargs="+")
    compare_p.add_argument(
        "--mappings",
        type=Path,
        default=None,
        help="JSON file with a list of {baseFile, variantFile, variantLabel}.",
    )
    _add_max_bytes_flag(compare_p)
    _add_json_flag(compare_p)

    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _label_for(path: Path) -> str:
    return path.resolve().name or str(path)


def _format_entry(entry: LineDiffEntry) -> str:
    prefix = _PREFIXES[entry.kind]
    if entry.kind == LineKind.MODIFY:
        return f"{prefix} {entry.base} => {entry.variant}"
    text = entry.base if entry.base is not None else entry.variant
    return f"{prefix} {text}"


def _load_mappings(path: Path) -> list[FileMapping]:
    data = json.loads(_read_text(path))
    if not isinstance(data, list):
        msg = f"{path}: expected a JSON list of mappings"
        raise ValueError(msg)
    try:
        return [FileMapping.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        msg = f"{path}: invalid mapping entry ({e})"
        raise ValueError(msg) from e


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_diff(args: argparse.Namespace) -> int:
    config = DiffConfig(
        modify_threshold=args.modify_threshold,
        semantic_cleanup=not args.no_cleanup,
    )
    entries = LineDiffComposer(config.modify_threshold).compose(
        _read_text(args.base), _read_text(args.variant)
    )
    if args.json:
        view = build_split_view(entries, cleanup=config.semantic_cleanup)
        _print_json(
            {
                "lineDiff": [entry.to_dict() for entry in entries],
                "view": view.to_dict(),
            }
        )
        return EXIT_OK

    for entry in entries:
        print(_format_entry(entry))
    summary = summarize(entries)
    _eprint(f"+{summary.added} -{summary.removed} ~{summary.modified}")
    return EXIT_OK


def cmd_similarity(args: argparse.Namespace) -> int:
    if args.lines:
        score = string_similarity(args.a, args.b)
        if args.json:
            _print_json({"stringSimilarity": score})
        else:
            print(f"string: {score:.4f}")
        return EXIT_OK

    content_score = content_similarity(
        _read_text(Path(args.a)), _read_text(Path(args.b))
    )
    if args.json:
        _print_json({"contentSimilarity": content_score})
    else:
        print(f"content: {content_score}%")
    return EXIT_OK


def cmd_suggest(args: argparse.Namespace) -> int:
    config = SuggestionConfig(threshold=args.threshold)
    label = args.label or _label_for(args.variant_dir)
    base_tree = read_file_tree(args.base_dir, max_bytes=args.max_bytes)
    variant_tree = read_file_tree(args.variant_dir, max_bytes=args.max_bytes)

    suggester = MappingSuggester(config=config)
    suggestions = suggester.suggest(base_tree, variant_tree, label)
    if args.json:
        _print_json([s.to_dict() for s in suggestions])
        return EXIT_OK

    if not suggestions:
        _eprint("no suggestions")
    for s in suggestions:
        print(f"{s.similarity:3d}%  {s.base_file} -> {s.variant_file}")
    return EXIT_OK


def cmd_compare(args: argparse.Namespace) -> int:
    base_tree = read_file_tree(args.base_dir, max_bytes=args.max_bytes)
    variants: list[tuple[str, Mapping[str, str] | None]] = []
    for variant_dir in args.variant_dirs:
        label = _label_for(variant_dir)
        if variant_dir.is_dir():
            variants.append(
                (label, read_file_tree(variant_dir, max_bytes=args.max_bytes))
            )
        else:
            logger.warning(
                "variant folder missing", variant=label, path=str(variant_dir)
            )
            variants.append((label, None))

    mappings = _load_mappings(args.mappings) if args.mappings is not None else []
    comparisons = VariantComparator().compare_trees(base_tree, variants, mappings)

    if args.json:
        _print_json([c.to_dict() for c in comparisons])
        return EXIT_OK

    for comparison in comparisons:
        print(comparison.relative_path)
        for variant in comparison.variants:
            if not variant.exists:
                status = "missing"
            elif not variant.has_difference:
                status = "same"
            else:
                summary = summarize(variant.line_diff)
                status = f"+{summary.added} -{summary.removed} ~{summary.modified}"
            print(f"  {variant.variant}: {status}")
    _eprint(f"{len(comparisons)} differing file(s)")
    return EXIT_OK


_COMMANDS = {
    "diff": cmd_diff,
    "similarity": cmd_similarity,
    "suggest": cmd_suggest,
    "compare": cmd_compare,
}


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and parse errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_INPUT_ERROR

    configure_logging(args.log_level, json_logs=args.json_logs)

    try:
        return _COMMANDS[args.command](args)
    except (OSError, ValueError) as e:
        logger.error("command failed", command=args.command, error=str(e))
        _eprint(f"error: {e}")
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
