"""deckedit — Inspect and surgically edit an HTML slide deck."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from .engine import EditError, apply_operation
from .locator import find_slides
from .operations import EditOperation, describe_operation, load_operations
from .slide_map import extract_slide_map, format_slide_map
from .utils import extract_title, read_html, write_html

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    """Attach stderr and/or file debug handlers to the package logger."""
    package_logger = logging.getLogger("deckedit")
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(logging.NullHandler())

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(file_handler)


def _require_file(path: Path) -> None:
    if not path.exists():
        print(f"Error: {path} not found.", file=sys.stderr)
        sys.exit(1)


def _operation_label(op: EditOperation) -> str:
    """Operation type plus its slide index, e.g. ``deleteSlide 9``."""
    index = getattr(op, "slide_index", getattr(op, "after_index", None))
    return op.type if index is None else f"{op.type} {index}"


def _default_output(input_path: Path) -> Path:
    """<stem>.edited<suffix> next to the input."""
    return input_path.with_name(f"{input_path.stem}.edited{input_path.suffix}")


def _cmd_slides(args: argparse.Namespace) -> None:
    html = read_html(Path(args.input))
    slides = find_slides(html)
    for s in slides:
        print(f"{s.index}\t{s.start_offset}-{s.end_offset}\t{s.classes}\t{s.heading}")
    print(f"Found {len(slides)} slides")


def _cmd_map(args: argparse.Namespace) -> None:
    html = read_html(Path(args.input))
    entries = extract_slide_map(html)
    if args.json:
        print(json.dumps([asdict(e) for e in entries], indent=2))
    else:
        print(format_slide_map(entries))


def _cmd_apply(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    ops_path = Path(args.operations)
    _require_file(ops_path)
    output_path = Path(args.output) if args.output else _default_output(input_path)

    html = read_html(input_path)
    try:
        operations = load_operations(ops_path)
    except ValueError as exc:
        print(f"Error: invalid operations file {ops_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info("Input: %s, Operations: %s, Output: %s", input_path, ops_path, output_path)
    print(f"[1/2] Applying {len(operations)} operation(s)…")

    applied = 0
    failure: EditError | None = None
    for i, op in enumerate(operations, start=1):
        try:
            html = apply_operation(html, op)
        except EditError as exc:
            logger.error("Operation %d (%s) failed: %s", i, op.type, exc)
            print(f"  Error: operation {i} ({_operation_label(op)}) failed: {exc}",
                  file=sys.stderr)
            failure = exc
            break
        applied += 1
        print(f"  {describe_operation(op)}")

    print("[2/2] Writing output…")
    write_html(output_path, html)
    title = extract_title(html, default=input_path.stem)
    logger.info("Done: %d of %d operation(s) applied, output=%s", applied, len(operations), output_path)
    print(f"\nApplied {applied} of {len(operations)} operation(s) to \"{title}\".")
    print(f"Output: {output_path}")

    if failure is not None:
        sys.exit(1)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="deckedit",
        description="Inspect and surgically edit an HTML slide deck.",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug output to stderr")
    parser.add_argument("--log-file", help="Also write a debug log to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    slides_parser = subparsers.add_parser("slides", help="List slide boundaries")
    slides_parser.add_argument("input", help="Path to the HTML deck")
    slides_parser.set_defaults(func=_cmd_slides)

    map_parser = subparsers.add_parser("map", help="Print the compact slide map")
    map_parser.add_argument("input", help="Path to the HTML deck")
    map_parser.add_argument("--json", action="store_true", help="Print the map as JSON")
    map_parser.set_defaults(func=_cmd_map)

    apply_parser = subparsers.add_parser("apply", help="Apply a batch of edit operations")
    apply_parser.add_argument("input", help="Path to the HTML deck")
    apply_parser.add_argument("operations",
                              help="JSON file: a list of operations or {\"operations\": [...]}")
    apply_parser.add_argument("--output",
                              help="Output HTML path (default: <input>.edited.html)")
    apply_parser.set_defaults(func=_cmd_apply)

    args = parser.parse_args()

    _require_file(Path(args.input))
    _configure_logging(args.verbose, args.log_file)
    logger.info("CLI arguments: %s", {k: v for k, v in vars(args).items() if k != "func"})

    try:
        args.func(args)
    except Exception:
        logger.exception("Command %s failed", args.command)
        raise


if __name__ == "__main__":
    main()
