"""Command-line interface for the Wordlist Converter.

WHY: Dictionary maintainers need a simple way to join a unigram list
with its shortcut and bigram files and produce a normalized wordlist
from the terminal. The CLI wires together file validation, the
dictionary assembler, pluggable formatter output, and file saving
behind a single command.

HOW: Uses argparse to accept the unigram file, optional shortcut and
bigram files, output format selection, and output directory. Status
messages go to stderr; output files are saved next to the unigram file
(or to --output-dir).

RULES:
- Positional argument: unigram XML file path
- --shortcuts / --bigrams: optional relation files
- --formats: comma-separated formatter keys (default: WORDLIST_DEFAULT_FORMATS)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-wordlist-2.xml)
- Status output goes to stderr (not stdout)
- Every DictionaryError exits with status 1 and an "Error:" line
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from wordlist_converter.config import DEFAULT_FORMATS, LOG_LEVEL
from wordlist_converter.core.assembler import read_dictionary_files
from wordlist_converter.errors import DictionaryError
from wordlist_converter.formatters import FORMATTERS
from wordlist_converter.formatters.base import FormatterOutput


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the converter multiple times on the same file.
    Overwriting previous output would lose work. Numeric suffixes
    (-wordlist-2.xml) prevent data loss.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. en-wordlist.xml)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. en-wordlist-2.xml)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-wordlist.xml" → ("-wordlist", ".xml")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk as UTF-8 text."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_format_keys(formats: str) -> List[str]:
    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def _run_pipeline(args: argparse.Namespace) -> List[Path]:
    """Execute the full conversion pipeline.

    RULES:
    - Validate every input file and the output directory before reading
    - Relation files are read before the unigram file (by the assembler)
    - Save each formatter's output files with conflict avoidance
    """
    unigrams_path = Path(args.unigrams).resolve()
    relation_paths = {
        "Shortcut": args.shortcuts,
        "Bigram": args.bigrams,
    }

    if not unigrams_path.is_file():
        _fail("File not found: {}".format(unigrams_path))
    for label, path in relation_paths.items():
        if path is not None and not Path(path).is_file():
            _fail("{} file not found: {}".format(label, path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else unigrams_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys = _parse_format_keys(args.formats)

    _status("Reading dictionary...")
    for label, path in relation_paths.items():
        if path is not None:
            _status("  {}s: {}".format(label, path))
    _status("  Unigrams: {}".format(unigrams_path))

    try:
        lexicon = read_dictionary_files(unigrams_path, args.shortcuts, args.bigrams)
    except DictionaryError as e:
        _fail(str(e))
    _status("  Assembled {} words".format(len(lexicon)))

    _status("Formatting output...")
    stem = unigrams_path.stem
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(lexicon):
            try:
                saved_path = _save_output(output, stem, output_dir)
            except OSError as e:
                _fail("Cannot write output: {}".format(e))
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="wordlist_converter",
        description="Join a unigram wordlist with its shortcut and bigram files "
                    "and write the result as wordlist XML or combined text.",
    )

    parser.add_argument(
        "unigrams",
        help="Path to the unigram wordlist XML file.",
    )

    parser.add_argument(
        "--shortcuts",
        default=None,
        help="Path to a shortcut XML file (<entry>/<target> elements).",
    )

    parser.add_argument(
        "--bigrams",
        default=None,
        help="Path to a bigram XML file (<bi>/<w> elements).",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as the unigram file).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log reader progress to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        _run_pipeline(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
