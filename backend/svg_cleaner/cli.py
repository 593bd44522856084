"""
SVG Cleaner — strips metadata, hidden elements and redundant markup.

Usage:
  svg-cleaner input.svg                   # prints cleaned SVG to terminal
  svg-cleaner input.svg -o clean.svg      # saves cleaned SVG
  svg-cleaner folder/                     # batch process folder → folder_cleaned/
  svg-cleaner folder/ -o output_folder/   # batch process folder
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from svg_cleaner.engine.batch import FileResult, SourceFile, clean_batch
from svg_cleaner.errors import NoValidFilesError
from svg_cleaner.utils.sizes import format_file_size


def _source(path: str) -> SourceFile:
    return SourceFile(name=os.path.basename(path), read=Path(path).read_bytes)


def _report(item: FileResult) -> None:
    if not item.ok:
        print(f"[{item.name}] error ({item.error.kind}): {item.error.message}")
        return
    r = item.result
    status = "optimized" if r.savings > 0 else "no savings"
    print(
        f"[{item.name}] {format_file_size(r.original_byte_size)} → "
        f"{format_file_size(r.cleaned_byte_size)} ({r.savings_percent}%, {status})"
    )


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SVG Cleaner: smaller SVGs without visual change")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each cleaning pass")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if os.path.isdir(args.input):
        # Batch mode
        names = sorted(os.listdir(args.input))
        sources = [_source(os.path.join(args.input, n)) for n in names if os.path.isfile(os.path.join(args.input, n))]
        try:
            batch = clean_batch(sources)
        except NoValidFilesError:
            print("No .svg files found in folder.")
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_cleaned"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processed {len(batch.files)} files ({len(batch.skipped)} skipped)\n")
        for item in batch.files:
            _report(item)
            if item.ok:
                _write(os.path.join(out_dir, item.name), item.result.cleaned_text)

        saved = sum(f.result.savings for f in batch.files if f.ok)
        print(f"\nDone: {batch.succeeded}/{len(batch.files)} cleaned, {format_file_size(max(saved, 0))} saved → {out_dir}")
        return 0 if batch.succeeded else 1

    # Single file
    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        return 1

    try:
        item = clean_batch([_source(args.input)]).files[0]
    except NoValidFilesError:
        print(f"Not an SVG file: {args.input}")
        return 1
    if not item.ok:
        _report(item)
        return 1

    if args.output:
        _write(args.output, item.result.cleaned_text)
        _report(item)
    else:
        print(item.result.cleaned_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
