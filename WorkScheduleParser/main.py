# -*- coding: utf-8 -*-
"""
Entry point: turns a schedule document (PDF, Word or text) into work entries JSON.
Usage: python main.py DOCUMENT [--output-dir DIR] [--csv] [--staff-marker NAME] [--verbose]
"""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

# Project root on the path so the package imports without installing
sys.path.insert(0, str(Path(__file__).resolve().parent))

from schedule_pipeline.errors import DocumentDecodeError, NoEntriesFoundError
from schedule_pipeline.importer import import_document, summarize

CSV_COLUMNS = [
    "date", "client", "startTime", "finishTime", "totalHours",
    "clientMiles", "commuteMiles", "worked",
]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Import work entries from a schedule document")
    parser.add_argument(
        "document",
        help="Schedule document (.pdf, .docx or .txt)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        default="output",
        help="Directory for work_entries.json (and the CSV with --csv)",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Also write a CSV summary",
    )
    parser.add_argument(
        "--staff-marker",
        default=None,
        help="Surname of the rostered staff member, never taken as a client",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every fragment decision",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    doc_path = Path(args.document)
    if not doc_path.exists():
        print(f"Error: document not found: {doc_path}", file=sys.stderr)
        return 1

    try:
        entries = import_document(doc_path, staff_marker=args.staff_marker)
    except DocumentDecodeError as e:
        print(f"Error reading document: {e}", file=sys.stderr)
        return 1
    except NoEntriesFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.text_preview:
            print(f'Text extracted preview:\n"{e.text_preview}..."', file=sys.stderr)
        return 1

    records = [entry.to_dict() for entry in entries]
    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_json = out_dir / "work_entries.json"
    with open(out_json, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
    print(f"{len(records)} entries saved: {out_json}")

    if args.csv:
        out_csv = out_dir / "work_entries.csv"
        with open(out_csv, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=CSV_COLUMNS, extrasaction="ignore")
            w.writeheader()
            w.writerows(records)
        print(f"CSV saved: {out_csv}")

    totals = summarize(entries)
    print(
        f"Totals (worked): {totals.total_hours:.2f} h, "
        f"client {totals.client_miles:.1f} mi, commute {totals.commute_miles:.1f} mi"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
