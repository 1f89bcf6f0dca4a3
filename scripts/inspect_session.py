from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from linkmanager.adapters.json_session_store import JsonSessionStore
from linkmanager.domain.export import build_output_cell
from linkmanager.domain.review import REVIEW_FILTERS, count_by_filter, filter_records
from linkmanager.settings import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a summary of a saved project.")
    parser.add_argument("project", help="Project JSON file.")
    parser.add_argument(
        "--filter", default="ALL", choices=REVIEW_FILTERS, help="Rows to list."
    )
    parser.add_argument("--limit", type=int, default=20, help="Maximum rows to list.")
    args = parser.parse_args()
    configure_logging()

    session = JsonSessionStore().load(Path(args.project))
    records = list(session.records)
    print("Project:", args.project)
    print("Rows:", len(records))
    print("Spreadsheet rows:", len(session.raw_rows))
    for name, count in count_by_filter(records).items():
        print(f"  {name}: {count}")

    print(f"\n{args.filter} rows:")
    for record in filter_records(records, args.filter)[: args.limit]:
        cell = build_output_cell(record)
        output = cell.text if cell else "-"
        print(f"- row {record.row_id} [{record.target_folder}] {record.match_status}: {output}")


if __name__ == "__main__":
    main()
