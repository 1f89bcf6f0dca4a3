from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from linkmanager.container import build_services
from linkmanager.domain.session import Session
from linkmanager.settings import SESSION_DIR, configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Match quoted references in a workbook against a folder of files."
    )
    parser.add_argument("workbook", help="Path to the .xlsx workbook to analyze.")
    parser.add_argument("folder", help="Root folder containing the 'Ponto N' folders.")
    parser.add_argument("--output", default="Analise_Com_Links.xlsx", help="Exported workbook.")
    parser.add_argument("--session-dir", default=SESSION_DIR, help="Where to save the project.")
    parser.add_argument(
        "--resolve-ambiguous",
        action="store_true",
        help="Ask the configured oracle to pick a file for every ambiguous row.",
    )
    args = parser.parse_args()
    configure_logging()

    services = build_services(args.session_dir)
    loaded = services["folder_service"].load_folder(Session(), Path(args.folder))
    if loaded.file_count == 0:
        raise SystemExit(f"No files found under the 'Ponto' folders of {args.folder}.")

    session = services["analysis_service"].run(loaded.session, Path(args.workbook))
    if args.resolve_ambiguous:
        session, summary = services["resolution_service"].resolve_all_ambiguous(session)
        print(
            f"Oracle: resolved={len(summary.resolved)} "
            f"unresolved={len(summary.unresolved)} failed={len(summary.failed)}"
        )
        for row_id, reason in sorted(summary.failed.items()):
            print(f"  row {row_id}: {reason}")

    counts = Counter(record.match_status for record in session.records)
    print(f"Files: {loaded.file_count}")
    print(f"Rows: {len(session.records)}")
    for status, count in sorted(counts.items()):
        print(f"  {status}: {count}")

    print("Project:", services["project_service"].save(session))
    written = services["export_service"].export(session, Path(args.output))
    print("Exported:", written)


if __name__ == "__main__":
    main()
