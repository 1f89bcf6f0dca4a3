from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from linkmanager.container import build_services
from linkmanager.settings import SESSION_DIR, configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Reload a saved project, reattach its files and export it again."
    )
    parser.add_argument("project", help="Project JSON saved by a previous run.")
    parser.add_argument("folder", help="Root folder the project was built from.")
    parser.add_argument("--output", default="Analise_Com_Links.xlsx", help="Exported workbook.")
    parser.add_argument("--session-dir", default=SESSION_DIR, help="Where to save the project.")
    parser.add_argument("--save", action="store_true", help="Save the reconciled project again.")
    args = parser.parse_args()
    configure_logging()

    services = build_services(args.session_dir)
    session = services["project_service"].load(Path(args.project))
    loaded = services["folder_service"].load_folder(session, Path(args.folder))
    session = services["analysis_service"].resume(loaded.session)

    reconciliation = loaded.reconciliation
    if reconciliation is not None:
        print(f"Handles attached: {reconciliation.attached}")
        if not reconciliation.complete:
            print("Warning: some linked files were not found under this folder.")

    if args.save:
        print("Project:", services["project_service"].save(session))
    written = services["export_service"].export(session, Path(args.output))
    print("Exported:", written)


if __name__ == "__main__":
    main()
