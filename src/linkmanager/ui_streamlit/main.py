from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

load_dotenv(_SRC_ROOT.parent / ".env", override=False)

from linkmanager.container import build_services
from linkmanager.domain.errors import LinkManagerError, OracleError
from linkmanager.domain.export import build_output_cell
from linkmanager.domain.models import AMBIGUOUS
from linkmanager.domain.review import (
    REVIEW_FILTERS,
    awaits_resolution,
    count_by_filter,
    failure_lines,
    filter_records,
    quoted_text_lines,
    search_files,
)
from linkmanager.domain.session import (
    IgnoreToggled,
    MatchValidated,
    SelectionChanged,
    Session,
    apply_event,
)
from linkmanager.services.project_service import default_session_filename
from linkmanager.settings import SESSION_DIR, configure_logging

_FILTER_LABELS = {
    "ALL": "All",
    "FOUND": "Found",
    "AMBIGUOUS": "Ambiguous",
    "NOT_FOUND": "Not found",
    "IGNORED": "Ignored",
}


def _init_state() -> None:
    st.session_state.setdefault("services", None)
    st.session_state.setdefault("services_session_dir", None)
    st.session_state.setdefault("session", Session())
    st.session_state.setdefault("viewing_results", False)
    st.session_state.setdefault("active_filter", "ALL")


def _get_services(session_dir: str):
    if (
        st.session_state["services"] is None
        or st.session_state.get("services_session_dir") != session_dir
    ):
        st.session_state["services"] = build_services(session_dir)
        st.session_state["services_session_dir"] = session_dir
    return st.session_state["services"]


def _set_session(session: Session) -> None:
    st.session_state["session"] = session


def _render_setup(services) -> None:
    session: Session = st.session_state["session"]

    st.subheader("Resume a saved project")
    project_path = st.text_input("Project file", help="JSON file saved by a previous run.")
    if st.button("Load project"):
        try:
            if not project_path.strip():
                raise LinkManagerError("Project file is required.")
            loaded = services["project_service"].load(Path(project_path.strip()))
            _set_session(loaded)
            st.info(
                f"Loaded {len(loaded.records)} rows. Select the root folder to reattach the files."
            )
        except Exception as exc:
            st.error(f"Load project failed: {exc}")

    st.subheader("Files")
    folder_path = st.text_input("Root folder", help="Folder that contains the 'Ponto N' folders.")
    if st.button("Load folder"):
        try:
            if not folder_path.strip():
                raise LinkManagerError("Root folder is required.")
            result = services["folder_service"].load_folder(
                st.session_state["session"], Path(folder_path.strip())
            )
            _set_session(result.session)
            st.success(f"{result.file_count} files loaded.")
            if result.reconciliation is not None and not result.reconciliation.complete:
                st.warning(
                    "Some linked files were not found in this folder. "
                    "Check that you selected the same root folder."
                )
            if result.ready_to_view:
                st.session_state["viewing_results"] = True
        except Exception as exc:
            st.error(f"Load folder failed: {exc}")

    session = st.session_state["session"]
    st.write(f"Files loaded: {session.file_count()}")

    if session.is_resumed:
        if st.button("Resume review"):
            try:
                _set_session(services["analysis_service"].resume(session))
                st.session_state["viewing_results"] = True
            except Exception as exc:
                st.error(f"Resume failed: {exc}")
        return

    st.subheader("Spreadsheet")
    workbook_path = st.text_input("Workbook (.xlsx)")
    if st.button("Start analysis"):
        try:
            if not workbook_path.strip():
                raise LinkManagerError("Workbook path is required.")
            analyzed = services["analysis_service"].run(session, Path(workbook_path.strip()))
            _set_session(analyzed)
            st.session_state["viewing_results"] = True
        except Exception as exc:
            st.error(f"Analysis failed: {exc}")


def _render_record(services, record) -> None:
    session: Session = st.session_state["session"]
    header = f"Row {record.row_id} · {record.target_folder} · {record.match_status}"
    with st.expander(header, expanded=record.match_status == AMBIGUOUS):
        st.write(record.original_content)
        if record.extracted_queries:
            st.caption("Quoted: " + " | ".join(record.extracted_queries))
        if record.ai_suggestion:
            st.caption(f"Suggested by the oracle: {record.ai_suggestion}")

        term = st.text_input("Search files", key=f"search_{record.row_id}")
        options = search_files(
            session.all_files(), term.strip(), record.target_folder, record.candidates
        )
        selected_paths = [node.path for node in record.manual_resolutions]
        if not selected_paths and record.matched_file is not None:
            selected_paths = [record.matched_file.path]
        by_path = {node.path: node for node in options}
        for node in record.manual_resolutions:
            by_path.setdefault(node.path, node)
        chosen = st.multiselect(
            "Linked files",
            options=list(by_path),
            default=[path for path in selected_paths if path in by_path],
            format_func=lambda path: by_path[path].name,
            key=f"select_{record.row_id}",
        )

        cols = st.columns(4)
        if cols[0].button("Save selection", key=f"save_sel_{record.row_id}"):
            files = tuple(by_path[path] for path in chosen)
            _set_session(apply_event(session, SelectionChanged(record.row_id, files)))
            st.rerun()
        if cols[1].button("Validate", key=f"validate_{record.row_id}"):
            try:
                _set_session(apply_event(session, MatchValidated(record.row_id)))
                st.rerun()
            except LinkManagerError as exc:
                st.error(str(exc))
        ignore_label = "Restore" if record.is_ignored else "Ignore"
        if cols[2].button(ignore_label, key=f"ignore_{record.row_id}"):
            _set_session(apply_event(session, IgnoreToggled(record.row_id)))
            st.rerun()
        if awaits_resolution(record) and cols[3].button("Ask AI", key=f"oracle_{record.row_id}"):
            try:
                updated, chosen_file = services["resolution_service"].resolve_with_oracle(
                    session, record.row_id
                )
                _set_session(updated)
                if chosen_file is None:
                    st.info("The oracle did not find a clear match.")
                else:
                    st.rerun()
            except OracleError as exc:
                st.error(f"Oracle failed: {exc}")

        cell = build_output_cell(record)
        if cell is not None:
            st.caption(f"Export: {cell.text}")


def _render_results(services) -> None:
    session: Session = st.session_state["session"]
    records = list(session.records)
    counts = count_by_filter(records)

    active = st.radio(
        "Filter",
        REVIEW_FILTERS,
        format_func=lambda name: f"{_FILTER_LABELS[name]} ({counts[name]})",
        horizontal=True,
        key="active_filter",
    )
    visible = filter_records(records, active)

    cols = st.columns(4)
    if cols[0].button("Resolve ambiguous with AI"):
        try:
            updated, summary = services["resolution_service"].resolve_all_ambiguous(session)
            _set_session(updated)
            st.info(
                f"Resolved {len(summary.resolved)}, unresolved {len(summary.unresolved)}, "
                f"failed {len(summary.failed)}."
            )
        except Exception as exc:
            st.error(f"Batch resolution failed: {exc}")
    if cols[1].button("Save project"):
        try:
            path = services["project_service"].save(st.session_state["session"])
            st.success(f"Project saved to {path}")
        except Exception as exc:
            st.error(f"Save failed: {exc}")
    export_path = cols[2].text_input(
        "Export file", value="Analise_Com_Links.xlsx", label_visibility="collapsed"
    )
    if cols[3].button("Export Excel"):
        try:
            written = services["export_service"].export(
                st.session_state["session"], Path(export_path)
            )
            st.success(f"Exported to {written}")
        except Exception as exc:
            st.error(f"Export failed: {exc}")

    with st.expander("Copy quoted text"):
        st.code("\n".join(quoted_text_lines(visible)) or "-")
    with st.expander("Copy failures"):
        st.code("\n".join(failure_lines(records)) or "-")

    if not visible:
        st.info("No rows in this filter.")
    for record in visible:
        _render_record(services, record)

    if st.button("Back to setup"):
        st.session_state["viewing_results"] = False
        st.rerun()


def main() -> None:
    st.title("Excel Link Manager")
    configure_logging()
    _init_state()
    session_dir = st.sidebar.text_input("Session folder", value=SESSION_DIR)
    st.sidebar.caption(f"Default project name: {default_session_filename()}")
    services = _get_services(session_dir)

    if st.session_state.get("viewing_results"):
        _render_results(services)
    else:
        _render_setup(services)


if __name__ == "__main__":
    main()
