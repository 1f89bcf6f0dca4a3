from dataclasses import replace

from linkmanager.domain.export import (
    AMBIGUOUS_PREFIX,
    FAILURE_MARKER,
    MULTIPLE_PREFIX,
    build_output_cell,
    build_output_cells,
)
from linkmanager.domain.models import (
    AMBIGUOUS,
    FOUND,
    NO_QUERY,
    NOT_FOUND,
    FileNode,
    RowResolutionRecord,
)


def _node(name: str) -> FileNode:
    return FileNode(path=f"Root/Ponto 1/{name}", name=name)


def _record(row_id: int, status: str, **kwargs) -> RowResolutionRecord:
    base = RowResolutionRecord(
        row_id=row_id,
        target_folder="Ponto 1",
        original_content='"Mapas"',
        extracted_queries=("Mapas",),
        extracted_dates=(),
        match_status=status,
    )
    return replace(base, **kwargs)


def test_single_match_links_file() -> None:
    cell = build_output_cell(_record(4, FOUND, matched_file=_node("a.pdf")))
    assert cell.text == "a.pdf"
    assert cell.link_target == "Root/Ponto 1/a.pdf"
    assert cell.tooltip == "Abrir ficheiro local: a.pdf"


def test_manual_resolutions_override_match() -> None:
    record = _record(
        4,
        FOUND,
        matched_file=_node("a.pdf"),
        manual_resolutions=(_node("b.pdf"), _node("c.pdf")),
    )
    cell = build_output_cell(record)
    assert cell.text == f"{MULTIPLE_PREFIX} b.pdf, c.pdf"
    assert cell.link_target == "Root/Ponto 1/b.pdf"
    assert "Outros ficheiros" in cell.tooltip


def test_ambiguous_lists_candidates_without_link() -> None:
    cell = build_output_cell(
        _record(4, AMBIGUOUS, candidates=(_node("a.pdf"), _node("b.pdf")))
    )
    assert cell.text == f"{AMBIGUOUS_PREFIX} a.pdf, b.pdf"
    assert cell.link_target is None


def test_ignored_ambiguous_writes_nothing() -> None:
    record = _record(
        4, AMBIGUOUS, candidates=(_node("a.pdf"), _node("b.pdf")), is_ignored=True
    )
    assert build_output_cell(record) is None
    assert build_output_cells([record]) == {}


def test_not_found_marks_failure_unless_ignored() -> None:
    assert build_output_cell(_record(4, NOT_FOUND)).text == FAILURE_MARKER
    assert build_output_cell(_record(4, NOT_FOUND, is_ignored=True)) is None


def test_no_query_writes_nothing() -> None:
    assert build_output_cell(_record(4, NO_QUERY)) is None


def test_build_output_cells_keys_by_row() -> None:
    cells = build_output_cells(
        [
            _record(4, FOUND, matched_file=_node("a.pdf")),
            _record(5, NO_QUERY),
            _record(6, NOT_FOUND),
        ]
    )
    assert sorted(cells) == [4, 6]
