from dataclasses import replace

import pytest

from linkmanager.domain.models import (
    AMBIGUOUS,
    FOUND,
    NO_QUERY,
    NOT_FOUND,
    FileNode,
    RowResolutionRecord,
)
from linkmanager.domain.review import (
    FILTER_ALL,
    FILTER_IGNORED,
    awaits_resolution,
    count_by_filter,
    failure_lines,
    filter_records,
    quoted_text_lines,
    search_files,
)


def _node(name: str, folder: str) -> FileNode:
    return FileNode(path=f"Root/{folder}/{name}", name=name)


def _record(row_id: int, status: str, **kwargs) -> RowResolutionRecord:
    base = RowResolutionRecord(
        row_id=row_id,
        target_folder="Ponto 1",
        original_content=f'row {row_id} "Doc {row_id}"',
        extracted_queries=(f"Doc {row_id}",),
        extracted_dates=(),
        match_status=status,
    )
    return replace(base, **kwargs)


_RECORDS = [
    _record(4, FOUND),
    _record(5, AMBIGUOUS),
    _record(6, NOT_FOUND),
    _record(7, NOT_FOUND, is_ignored=True),
    _record(8, NO_QUERY, extracted_queries=()),
]


def test_filter_records_buckets() -> None:
    assert [r.row_id for r in filter_records(_RECORDS, FILTER_ALL)] == [4, 5, 6]
    assert [r.row_id for r in filter_records(_RECORDS, NOT_FOUND)] == [6]
    assert [r.row_id for r in filter_records(_RECORDS, FILTER_IGNORED)] == [7]


def test_filter_records_unknown_filter() -> None:
    with pytest.raises(ValueError, match="Unknown review filter"):
        filter_records(_RECORDS, "BOGUS")


def test_count_by_filter() -> None:
    assert count_by_filter(_RECORDS) == {
        "ALL": 3,
        "FOUND": 1,
        "AMBIGUOUS": 1,
        "NOT_FOUND": 1,
        "IGNORED": 1,
    }


def test_copy_helpers() -> None:
    assert quoted_text_lines(_RECORDS[:2]) == ['"Doc 4"', '"Doc 5"']
    assert failure_lines(_RECORDS) == ['row 6 "Doc 6"']


def test_search_files_without_term_offers_candidates() -> None:
    candidates = (_node("a.pdf", "Ponto 1"),)
    assert search_files([], "", "Ponto 1", candidates) == list(candidates)
    assert search_files([], "", "Ponto 1") == []


def test_search_files_prefers_target_folder_then_name() -> None:
    files = [
        _node("Mapas_b.pdf", "Ponto 2"),
        _node("mapas_z.pdf", "Ponto 1"),
        _node("Mapas_a.pdf", "Ponto 2"),
        _node("Contrato.pdf", "Ponto 1"),
    ]
    found = search_files(files, "MAPAS", "Ponto 1")
    assert [node.name for node in found] == ["mapas_z.pdf", "Mapas_a.pdf", "Mapas_b.pdf"]


def test_search_files_target_folder_matches_whole_label() -> None:
    files = [_node("mapas_b.pdf", "Ponto 12"), _node("mapas_z.pdf", "Ponto 1")]
    found = search_files(files, "mapas", "Ponto 1")
    assert [node.path for node in found] == [
        "Root/Ponto 1/mapas_z.pdf",
        "Root/Ponto 12/mapas_b.pdf",
    ]


def test_awaits_resolution_only_for_open_ambiguous_rows() -> None:
    candidates = (_node("a.pdf", "Ponto 1"), _node("b.pdf", "Ponto 1"))
    open_row = _record(5, AMBIGUOUS, candidates=candidates)
    assert awaits_resolution(open_row)
    assert not awaits_resolution(replace(open_row, is_ignored=True))
    assert not awaits_resolution(replace(open_row, manual_resolutions=candidates[:1]))
    assert not awaits_resolution(replace(open_row, match_status=FOUND))
    assert not awaits_resolution(_record(5, AMBIGUOUS))


def test_search_files_limits_results() -> None:
    files = [_node(f"doc_{index:02d}.pdf", "Ponto 1") for index in range(30)]
    assert len(search_files(files, "doc", "Ponto 1")) == 20
    assert len(search_files(files, "doc", "Ponto 1", limit=5)) == 5
