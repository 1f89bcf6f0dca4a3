from linkmanager.domain.analysis import analyze_rows, group_entries, iter_analyzed_rows
from linkmanager.domain.models import FOUND, NO_QUERY, DirectoryEntry
from linkmanager.domain.routing import (
    ROW_MAPPINGS,
    RowRange,
    folder_label_for_path,
    target_folder_for_row,
)


def test_target_folder_for_row_bounds_are_inclusive() -> None:
    assert target_folder_for_row(4) == "Ponto 1"
    assert target_folder_for_row(10) == "Ponto 1"
    assert target_folder_for_row(2446) == "Ponto 13"
    assert target_folder_for_row(2500) == "Ponto 13"


def test_target_folder_for_row_gaps_are_unrouted() -> None:
    assert target_folder_for_row(1) is None
    assert target_folder_for_row(11) is None
    assert target_folder_for_row(600) is None
    assert target_folder_for_row(2501) is None


def test_row_mappings_do_not_overlap() -> None:
    ordered = sorted(ROW_MAPPINGS, key=lambda item: item.start)
    for previous, current in zip(ordered, ordered[1:]):
        assert previous.end < current.start


def test_folder_label_for_path() -> None:
    assert folder_label_for_path("Root/Ponto 3/emails/a.pdf") == "Ponto 3"
    assert folder_label_for_path("Root/ponto 7/a.pdf") == "ponto 7"
    assert folder_label_for_path("Root/Outros/a.pdf") is None


def test_group_entries_routes_and_indexes_handles() -> None:
    entries = [
        DirectoryEntry("a.pdf", "Root/Ponto 1/a.pdf", 1.0, "/abs/a.pdf"),
        DirectoryEntry("b.pdf", "Root/Ponto 1/sub/b.pdf", 2.0, "/abs/b.pdf"),
        DirectoryEntry("c.pdf", "Root/Outros/c.pdf", 3.0, "/abs/c.pdf"),
    ]
    folders, handles = group_entries(entries)
    assert list(folders) == ["Ponto 1"]
    assert [node.name for node in folders["Ponto 1"]] == ["a.pdf", "b.pdf"]
    assert folders["Ponto 1"][0].handle == "/abs/a.pdf"
    assert handles["Root/Outros/c.pdf"] == "/abs/c.pdf"
    assert len(handles) == 3


def _rows(contents: dict[int, object], total: int = 12) -> list[list[object]]:
    rows: list[list[object]] = [["x", "y", None] for _ in range(total)]
    for row_id, content in contents.items():
        rows[row_id - 1][2] = content
    return rows


def test_iter_analyzed_rows_routes_and_skips() -> None:
    entries = [
        DirectoryEntry(
            "RE_Relatorio_Final_20042010.pdf",
            "Root/Ponto 1/RE_Relatorio_Final_20042010.pdf",
            1.0,
            "/abs/r.pdf",
        )
    ]
    folders, _ = group_entries(entries)
    rows = _rows(
        {
            2: '"Relatório Final"',
            4: 'Email "Relatório Final" de 20/04/2010',
            5: 12,
            6: "sem referência",
        }
    )
    rows[6] = ["short"]

    analyzed = list(iter_analyzed_rows(rows, folders))
    records = [record for record, _ in analyzed]
    assert [record.row_id for record in records] == [4, 6]
    assert records[0].match_status == FOUND
    assert records[0].target_folder == "Ponto 1"
    assert records[0].matched_file.name == "RE_Relatorio_Final_20042010.pdf"
    assert records[0].extracted_dates == ("20/04/2010",)
    assert records[1].match_status == NO_QUERY
    assert analyzed[0][1].startswith("best=")


def test_analyze_rows_uses_custom_mappings() -> None:
    rows = _rows({1: '"Mapas"'}, total=2)
    records = analyze_rows(rows, {}, mappings=(RowRange(1, 1, "Ponto X"),))
    assert len(records) == 1
    assert records[0].target_folder == "Ponto X"
