from __future__ import annotations

from dataclasses import dataclass

FOLDER_SEGMENT_PREFIX = "ponto "


@dataclass(frozen=True)
class RowRange:
    start: int
    end: int
    folder: str

    def contains(self, row_id: int) -> bool:
        return self.start <= row_id <= self.end


# Inclusive workbook row ranges; Ponto 10 and 11 have no rows.
ROW_MAPPINGS: tuple[RowRange, ...] = (
    RowRange(4, 10, "Ponto 1"),
    RowRange(13, 41, "Ponto 2"),
    RowRange(45, 286, "Ponto 3"),
    RowRange(289, 312, "Ponto 4"),
    RowRange(316, 532, "Ponto 5"),
    RowRange(882, 921, "Ponto 6"),
    RowRange(924, 1478, "Ponto 7"),
    RowRange(1481, 1782, "Ponto 8"),
    RowRange(1784, 2194, "Ponto 9"),
    RowRange(2199, 2443, "Ponto 12"),
    RowRange(2446, 2500, "Ponto 13"),
)


def target_folder_for_row(
    row_id: int, mappings: tuple[RowRange, ...] = ROW_MAPPINGS
) -> str | None:
    for mapping in mappings:
        if mapping.contains(row_id):
            return mapping.folder
    return None


def folder_label_for_path(relative_path: str) -> str | None:
    """
    Return the first path segment that names a routed folder.

    Example:
        >>> folder_label_for_path("Root/Ponto 3/emails/a.pdf")
        'Ponto 3'
    """
    for segment in relative_path.split("/"):
        if segment.lower().startswith(FOLDER_SEGMENT_PREFIX):
            return segment
    return None
