from __future__ import annotations

import logging
import os
from pathlib import Path

from linkmanager.domain.models import DirectoryEntry
from linkmanager.ports.directory_port import DirectoryPort

logger = logging.getLogger(__name__)


class LocalDirectoryAdapter(DirectoryPort):
    """Read-only walk of a local folder.

    Relative paths start with the root folder's own name and use ``/`` so
    they match the links written into the workbook next to that folder.
    """

    def __init__(self, include_hidden: bool = False) -> None:
        self._include_hidden = include_hidden

    def list_entries(self, root: Path) -> list[DirectoryEntry]:
        root = Path(root).resolve()
        if not root.is_dir():
            raise RuntimeError(f"Folder not found: {root}")
        entries: list[DirectoryEntry] = []
        for dirpath, dirnames, filenames in os.walk(root):
            if not self._include_hidden:
                dirnames[:] = [name for name in dirnames if not name.startswith(".")]
            dirnames.sort()
            for filename in sorted(filenames):
                if not self._include_hidden and filename.startswith("."):
                    continue
                full_path = Path(dirpath) / filename
                try:
                    mtime = full_path.stat().st_mtime
                except OSError as exc:
                    logger.warning("Skipping unreadable file %s: %s", full_path, exc)
                    continue
                relative = full_path.relative_to(root).as_posix()
                entries.append(
                    DirectoryEntry(
                        name=filename,
                        relative_path=f"{root.name}/{relative}",
                        last_modified=mtime,
                        handle=full_path,
                    )
                )
        logger.info("Listed %d files under %s", len(entries), root)
        return entries
