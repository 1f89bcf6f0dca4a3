from __future__ import annotations

from pathlib import Path
from typing import Any

from linkmanager.adapters.json_session_store import JsonSessionStore
from linkmanager.adapters.local_directory import LocalDirectoryAdapter
from linkmanager.adapters.openpyxl_tabular import OpenpyxlTabularAdapter
from linkmanager.adapters.oracle_mock import MockOracleAdapter
from linkmanager.adapters.oracle_openai import OpenAIOracleAdapter
from linkmanager.domain.scoring import MatchConfig
from linkmanager.settings import (
    DATE_BOOST,
    DECISIVE_SCORE,
    EXTENSION_BOOST,
    MATCH_THRESHOLD,
    MAX_CANDIDATES,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    OPENAI_MODEL,
    ORACLE_PROVIDER,
    ORACLE_TIMEOUT_SECONDS,
    SEQUENCE_BOOST,
    SESSION_DIR,
    WINNER_MARGIN,
)
from linkmanager.services.analysis_service import AnalysisService
from linkmanager.services.export_service import ExportService
from linkmanager.services.folder_service import FolderService
from linkmanager.services.project_service import ProjectService
from linkmanager.services.resolution_service import ResolutionService


def build_match_config() -> MatchConfig:
    return MatchConfig(
        match_threshold=MATCH_THRESHOLD,
        date_boost=DATE_BOOST,
        extension_boost=EXTENSION_BOOST,
        sequence_boost=SEQUENCE_BOOST,
        decisive_score=DECISIVE_SCORE,
        winner_margin=WINNER_MARGIN,
        max_candidates=MAX_CANDIDATES,
    )


def build_services(session_dir: str | Path = SESSION_DIR) -> dict[str, Any]:
    directory = LocalDirectoryAdapter()
    tabular = OpenpyxlTabularAdapter()
    store = JsonSessionStore()
    oracle = MockOracleAdapter()
    if ORACLE_PROVIDER.lower() == "openai" and OPENAI_API_KEY:
        oracle = OpenAIOracleAdapter(
            api_key=OPENAI_API_KEY,
            model=OPENAI_MODEL,
            base_url=OPENAI_BASE_URL,
            timeout_seconds=ORACLE_TIMEOUT_SECONDS,
        )
    config = build_match_config()
    return {
        "folder_service": FolderService(directory),
        "analysis_service": AnalysisService(tabular, config),
        "resolution_service": ResolutionService(oracle),
        "project_service": ProjectService(store, session_dir),
        "export_service": ExportService(tabular),
        "directory": directory,
        "tabular": tabular,
        "store": store,
        "oracle": oracle,
        "config": config,
    }
