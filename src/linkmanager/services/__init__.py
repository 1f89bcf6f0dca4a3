from .analysis_service import AnalysisService
from .export_service import ExportService
from .folder_service import FolderLoadResult, FolderService
from .project_service import ProjectService
from .resolution_service import BatchResolutionSummary, ResolutionService

__all__ = [
    "AnalysisService",
    "BatchResolutionSummary",
    "ExportService",
    "FolderLoadResult",
    "FolderService",
    "ProjectService",
    "ResolutionService",
]
