"""Services layer for business logic separation."""

from .ai_service import AIService, AIProvider, AIConfig, create_ai_service
from .media_service import MediaService
from .repository import (
    BaseRepository,
    JSONFileRepository,
    MemoryRepository,
    SQLiteRepository,
    create_repository,
)
from .collection_service import SavedCollection
from .search_service import SearchOrchestrator, SearchOutcome
from .print_service import PrintService

__all__ = [
    "AIService",
    "AIProvider",
    "AIConfig",
    "create_ai_service",
    "MediaService",
    "BaseRepository",
    "JSONFileRepository",
    "MemoryRepository",
    "SQLiteRepository",
    "create_repository",
    "SavedCollection",
    "SearchOrchestrator",
    "SearchOutcome",
    "PrintService",
]
