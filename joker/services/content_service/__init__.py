from joker.services.content_service.content_service import ContentService
from joker.services.content_service.dto import ContentKind, ContentResult

__all__ = ["ContentKind", "ContentResult", "ContentService"]
