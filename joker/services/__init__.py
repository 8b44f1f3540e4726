from joker.services.content_service import ContentKind, ContentResult, ContentService

__all__ = ["ContentKind", "ContentResult", "ContentService"]
