from joker.handlers.http_handler import setup_routes

__all__ = ["setup_routes"]
