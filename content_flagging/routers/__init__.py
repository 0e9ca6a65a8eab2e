"""Router package."""
from content_flagging.routers import flagging, meta

__all__ = ["flagging", "meta"]
