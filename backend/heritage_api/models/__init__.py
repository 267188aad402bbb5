from heritage_api.models.like import Like
from heritage_api.models.site import HeritageSite
from heritage_api.models.user import User

__all__ = [
    "HeritageSite",
    "Like",
    "User",
]
