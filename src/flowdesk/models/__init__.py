from .api import GitUser

__all__ = [
    "GitUser",
]
