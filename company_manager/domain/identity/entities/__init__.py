from .user_account import UserAccount

__all__ = ["UserAccount"]
