"""Avatar file discovery."""

from avatarmenu.core.avatar.paths import avatar_id, saved_state_path, user_id, vrchat_root

__all__ = [
    "avatar_id",
    "saved_state_path",
    "user_id",
    "vrchat_root",
]
