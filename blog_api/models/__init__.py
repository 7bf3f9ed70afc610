# Carrega módulos para registrar tabelas no metadata:
from blog_api.models.tech_stack import TechStack, profile_tech_stacks  # noqa: F401
from blog_api.models.user import User, UserProfile  # noqa: F401
from blog_api.models.authentication import UserAuthentication  # noqa: F401
from blog_api.models.tag import Tag  # noqa: F401
from blog_api.models.post import Post, PostTag, PostLike  # noqa: F401
from blog_api.models.draft import Draft, DraftTag  # noqa: F401

__all__ = [
    "TechStack",
    "profile_tech_stacks",
    "User",
    "UserProfile",
    "UserAuthentication",
    "Tag",
    "Post",
    "PostTag",
    "PostLike",
    "Draft",
    "DraftTag",
]
