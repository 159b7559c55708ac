"""
Default records inserted into a freshly provisioned database.
"""
from typing import Dict, List

from seeder.schemas.language import LanguageDocument
from seeder.schemas.user import UserDocument, UserStatus

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_EMAIL = "admin@example.com"

# bcrypt hash of "123456"
DEFAULT_ADMIN_PASSWORD_HASH = "$2a$12$rdX7N6gpAzKJ/7DzCMyVdeRaTUv6faL6GxhTODzlJcuDHRf4hedoO"

DEFAULT_ADMIN_ACCESS: Dict[str, List[str]] = {
    "user": ["index", "view", "create", "update", "delete"],
    "key": ["index", "view", "create", "update", "delete"],
    "language": ["create", "update", "delete"],
    "media": ["index", "view", "upload", "update", "delete", "replace"],
    "collection": ["index", "view", "create", "update", "delete"],
}

DEFAULT_LANGUAGE_TITLE = "English"
DEFAULT_LANGUAGE_LOCALE = "en"


def default_admin_user(now: int) -> UserDocument:
    """Build the administrator record stamped with ``now``."""
    return UserDocument(
        username=DEFAULT_ADMIN_USERNAME,
        email=DEFAULT_ADMIN_EMAIL,
        status=UserStatus.ACTIVE,
        password_hash=DEFAULT_ADMIN_PASSWORD_HASH,
        reset_password_hash="",
        access={resource: list(actions) for resource, actions in DEFAULT_ADMIN_ACCESS.items()},
        created=now,
        modified=now,
    )


def default_language(now: int) -> LanguageDocument:
    """Build the English language record stamped with ``now``."""
    return LanguageDocument(
        title=DEFAULT_LANGUAGE_TITLE,
        locale=DEFAULT_LANGUAGE_LOCALE,
        created=now,
        modified=now,
    )
