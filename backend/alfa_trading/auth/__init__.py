"""Optional bearer-token identity"""

from .identity import (
    IdentityResult,
    InvalidCredential,
    NoCredential,
    ValidCredential,
    create_access_token,
    get_user_id,
    resolve_identity,
)

__all__ = [
    "IdentityResult",
    "InvalidCredential",
    "NoCredential",
    "ValidCredential",
    "create_access_token",
    "get_user_id",
    "resolve_identity",
]
