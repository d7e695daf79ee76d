"""
URL access rules: which paths are public, which need a role, which are ignored.

Rules are matched in order; the first matching pattern wins. A pattern ending in
"/**" matches the prefix itself and everything below it; any other pattern must
match the path exactly. Paths matching no rule require an authenticated principal.
"""

from dataclasses import dataclass
from enum import Enum

ROLE_PREFIX = "ROLE_"
ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


class Access(str, Enum):
    IGNORED = "ignored"
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ROLE = "role"


@dataclass(frozen=True)
class AccessRule:
    """Access requirement for a group of paths; role is set only for Access.ROLE."""

    patterns: tuple[str, ...]
    access: Access
    role: str | None = None


# Static assets skip authorization entirely.
IGNORED_PATTERNS = ("/css/**", "/favicon/**")

ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule(IGNORED_PATTERNS, Access.IGNORED),
    AccessRule(("/", "/login", "/logout", "/api/auth/token", "/api/health"), Access.PUBLIC),
    AccessRule(("/admin", "/api/admin/**"), Access.ROLE, ROLE_ADMIN),
    AccessRule(("/user",), Access.ROLE, ROLE_USER),
)

AUTHENTICATED_RULE = AccessRule(("/**",), Access.AUTHENTICATED)


def path_matches(pattern: str, path: str) -> bool:
    """Return True if path matches an exact or "/**" prefix pattern."""
    if pattern.endswith("/**"):
        prefix = pattern[:-3]
        return path == prefix or path.startswith(prefix + "/") or prefix == ""
    return path == pattern


def resolve_access_rule(path: str) -> AccessRule:
    """Return the first rule whose patterns match path, else AUTHENTICATED_RULE."""
    normalized = path.rstrip("/") or "/"
    for rule in ACCESS_RULES:
        if any(path_matches(p, normalized) for p in rule.patterns):
            return rule
    return AUTHENTICATED_RULE


def role_display_name(role_name: str) -> str:
    """Strip the ROLE_ prefix for display ("ROLE_ADMIN" -> "ADMIN")."""
    return role_name.replace(ROLE_PREFIX, "")


def role_stored_name(display_name: str) -> str:
    """Re-add the ROLE_ prefix to a display name ("ADMIN" -> "ROLE_ADMIN")."""
    return ROLE_PREFIX + display_name
