# services/api/seopages/config.py

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str

    LOG_LEVEL: str = "INFO"

    # File store: explicit directory wins; otherwise SEO_STORE_SUBDIR is searched
    # from the working directory upward through SEO_STORE_MAX_PARENTS ancestors.
    SEO_STORE_DIR: str | None = None
    SEO_STORE_SUBDIR: str = "seo-config"
    SEO_STORE_MAX_PARENTS: int = 4

    # Roles allowed to read/edit page documents through the admin API
    SEO_PAGE_ROLES: list[str] = ["admin", "editor", "seo_manager"]

    # Bypasses the role allow-list (still requires a valid session)
    SUPER_ADMIN_EMAIL: str | None = None

    # RBAC bootstrap: allow creating the FIRST admin user if none exists.
    # Send as header: X-Bootstrap-Token
    ADMIN_BOOTSTRAP_TOKEN: str | None = None

    # Admin web sessions (server-side)
    ADMIN_SESSION_TTL_MIN: int = 60 * 12  # 12 hours
    ADMIN_COOKIE_NAME: str = "admin_session"
    ADMIN_COOKIE_SECURE: bool = False     # set True behind HTTPS in production
    ADMIN_COOKIE_SAMESITE: str = "lax"
    ADMIN_COOKIE_DOMAIN: str | None = None

    # Mirror sweep (background reconciliation of every slug)
    MIRROR_SWEEP_INTERVAL_SEC: int = 300
    MIRROR_POLL_SECONDS: int = 30

settings = Settings()
