import os
from dataclasses import dataclass

# ------------------ 配置 ------------------
CONTENT_DIR = "images"
DAILY_DIR = CONTENT_DIR + "/daily"
WEEKLY_DIR = CONTENT_DIR + "/weekly"
IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

SITE_NAME = "Thai Card Store"
PORT = 8080


@dataclass(frozen=True)
class GalleryConfig:
    """Startup settings shared read-only by every request."""
    base_dir: str
    site_name: str = SITE_NAME
    host: str = "0.0.0.0"
    port: int = PORT
    debug: bool = False

    def path(self, rel: str) -> str:
        """Absolute filesystem path of a root-relative, slash separated path."""
        return os.path.join(self.base_dir, *rel.split("/"))


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_config(**overrides) -> GalleryConfig:
    """Build the config from GALLERY_* environment variables.

    Keyword arguments that are not None win over the environment.
    """
    env = os.environ
    values = {
        "base_dir": os.path.abspath(env.get("GALLERY_BASE_DIR", ".")),
        "site_name": env.get("GALLERY_SITE_NAME", SITE_NAME),
        "host": env.get("GALLERY_HOST", "0.0.0.0"),
        "port": int(env.get("GALLERY_PORT", PORT)),
        "debug": _env_flag(env.get("GALLERY_DEBUG")),
    }
    for k, v in overrides.items():
        if v is not None:
            values[k] = os.path.abspath(v) if k == "base_dir" else v
    return GalleryConfig(**values)
