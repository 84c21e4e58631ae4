"""Input checks and directory listing for the gallery content tree."""

import logging
import os
import re
from typing import List

from gallery_config import CONTENT_DIR, DAILY_DIR, IMAGE_EXTS
from gallery_errors import BadInput

log = logging.getLogger(__name__)

_SAFE_FOLDER = re.compile(r"[A-Za-z0-9._-]+")
_IMAGE_SUFFIXES = tuple(IMAGE_EXTS)


def valid_folder(name: str) -> bool:
    """Return True if the given name is a legal daily folder segment."""
    return bool(name) and bool(_SAFE_FOLDER.fullmatch(name))


def check_folder(name: str) -> str:
    # "." and ".." pass the character class but would leave the daily root
    if not valid_folder(name) or not name.strip("."):
        log.warning("rejected folder %r", name)
        raise BadInput("invalid folder")
    return name


def check_src(src: str) -> str:
    """Reject a root-relative image path before it touches the filesystem."""
    if not src:
        raise BadInput("missing src")
    if ".." in src or not src.startswith(CONTENT_DIR + "/"):
        log.warning("rejected src %r", src)
        raise BadInput("invalid src")
    return src


def is_image(name: str) -> bool:
    return name.lower().endswith(_IMAGE_SUFFIXES)


def list_collections(base_dir: str) -> List[str]:
    """Names of the daily folders, sorted case-insensitively."""
    root = os.path.join(base_dir, *DAILY_DIR.split("/"))
    try:
        with os.scandir(root) as it:
            names = [e.name for e in it if e.is_dir()]
    except OSError:
        return []
    names.sort(key=lambda n: (n.lower(), n))
    return names


def list_images(base_dir: str, rel_dir: str) -> List[str]:
    """Images directly inside rel_dir as sorted, slash separated relative paths.

    A directory that does not exist or cannot be read has no images.
    """
    rel_dir = rel_dir.replace("\\", "/").rstrip("/")
    path = os.path.join(base_dir, *rel_dir.split("/"))
    try:
        with os.scandir(path) as it:
            imgs = [f"{rel_dir}/{e.name}" for e in it if e.is_file() and is_image(e.name)]
    except OSError:
        return []
    imgs.sort()
    log.debug("%s: %d images", rel_dir, len(imgs))
    return imgs
