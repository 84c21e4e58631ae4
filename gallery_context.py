"""Data handed to the templates: the gallery index and the single image page."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from PIL import Image

from gallery_config import CONTENT_DIR, DAILY_DIR, WEEKLY_DIR, GalleryConfig
from gallery_errors import NotFound, Unsupported
from gallery_scan import check_src, list_collections, list_images


@dataclass(frozen=True)
class DailyFolder:
    name: str


@dataclass(frozen=True)
class GalleryPageContext:
    active_tab: str
    daily_folders: List[DailyFolder]
    active_daily_folder: str
    daily_images: List[str]
    weekly_images: List[str]
    site_name: str


@dataclass(frozen=True)
class ImageDetailContext:
    src: str                  # site path, e.g. /images/weekly/a.jpg
    file_name: str
    kind: str                 # daily or weekly
    folder: str               # daily only
    related_images: List[str]
    site_name: str
    og_image: str
    page_url: str
    title: str
    description: str
    og_image_width: Optional[int] = field(default=None)
    og_image_height: Optional[int] = field(default=None)


def assemble_index(config: GalleryConfig, tab: str = "", folder: str = "") -> GalleryPageContext:
    """Build the index page data.

    An unknown tab is kept as is and simply shows no images; a missing
    folder shows none either. This never raises.
    """
    active_tab = tab or "daily"
    folders = list_collections(config.base_dir)
    active_daily = ""
    daily_images: List[str] = []
    weekly_images: List[str] = []

    if active_tab == "daily":
        active_daily = folder or (folders[0] if folders else "")
        if active_daily:
            daily_images = list_images(config.base_dir, f"{DAILY_DIR}/{active_daily}")
    elif active_tab == "weekly":
        weekly_images = list_images(config.base_dir, WEEKLY_DIR)

    return GalleryPageContext(
        active_tab=active_tab,
        daily_folders=[DailyFolder(n) for n in folders],
        active_daily_folder=active_daily,
        daily_images=daily_images,
        weekly_images=weekly_images,
        site_name=config.site_name,
    )


def image_size(path: str) -> Optional[Tuple[int, int]]:
    """Pixel size from the image header, None if Pillow can't identify or refuses it."""
    try:
        with Image.open(path) as img:
            return img.size
    except Exception:
        return None


def _siblings(config: GalleryConfig, rel_dir: str, src: str) -> List[str]:
    return ["/" + p for p in list_images(config.base_dir, rel_dir) if "/" + p != src]


def build_image_context(config: GalleryConfig, raw_src: str, scheme: str, host: str,
                        request_uri: str) -> ImageDetailContext:
    """Resolve ``raw_src`` (e.g. ``images/daily/trip/x.png``) to the image page data.

    Raises BadInput for unsafe input, NotFound when the file is missing and
    Unsupported when it is neither a daily nor a weekly image.
    """
    check_src(raw_src)
    rel = posixpath.normpath(raw_src)
    full = config.path(rel)
    if not os.path.isfile(full):
        raise NotFound("image not found")

    src = "/" + rel
    parts = rel.split("/")
    if len(parts) >= 4 and parts[0] == CONTENT_DIR and parts[1] == "daily":
        kind, folder = "daily", parts[2]
        related = _siblings(config, f"{DAILY_DIR}/{folder}", src)
    elif len(parts) >= 3 and parts[0] == CONTENT_DIR and parts[1] == "weekly":
        kind, folder = "weekly", ""
        related = _siblings(config, WEEKLY_DIR, src)
    else:
        raise Unsupported("unsupported path")

    file_name = parts[-1]
    base_url = f"{scheme}://{host}"
    size = image_size(full)
    return ImageDetailContext(
        src=src,
        file_name=file_name,
        kind=kind,
        folder=folder,
        related_images=related,
        site_name=config.site_name,
        og_image=base_url + src,
        page_url=base_url + request_uri,
        title=f"{file_name} - {config.site_name}",
        description=f"View image from {config.site_name}",
        og_image_width=size[0] if size else None,
        og_image_height=size[1] if size else None,
    )
