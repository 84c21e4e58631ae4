import os
import struct
import sys
import zlib

import pytest

# Ensure the project root is on sys.path when running via the pytest binary
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gallery_config import GalleryConfig


def touch(root, rel, data=b"x"):
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def png_header(width, height):
    """PNG with only IHDR and IEND chunks; claims a size but holds no pixels."""
    def chunk(cid, data):
        return struct.pack(">I", len(data)) + cid + data + struct.pack(">I", zlib.crc32(cid + data))

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IEND", b"")


@pytest.fixture
def site(tmp_path):
    """Base directory with an empty images/ tree."""
    (tmp_path / "images" / "daily").mkdir(parents=True)
    (tmp_path / "images" / "weekly").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def config(site):
    return GalleryConfig(base_dir=str(site), site_name="Test Store")
