"""Error kinds raised while resolving gallery content.

Each kind carries the HTTP status the web layer answers with.
"""


class GalleryError(Exception):
    status = 500

    def __init__(self, msg: str = ""):
        super().__init__(msg or self.__class__.__name__)


class BadInput(GalleryError):
    """Malformed or unsafe folder/path input."""
    status = 400


class NotFound(GalleryError):
    """Path is acceptable but no such file exists."""
    status = 404


class Unsupported(GalleryError):
    """Path is safe but not a daily or weekly image."""
    status = 400


class RenderFailure(GalleryError):
    status = 500
