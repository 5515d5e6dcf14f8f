class ComicliError(Exception):
    """Base class for every failure that should end a comicli run."""


class DecodeError(ComicliError):
    """The fetched bytes are not a raster image Pillow can read."""


class InvalidDimensions(ComicliError, ValueError):
    """The requested character grid cannot be tiled over the image."""


class SourceError(ComicliError):
    """An image source could not be resolved to image bytes."""


class UnknownSource(SourceError):
    def __init__(self, source: str):
        super().__init__(f"unknown source: {source!r}")
        self.source = source


class UnknownComicId(SourceError):
    def __init__(self, comic_id: str):
        super().__init__(f"unknown comic ID: {comic_id!r}")
        self.comic_id = comic_id
