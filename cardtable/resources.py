"""Loadable resources and a keyed cache of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from PIL import Image as PILImage
from PIL import UnidentifiedImageError


class ResourceLoadError(Exception):
    """A resource could not be loaded from its path."""


class Resource(ABC):
    """Something loaded from a file and cached under a key."""

    def __init__(self) -> None:
        self.key = ""
        self.path = ""

    @abstractmethod
    def load(self, path: str) -> None:
        """Load the resource from path; raise ResourceLoadError on failure."""


class Image(Resource):
    """A bitmap loaded from file, with its size."""

    def __init__(self) -> None:
        super().__init__()
        self.bitmap: PILImage.Image | None = None
        self.width = 0
        self.height = 0

    def load(self, path: str) -> None:
        try:
            with PILImage.open(path) as img:
                img.load()
                bitmap = img.copy()
        except (OSError, UnidentifiedImageError) as exc:
            raise ResourceLoadError(f"cannot load image {path!r}: {exc}") from exc
        self.bitmap = bitmap
        self.width, self.height = bitmap.size


R = TypeVar("R", bound=Resource)


class Resources:
    """Cache of loaded resources by key."""

    def __init__(self) -> None:
        self._resources: dict[str, Resource] = {}

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, key: object) -> bool:
        return key in self._resources

    def find(self, key: str, kind: type[R]) -> R | None:
        """Return the resource under key if it is of the given kind, else None."""
        resource = self._resources.get(key)
        if isinstance(resource, kind):
            return resource
        return None

    def load(self, kind: type[R], key: str, path: str) -> R:
        """Return the cached resource under key, loading it from path if absent.

        An existing entry under key of another kind is kept in the cache;
        the freshly loaded resource is still returned.
        """
        found = self.find(key, kind)
        if found is not None:
            return found
        resource = kind()
        resource.load(path)
        resource.key = key
        resource.path = path
        self._resources.setdefault(key, resource)
        return resource

    def release(self) -> None:
        """Drop every cached resource."""
        self._resources.clear()