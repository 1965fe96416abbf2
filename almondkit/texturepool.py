"""A pool that loads each texture once and hands out the shared copy."""

from __future__ import annotations

import os
from typing import Dict, Union

PathArg = Union[str, os.PathLike]


class TexturePool:
    """Caches textures by file path."""

    def __init__(self) -> None:
        self._textures: Dict[str, str] = {}

    def load(self, filepath: PathArg) -> str:
        """Return the texture for ``filepath``, loading it if not yet pooled."""
        path = os.fspath(filepath)
        texture = self._textures.get(path)
        if texture is not None:
            return texture
        texture = f"Texture: {path}"
        self._textures[path] = texture
        print(f"Loaded texture: {path}")
        return texture

    def release(self, filepath: PathArg) -> bool:
        """Drop the texture for ``filepath``; return whether it was pooled."""
        path = os.fspath(filepath)
        if self._textures.pop(path, None) is None:
            return False
        print(f"Released texture: {path}")
        return True

    def clear(self) -> None:
        """Drop every pooled texture."""
        self._textures.clear()
        print("Cleared all textures.")

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, filepath: object) -> bool:
        try:
            return os.fspath(filepath) in self._textures  # type: ignore[arg-type]
        except TypeError:
            return False


_default_pool = TexturePool()


def load_texture(filepath: PathArg) -> str:
    """Load a texture through the shared pool."""
    return _default_pool.load(filepath)


def release_texture(filepath: PathArg) -> bool:
    """Release a texture from the shared pool."""
    return _default_pool.release(filepath)


def clear() -> None:
    """Empty the shared pool."""
    _default_pool.clear()