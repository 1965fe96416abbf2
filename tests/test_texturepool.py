from pathlib import Path

from almondkit import texturepool
from almondkit.texturepool import TexturePool


def test_load_creates_texture_once():
    pool = TexturePool()
    first = pool.load("a.png")
    second = pool.load("a.png")
    assert first == "Texture: a.png"
    assert first is second
    assert len(pool) == 1


def test_load_announces_only_first_time(capsys):
    pool = TexturePool()
    pool.load("a.png")
    pool.load("a.png")
    assert capsys.readouterr().out.count("Loaded texture: a.png") == 1


def test_path_and_string_share_entry():
    pool = TexturePool()
    pool.load(Path("dir") / "b.png")
    assert str(Path("dir") / "b.png") in pool
    assert Path("dir") / "b.png" in pool
    assert len(pool) == 1


def test_release():
    pool = TexturePool()
    pool.load("a.png")
    assert pool.release("a.png") is True
    assert "a.png" not in pool
    assert pool.release("a.png") is False


def test_clear():
    pool = TexturePool()
    pool.load("a.png")
    pool.load("b.png")
    pool.clear()
    assert len(pool) == 0


def test_contains_rejects_non_paths():
    pool = TexturePool()
    assert 42 not in pool


def test_module_level_pool():
    texture = texturepool.load_texture("module_level.png")
    assert texturepool.load_texture("module_level.png") is texture
    assert texturepool.release_texture("module_level.png") is True
    assert texturepool.release_texture("module_level.png") is False
    texturepool.load_texture("module_level.png")
    texturepool.clear()
    assert texturepool.release_texture("module_level.png") is False