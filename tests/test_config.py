import dataclasses
from pathlib import Path

import pytest

from gltoolkit.config import Config


def test_instance_matches_defaults():
    assert Config.instance() == Config()


def test_default_paths():
    config = Config.instance()
    assert config.vert_shader_path == Path("shaders/shader.vert")
    assert config.frag_shader_path == Path("shaders/shader.frag")
    assert config.geom_shader_path == Path("shaders/shader.geom")


def test_paths_share_directory():
    config = Config.instance()
    dirs = {p.parent for p in (config.vert_shader_path, config.frag_shader_path, config.geom_shader_path)}
    assert dirs == {Path("shaders")}


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Config.instance().vert_shader_path = Path("other.vert")


def test_custom_config_keeps_other_defaults():
    config = Config(vert_shader_path=Path("custom.vert"))
    assert config.vert_shader_path == Path("custom.vert")
    assert config.frag_shader_path == Config.instance().frag_shader_path