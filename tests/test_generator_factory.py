import pytest

from protobuf_generator.core.tool_config import ToolConfig
from protobuf_generator.generators import factory
from protobuf_generator.generators.base import CodeGenerator
from protobuf_generator.generators.factory import (
    available_generators,
    generator_for_path,
    get_generator,
    register_generator,
)
from protobuf_generator.generators.protogen import ProtogenGenerator


def test_get_generator_protogen_uses_config():
    cfg = ToolConfig(file_extension=".g.cs")
    gen = get_generator("protogen", cfg)
    assert isinstance(gen, ProtogenGenerator)
    assert gen.default_extension() == ".g.cs"


def test_get_generator_unknown_kind():
    with pytest.raises(ValueError, match="Unknown generator kind"):
        get_generator("thrift")


def test_generator_for_path_by_extension():
    assert isinstance(generator_for_path("a/b/Person.proto"), ProtogenGenerator)
    assert isinstance(generator_for_path("Person.PROTO"), ProtogenGenerator)
    assert generator_for_path("Person.txt") is None


def test_register_generator(monkeypatch):
    monkeypatch.setattr(factory, "_GENERATORS", dict(factory._GENERATORS))
    monkeypatch.setattr(factory, "_EXTENSIONS", dict(factory._EXTENSIONS))

    class Upper(CodeGenerator):
        def __init__(self, cfg):
            self.cfg = cfg

        def default_extension(self) -> str:
            return ".up"

    register_generator("upper", Upper, extensions=(".low",))
    assert "upper" in available_generators()
    assert isinstance(generator_for_path("x.low"), Upper)
