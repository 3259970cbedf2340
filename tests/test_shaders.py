import pytest

from quadkit.shaders import PreprocessorConfig, preprocess_shader


def test_preprocessor():
    shader_string = """
#version blah blah

asd
asd

#include "hello.glsl"

qwe
"""
    preprocessed = """
#version blah blah

asd
asd

iii
jjj

qwe
"""
    result = preprocess_shader(
        shader_string,
        PreprocessorConfig(includes=[("hello.glsl", "iii\njjj")]),
    )
    assert result == preprocessed


def test_source_without_includes_is_unchanged():
    source = "void main() {}\n"
    assert preprocess_shader(source, PreprocessorConfig()) == source


def test_several_includes_are_expanded():
    source = '#include "a"\nmid\n#include "b"\n'
    config = PreprocessorConfig(includes=[("a", "AAA"), ("b", "BBB")])
    assert preprocess_shader(source, config) == "AAA\nmid\nBBB\n"


def test_extra_spaces_before_name_are_allowed():
    source = '#include    "a"'
    config = PreprocessorConfig(includes=[("a", "X")])
    assert preprocess_shader(source, config) == "X"


def test_first_matching_include_wins():
    config = PreprocessorConfig(includes=[("a", "first"), ("a", "second")])
    assert preprocess_shader('#include "a"', config) == "first"


def test_missing_include_raises():
    with pytest.raises(ValueError, match="missing.glsl"):
        preprocess_shader('#include "missing.glsl"', PreprocessorConfig())


def test_directive_without_quote_raises():
    with pytest.raises(ValueError):
        preprocess_shader("#include hello.glsl", PreprocessorConfig())


def test_unterminated_name_raises():
    config = PreprocessorConfig(includes=[("a", "X")])
    with pytest.raises(ValueError):
        preprocess_shader('#include "a', config)