import pytest

from mixpass.charset import CANONICAL_ORDER, CharacterClass
from mixpass.config import DEFAULT_CONFIG, GeneratorConfig
from mixpass.errors import ConfigError, InvalidLengthError


def test_defaults():
    assert DEFAULT_CONFIG.length == 16
    assert DEFAULT_CONFIG.source == "system"
    assert DEFAULT_CONFIG.enabled_classes() == CANONICAL_ORDER
    DEFAULT_CONFIG.validate()


def test_enabled_classes_follow_flags():
    cfg = GeneratorConfig(lowercase=False, symbols=False)
    assert cfg.enabled_classes() == (CharacterClass.UPPERCASE, CharacterClass.DIGIT)


@pytest.mark.parametrize("length", [-1, 2.0, "8", False])
def test_validate_length(length):
    with pytest.raises(InvalidLengthError):
        GeneratorConfig(length=length).validate()


@pytest.mark.parametrize(
    "field_values",
    [
        {"num_qubits": 0},
        {"quantum_streams": 0},
        {"entropy_rounds": -1},
        {"clipboard_clear_ms": -5},
    ],
)
def test_validate_quantum_and_gui_fields(field_values):
    with pytest.raises(ConfigError):
        GeneratorConfig(**field_values).validate()


def test_zero_length_is_valid():
    GeneratorConfig(length=0).validate()
