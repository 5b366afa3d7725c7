"""Unit tests for loading generators declared in YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest

from pullgen.io import GeneratorsFileSchema, build_generator, load_generators
from pullgen.io.generator_schemata import AccumulateSchema, CountSchema, CycleSchema


@pytest.fixture
def generators_yaml() -> Path:
    """Return a path to a YAML file declaring example generators."""
    yaml_path = Path(__file__).parent.parent / "test_data/yaml/generators.yaml"
    assert yaml_path.exists(), f"Expected to find file: {yaml_path}"
    return yaml_path


def write_yaml(directory: Path, contents: str) -> Path:
    """Write the given YAML contents to a file in the given directory."""
    yaml_path = directory / "generators.yaml"
    yaml_path.write_text(contents)
    return yaml_path


def test_validate_generators_yaml(generators_yaml: Path) -> None:
    """Verify that the example YAML file is validated into the expected schemata."""
    schema = GeneratorsFileSchema.validate_yaml(generators_yaml)

    assert len(schema.generators) == 8
    assert schema.generators["naturals"] == CountSchema(type="count", start=0, step=1)
    assert isinstance(schema.generators["letters"], CycleSchema)

    tetrahedral = schema.generators["tetrahedral"]
    assert isinstance(tetrahedral, AccumulateSchema)
    assert isinstance(tetrahedral.source, AccumulateSchema)
    assert isinstance(tetrahedral.source.source, CountSchema)


def test_load_generators(generators_yaml: Path) -> None:
    """Verify that the generators declared in the example YAML file produce expected values."""
    # Arrange/Act - Construct each generator declared in the YAML file
    generators = load_generators(generators_yaml)

    def first_values(name: str, n: int = 4) -> list:
        return [generators[name].next_value() for _ in range(n)]

    # Assert - Expect each generator to produce its declared sequence
    assert first_values("naturals") == [0, 1, 2, 3]
    assert first_values("evens") == [0, 2, 4, 6]
    assert first_values("halves") == [0.5, 1.0, 1.5, 2.0]
    assert first_values("sevens") == [7, 7, 7, 7]
    assert first_values("letters") == ["a", "b", "c", "a"]
    assert first_values("signs") == [1, -1, 1, -1]
    assert first_values("triangular") == [1, 3, 6, 10]
    assert first_values("tetrahedral") == [1, 4, 10, 20]


def test_build_generator_creates_fresh_state() -> None:
    """Verify that building from the same schema twice creates independent generators."""
    schema = CountSchema(type="count", start=5, step=-1)

    gen_a = build_generator(schema)
    gen_b = build_generator(schema)
    gen_a.next_value()

    assert gen_b.next_value() == 5
    assert gen_a.next_value() == 4


def test_empty_cycle_is_rejected(tmp_path: Path) -> None:
    """Verify that a cycle over zero items fails validation."""
    yaml_path = write_yaml(tmp_path, "generators:\n  nothing: {type: cycle, items: []}\n")

    with pytest.raises(RuntimeError, match="Validation error"):
        GeneratorsFileSchema.validate_yaml(yaml_path)


def test_unknown_generator_type_is_rejected(tmp_path: Path) -> None:
    """Verify that an unrecognized generator type fails validation."""
    yaml_path = write_yaml(tmp_path, "generators:\n  zipped: {type: zip, sources: []}\n")

    with pytest.raises(RuntimeError, match="Validation error"):
        load_generators(yaml_path)


def test_extra_fields_are_rejected(tmp_path: Path) -> None:
    """Verify that unexpected fields in a generator declaration fail validation."""
    yaml_path = write_yaml(tmp_path, "generators:\n  sevens: {type: repeat, value: 7, n: 3}\n")

    with pytest.raises(RuntimeError, match="Validation error"):
        load_generators(yaml_path)


def test_missing_generators_key(tmp_path: Path) -> None:
    """Verify that a YAML file without a `generators` mapping is rejected."""
    yaml_path = write_yaml(tmp_path, "sevens: {type: repeat, value: 7}\n")

    with pytest.raises(KeyError, match="generators"):
        load_generators(yaml_path)


def test_missing_yaml_file(tmp_path: Path) -> None:
    """Verify that loading from a nonexistent file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_generators(tmp_path / "missing.yaml")


@pytest.mark.parametrize("contents", ["5\n", "- 1\n- 2\n", ""])
def test_non_mapping_yaml_is_rejected(tmp_path: Path, contents: str) -> None:
    """Verify that a YAML file whose top level is not a mapping raises a RuntimeError."""
    yaml_path = write_yaml(tmp_path, contents)

    with pytest.raises(RuntimeError, match="Expected a mapping"):
        load_generators(yaml_path)


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    """Verify that a YAML file that cannot be parsed raises a RuntimeError."""
    yaml_path = write_yaml(tmp_path, "generators: {evens: [\n")

    with pytest.raises(RuntimeError, match="Failed to parse"):
        load_generators(yaml_path)
