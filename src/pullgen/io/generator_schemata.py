"""Define Pydantic models for validating YAML files that declare generators.

Example YAML file:

    generators:
      evens: {type: count, start: 0, step: 2}
      sevens: {type: repeat, value: 7}
      letters: {type: cycle, items: abc}
      triangular: {type: accumulate, source: {type: count, start: 1}}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import Annotated

from pullgen.constructors import accumulate, count, cycle, repeat
from pullgen.core import Generator

logger = logging.getLogger(__name__)

Number = Union[int, float]
"""A numeric value appearing in a generator declaration."""

Scalar = Union[bool, int, float, str]
"""A non-null scalar value appearing in a generator declaration."""

# =============================================================================
# Constructor Schemata
# =============================================================================


class CountSchema(BaseModel):
    """Schema for an arithmetic sequence created by count()."""

    type: Literal["count"]
    start: Number = 0
    step: Number = 1

    model_config = ConfigDict(extra="forbid")


class RepeatSchema(BaseModel):
    """Schema for a constant sequence created by repeat()."""

    type: Literal["repeat"]
    value: Scalar

    model_config = ConfigDict(extra="forbid")


class CycleSchema(BaseModel):
    """Schema for a cyclic replay created by cycle()."""

    type: Literal["cycle"]
    items: Union[
        Annotated[str, Field(min_length=1)],
        Annotated[List[Scalar], Field(min_length=1)],
    ]
    """Non-empty string or list of items to be replayed."""

    model_config = ConfigDict(extra="forbid")


class AccumulateSchema(BaseModel):
    """Schema for a running accumulation created by accumulate()."""

    type: Literal["accumulate"]
    source: GeneratorSchema

    model_config = ConfigDict(extra="forbid")


GeneratorSchema = Annotated[
    Union[CountSchema, RepeatSchema, CycleSchema, AccumulateSchema],
    Field(discriminator="type"),
]

AccumulateSchema.model_rebuild()

# =============================================================================
# Generators File Schema
# =============================================================================


def read_declarations(yaml_path: Path) -> dict:
    """Read the raw mapping of generator declarations from a YAML file.

    :param yaml_path: Path to a YAML file with a top-level `generators` mapping
    :return: Top-level mapping loaded from the file (not yet validated)
    :raises KeyError: If the file has no top-level `generators` key
    :raises RuntimeError: If the file cannot be parsed or its top level is not a mapping
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load generators from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to parse generators YAML file: {yaml_path}") from error

    if not isinstance(yaml_data, dict):
        kind = type(yaml_data).__name__
        raise RuntimeError(f"Expected a mapping at the top of {yaml_path}, got {kind}.")
    if "generators" not in yaml_data:
        raise KeyError(f"No 'generators' mapping was declared in {yaml_path}")

    return yaml_data


class GeneratorsFileSchema(BaseModel):
    """Schema for a YAML file mapping names to generator declarations."""

    generators: Dict[str, GeneratorSchema]

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def validate_yaml(cls, yaml_path: Path) -> GeneratorsFileSchema:
        """Validate a generators YAML file and return the resulting schema.

        :param yaml_path: Path to a YAML file to be validated by the schema
        :return: Validated GeneratorsFileSchema instance
        """
        yaml_data = read_declarations(yaml_path)

        try:
            return GeneratorsFileSchema.model_validate(yaml_data)
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err


def build_generator(schema: GeneratorSchema) -> Generator:
    """Construct the generator described by a validated schema.

    :param schema: Declaration of a generator (possibly nesting a source generator)
    :return: Newly constructed generator in its initial state
    """
    if isinstance(schema, CountSchema):
        return count(schema.start, schema.step)
    if isinstance(schema, RepeatSchema):
        return repeat(schema.value)
    if isinstance(schema, CycleSchema):
        return cycle(schema.items)
    if isinstance(schema, AccumulateSchema):
        return accumulate(build_generator(schema.source))

    raise TypeError(f"Unrecognized generator schema: {schema!r}")


def load_generators(yaml_path: Path) -> dict[str, Generator]:
    """Load the named generators declared in the given YAML file.

    :param yaml_path: Path to a YAML file with a top-level `generators` mapping
    :return: Map from generator names to newly constructed generators
    """
    file_schema = GeneratorsFileSchema.validate_yaml(yaml_path)
    generators = {name: build_generator(s) for name, s in file_schema.generators.items()}
    logger.info(f"Loaded {len(generators)} generators from {yaml_path}")
    return generators
