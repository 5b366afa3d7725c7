"""Import definitions used for configuration files and terminal output."""

from .generator_schemata import GeneratorsFileSchema as GeneratorsFileSchema
from .generator_schemata import build_generator as build_generator
from .generator_schemata import load_generators as load_generators
from .logging import console as console
from .logging import log_info as log_info
from .preview import preview_table as preview_table
from .preview import pull_values as pull_values
from .preview_cli import preview_cli as preview_cli
