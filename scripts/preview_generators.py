"""Print the leading values of each generator declared in a YAML file.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/preview_generators.py tests/test_data/yaml/generators.yaml --num-values 8

"""

from pullgen.io import preview_cli

if __name__ == "__main__":
    preview_cli()
