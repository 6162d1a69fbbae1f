"""Select the top N values from a large input file."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from models.max_values import MaxValues
from utils.loader import iter_records, iter_values

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load and validate configuration.

    Args:
        config_path: Path to the config file (defaults to config.json next to main.py)

    Returns:
        Configuration dictionary with defaults filled in

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If a required field is missing or invalid
    """
    if config_path is None:
        config_path = Path(__file__).parent / "config.json"
    config_path = Path(config_path)

    with open(config_path, "r", encoding="utf-8") as f:
        config = json.load(f)

    # Validate required fields
    if "capacity" not in config:
        raise ValueError("Missing required field 'capacity' in config.json")

    capacity = config["capacity"]
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
        raise ValueError(f"'capacity' must be a non-negative integer, got {capacity!r}")

    if "input_file" not in config:
        raise ValueError("Missing required field 'input_file' in config.json")

    if not isinstance(config["input_file"], str) or not config["input_file"]:
        raise ValueError(f"'input_file' must be a non-empty string, got {config['input_file']!r}")

    output_folder = config.setdefault("output_folder", "output")
    if not isinstance(output_folder, str):
        raise ValueError(f"'output_folder' must be a string, got {output_folder!r}")

    output_format = config.setdefault("output_format", "json")
    if isinstance(output_format, str):
        output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output_format: {output_format}. "
            f"Supported formats: 'json', 'yaml'"
        )
    config["output_format"] = output_format

    config.setdefault("key_field", None)

    # Relative paths are resolved against the config file location
    base_dir = config_path.parent
    config["input_file"] = str(base_dir / config["input_file"])
    config["output_folder"] = str(base_dir / config["output_folder"])

    return config


def _write_output(values: List[Any], config: Dict[str, Any]) -> Path:
    """Write selected values to the output folder, returning the file path."""
    import yaml

    output_folder = Path(config["output_folder"])
    output_folder.mkdir(parents=True, exist_ok=True)

    filepath = output_folder / f"top_{config['capacity']}.{config['output_format']}"
    with open(filepath, "w", encoding="utf-8") as f:
        if config["output_format"] == "yaml":
            yaml.dump(
                values,
                f,
                allow_unicode=True,
                sort_keys=False,
                default_flow_style=False,
            )
        else:
            json.dump(values, f, ensure_ascii=False, indent=2)

    return filepath


def run(config: Dict[str, Any]) -> List[Any]:
    """
    Stream the input file through MaxValues and write the result.

    Args:
        config: Validated configuration from load_config

    Returns:
        Selected values (or records), largest first
    """
    capacity = config["capacity"]
    key_field = config.get("key_field")
    input_file = config["input_file"]

    if key_field:
        logger.info(f"Selecting top {capacity} records of {input_file} by '{key_field}'")
        source = iter_records(input_file, key_field)
    else:
        logger.info(f"Selecting top {capacity} values of {input_file}")
        source = iter_values(input_file)

    top = MaxValues(capacity)
    seen = 0
    for value in source:
        top.push(value)
        seen += 1

    logger.info(f"Processed {seen} values, retained {len(top)}")

    # The heap is unordered, sort only for presentation
    selected = sorted(top.into_iter(), reverse=True)
    if key_field:
        selected = [entry.item for entry in selected]

    filepath = _write_output(selected, config)
    logger.info(f"Wrote {len(selected)} values to {filepath}")

    return selected


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point, returns a process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    config_path = Path(argv[0]) if argv else None

    try:
        config = load_config(config_path)
        run(config)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
