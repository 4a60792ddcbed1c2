import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from primer.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path("primer_rules.yaml")


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Loaded rules from %s", path)
    return rules


def load_rules_or_default(path: Path | None = None) -> Rules:
    """
    Load rules from path, or DEFAULT_RULES_PATH when no path is given.

    Falls back to built-in defaults only when the default file is absent;
    an explicit path that does not exist still raises.
    """
    if path is not None:
        return load_rules(path)

    if not DEFAULT_RULES_PATH.exists():
        logger.debug("No rules file at %s, using defaults", DEFAULT_RULES_PATH)
        return Rules()

    return load_rules(DEFAULT_RULES_PATH)
