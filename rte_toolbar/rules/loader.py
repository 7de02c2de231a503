import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from rte_toolbar.rules.models import ToolbarRules

DEFAULT_RULES_PATH = "toolbar_rules.yaml"
RULES_PATH_ENV = "RTE_TOOLBAR_RULES"


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Pick the rules file: explicit path, then $RTE_TOOLBAR_RULES,
    then toolbar_rules.yaml in the working directory.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_RULES_PATH


def load_rules(path: Path) -> ToolbarRules:
    """
    Load and validate the toolbar rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return ToolbarRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
