from pathlib import Path

import pytest

from rte_toolbar.adapters.rules_toolbar import RulesToolbarAdapter
from rte_toolbar.rules.loader import load_rules
from rte_toolbar.rules.models import ToolbarRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """Path to the project's toolbar rules file."""
    return PROJECT_ROOT / "toolbar_rules.yaml"


@pytest.fixture
def toolbar_rules(rules_path: Path) -> ToolbarRules:
    """Toolbar rules loaded from the real rules file."""
    return load_rules(rules_path)


@pytest.fixture
def rules_port(toolbar_rules: ToolbarRules) -> RulesToolbarAdapter:
    """Rules port backed by the real rules file."""
    return RulesToolbarAdapter(toolbar_rules)
