from rte_toolbar.rules.loader import DEFAULT_RULES_PATH, load_rules, resolve_rules_path
from rte_toolbar.rules.models import MobileRules, RepairRules, ToolbarRules

__all__ = [
    "DEFAULT_RULES_PATH",
    "MobileRules",
    "RepairRules",
    "ToolbarRules",
    "load_rules",
    "resolve_rules_path",
]
