from functools import lru_cache

from fastapi import Depends

from rte_toolbar.adapters.rules_toolbar import RulesToolbarAdapter
from rte_toolbar.rules.loader import load_rules, resolve_rules_path
from rte_toolbar.rules.models import ToolbarRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> ToolbarRules:
    return load_rules(settings.rules_path)


def get_toolbar_rules(rules: ToolbarRules = Depends(get_rules)) -> RulesToolbarAdapter:
    return RulesToolbarAdapter(rules)
