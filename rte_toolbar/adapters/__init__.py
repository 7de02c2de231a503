"""
Adapters for the toolbar component.
"""

from .rules_toolbar import RulesToolbarAdapter

__all__ = ["RulesToolbarAdapter"]
