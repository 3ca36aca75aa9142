"""
Session templates for lift-scheduler.

Day templates are supplied by a TemplateProvider; the built-in table is
used unless a YAML catalog replaces it.
"""

from .base import DayTemplate, TemplateProvider, uniform_sets
from .defaults import DefaultTemplateProvider, default_day_templates
from .loader import YamlTemplateProvider, load_template_provider

__all__ = [
    "DayTemplate",
    "TemplateProvider",
    "uniform_sets",
    "DefaultTemplateProvider",
    "default_day_templates",
    "YamlTemplateProvider",
    "load_template_provider",
]
