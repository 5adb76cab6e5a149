"""Packaged project templates."""

from elza.templates.repository import TemplateRepository, TemplateSet, default_assets_root

__all__ = [
    "TemplateRepository",
    "TemplateSet",
    "default_assets_root",
]
