"""Project model and file generation for ELZA.

Submodules are imported directly (``elza.core.options``,
``elza.core.project``) so the selector in ``elza.ui`` can depend on the
option types without importing the creation flow.
"""
