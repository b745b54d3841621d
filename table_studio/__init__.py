"""
Top-level package for Table Studio.

This package exposes the client architecture (view state, controllers, UI adapters).
Most code should import from submodules such as:
    table_studio.core
    table_studio.services
    table_studio.ui
"""

__all__: list[str] = []
