"""
Top-level package for the keyword research browser.

This package exposes the core architecture (decoding, querying, UI adapters).
Most code should import from submodules such as:
    kw_browser.core
    kw_browser.services
    kw_browser.ui
"""

__all__: list[str] = []
