"""User-facing interfaces for fontpkg."""
