"""fsedit package: line-based file editing with encoding detection and preservation.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
