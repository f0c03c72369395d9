"""tfvc_workspace package: find the TFVC workspace of a local folder from 'tf workfold' output.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
