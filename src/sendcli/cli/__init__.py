"""CLI layer — argument schema, argument access, prompts and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``config``, but no other layer may import from
``cli``.
"""
