"""CLI layer — presentation, logging setup, and the process error boundary.

This package is the outermost layer.  It may import from ``core``, but
``core`` never imports from ``cli``.
"""
