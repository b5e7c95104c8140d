"""Pytest configuration ensuring `src` and the repository root are on sys.path.

Allows `import flood_simulator...`, `import main` and `import api...` without
installing the package.
"""
import sys
import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)
