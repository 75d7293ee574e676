"""
Root conftest.py - puts the project root on sys.path so the tests import the
working tree's ``chromashade`` even without an editable install.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
