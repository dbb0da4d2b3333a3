import sys
import os

# Shared sample tables live in tests/samples.py
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)
