"""
tests/conftest.py

Корень проекта в sys.path, чтобы тесты запускались без установки пакета.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
