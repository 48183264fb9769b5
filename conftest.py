"""Pytest configuration: run against the source tree without file logging."""

from __future__ import annotations

import os
import sys

# settings 在 import 时读取环境变量，必须先于 src.* 的导入
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
