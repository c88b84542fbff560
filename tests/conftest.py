"""Makes `lap_counter` importable from a source checkout without installing."""

import os
import sys

SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
