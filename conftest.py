import os
import sys
from pathlib import Path

# Ensure repo root is importable for tests.
ROOT_DIR = Path(__file__).resolve().parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Keep test runs from writing log files into the repo.
os.environ.setdefault("COSTCHECK_LOG_TO_FILE", "false")
