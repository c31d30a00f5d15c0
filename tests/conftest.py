from __future__ import annotations

import os

# Keep telelog console output out of the test report.
os.environ.setdefault("CARET_ENGINE_DISABLE_CONSOLE", "1")
