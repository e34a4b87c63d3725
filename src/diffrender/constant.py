from __future__ import annotations

import importlib.metadata

VERSION = importlib.metadata.version("diffrender")

TAB_ESCAPE = "\\t"
TAB_REPLACEMENT = "   "
