from __future__ import annotations

from dacite import Config

# Node payloads are loosely typed; values are taken as sent and missing keys fall back to defaults.
DACITE_CONFIG = Config(check_types=False)
