from __future__ import annotations

MAX_SUPPORTED_API_MAJOR_VERSION = 4
GOOD_RESPONSE_RANGE = range(200, 300)

# Resolution matching
DURATION_MATCH_WINDOW = 2000  # milliseconds, inclusive on both sides
TOPIC_CHANNEL_SUFFIX = " - Topic"
