"""Constants shared across the mindset analysis SDK.

Layout values mirror the fixed report design: one centered title, a
score line, a strategy line and a width-constrained body paragraph.
"""

# Chat model used when none is configured.
DEFAULT_MODEL = "gpt-4o-mini"

# --- PDF report layout ---
REPORT_TITLE = "Mindset Report"
REPORT_FILENAME = "report.pdf"

TITLE_FONT_SIZE = 18
HEADLINE_FONT_SIZE = 14
BODY_FONT_SIZE = 12

# Width (points) of the description paragraph.
BODY_WIDTH = 500

# Height (points) of one "move down" gap between blocks.
LINE_GAP = 14

# Bytes per chunk when streaming the rendered document.
STREAM_CHUNK_SIZE = 8192
