"""
Colors and fonts for the ticker graphs.
Defaults match the classic green-on-black oscilloscope look.
"""

GRAPH_BG = (0, 0, 0)
GRAPH_GRID = (0, 128, 64)
GRAPH_LINE = (0, 255, 0)
GRAPH_TEXT = (255, 255, 255)

AXIS_FONT_FAMILY = "Arial"
AXIS_FONT_SIZE = 8
LABEL_FONT_FAMILY = "Arial"
LABEL_FONT_SIZE = 12

# Used by the voltage graph in the demo window
PAPER_BG = (255, 255, 255)
PAPER_INK = (0, 0, 0)
PAPER_GRID = (32, 32, 32)

NAVY_BG = (0, 32, 128)
RUST_LINE = (32, 0, 0)

LOG_WARNING = "orange"
LOG_ERROR = "red"
LOG_WELCOME = "pink"

STYLE_HEADING = """QLabel {
    font-size: 11pt;
    font-weight: bold;
}"""

STYLE_GRAPH_TITLE = """QLabel {
    font-size: 9pt;
    color: #a0a0a0;
}"""
