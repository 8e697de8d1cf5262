import os

from dotenv import load_dotenv

from tictactoe.cli import LOG_LEVELS
from tictactoe.state import Theme

load_dotenv()

HOST = os.getenv("TTT_HOST", "127.0.0.1")

try:
    PORT = int(os.getenv("TTT_PORT", "8000"))
except ValueError:
    raise ValueError(f"TTT_PORT must be an integer, got {os.getenv('TTT_PORT')!r}") from None

try:
    DEFAULT_THEME = Theme(os.getenv("TTT_THEME", "light").strip().lower())
except ValueError:
    raise ValueError(f"TTT_THEME must be 'light' or 'dark', got {os.getenv('TTT_THEME')!r}") from None

LOG_LEVEL = os.getenv("TTT_LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in LOG_LEVELS:
    raise ValueError(f"TTT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {os.getenv('TTT_LOG_LEVEL')!r}")
