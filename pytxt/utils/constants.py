APP_ORG = "QuickTools"
APP_NAME = "PyTextEditor"

# Persistent store
SETTINGS_TEXT = "editor/text"

DEFAULT_FILE_NAME = "document.txt"

# Characters offered as one-click "Remove <c>" actions
REMOVABLE_CHARACTERS: tuple[str, ...] = ("-", "/", "\\", ">", "<", ".", ",", "_", "*")

# Gemini
API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"
LOG_LEVEL_ENV = "PYTXT_LOG_LEVEL"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1"
GEMINI_MODEL = "gemini-1.5-pro"

AI_FALLBACK_TEXT = "No response from AI."
AI_SEPARATOR = "\n\n"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LIGHT_STYLESHEET = """
QMainWindow, QWidget { background: #faf5ff; color: #3b0764; }
QPlainTextEdit, QLineEdit { background: #ffffff; color: #000000; border: 1px solid #d8b4fe; border-radius: 8px; padding: 6px; }
QPushButton { background: #6b21a8; color: #ffffff; border-radius: 6px; padding: 6px 12px; }
QPushButton:disabled { background: #a78bfa; }
"""

DARK_STYLESHEET = """
QMainWindow, QWidget { background: #111827; color: #ffffff; }
QPlainTextEdit, QLineEdit { background: #1f2937; color: #ffffff; border: 1px solid #4b5563; border-radius: 8px; padding: 6px; }
QPushButton { background: #4b5563; color: #ffffff; border-radius: 6px; padding: 6px 12px; }
QPushButton:disabled { background: #374151; }
"""
