import os

# Paths
DEFAULT_DIRECTORY = os.curdir

# Concurrency
MAX_WORKERS = 10  # simultaneous renames (caps open handles / fs load)

# Identifiers
ID_BYTES = 16  # 16 = UUIDv4-shaped hex, 8 = short 64-bit hex
ALLOWED_ID_BYTES = (8, 16)

# Extensions eligible for renaming (lowercase, with dot)
SUPPORTED_EXTENSIONS = frozenset({
    # images
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tiff", ".svg",
    # video
    ".mp4", ".mov", ".avi", ".mkv", ".flv", ".wmv", ".webm", ".mpeg", ".mpg", ".3gp",
})

# Logging
LOGGER_NAME = "media_renamer"
LOG_FORMAT_CONSOLE = "%(message)s"
LOG_FORMAT_FILE = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
