"""Unicode emojis used as icons."""

ICON_CHECK = "\U00002705"  # Check Mark
ICON_CROSS = "\U0000274c"  # Cross Mark
ICON_FOLDER = "\U0001f4c1"  # File Folder
ICON_FILE = "\U0001f4c4"  # Page Facing Up
ICON_PROCESSING = "\U0001f50d"  # Magnifying Glass
ICON_WRITE = "\U0000270f"  # Pencil
ICON_TRIM = "\U00002702"  # Black Scissors
ICON_TEMPLATE = "\U0001f4c3"  # Page with Curl
ICON_LOCK = "\U0001f512"  # Lock
ICON_CLOCK = "\U0001f552"  # Clock
