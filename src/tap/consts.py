"""Constants."""

PROGRAM_NAME = "tap"
DISTRIBUTION_NAME = "tap-cli"

# Naive format, always interpreted as UTC.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_FORMAT_HUMAN = "YYYY-MM-DD HH:MM:SS"

# Permission bits plus setuid, setgid and sticky.
MODE_MAX = 0o7777
