# -*- coding: utf-8 -*-
APP_NAME = "pngsecret"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Hide, read and strip messages in PNG chunks"

# Logging
LOGGING_SETTINGS = {
    "level": "INFO",              # file handler: DEBUG/INFO/WARNING/ERROR
    "console_level": "CRITICAL",  # raised to DEBUG by --verbose
    "log_dir": "logs",
    "log_file": "pngsecret.log",
    "max_bytes": 2 * 1024 * 1024,
    "backup_count": 3,
}

# Chunk stream handling
PNG_SETTINGS = {
    "terminator_type": "IEND",    # encode inserts new chunks before this one
}

# Default output naming: <stem><suffix><ext> next to the input file
OUTPUT_SETTINGS = {
    "encode_suffix": "_encoded",
    "remove_suffix": "_removed",
}
