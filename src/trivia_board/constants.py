"""
Constants and default configuration values for the trivia board.

This module centralizes the catalog endpoints, board dimensions and logging
formats so the loader, client and CLI agree on them.
"""

# Catalog Service Constants
CATALOG_ENDPOINTS = {
    'list_categories': '/categories',
    'get_category': '/category'
}

DEFAULT_BASE_URL = 'http://jservice.io/api'

# Board Dimensions
BOARD_DEFAULTS = {
    'category_count': 6,
    'clues_per_category': 5,
    'max_offset': 18000,
    'cell_width': 18
}

# Text Processing Constants
TEXT_CLEANUP_PATTERNS = {
    'escaped_quotes': [r"\\'", r'\\"'],
    'whitespace': r'\s+'
}

HIDDEN_CELL_TEXT = '?'

# Log Formats
LOG_FORMATS = {
    'file': '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
    'console': '%(asctime)s - %(levelname)s - %(message)s',
    'console_datefmt': '%H:%M:%S'
}

# File Paths
DEFAULT_PATHS = {
    'config_file': 'config/settings.json',
    'log_file': 'logs/trivia_board.log'
}

# Default settings, merged under any settings file that is loaded
DEFAULT_SETTINGS = {
    'catalog': {
        'base_url': DEFAULT_BASE_URL,
        'timeout_seconds': 10,
        'concurrency': BOARD_DEFAULTS['category_count'],
        'user_agent': 'trivia-board/1.0'
    },
    'board': dict(BOARD_DEFAULTS),
    'logging': {
        'level': 'INFO',
        'file': DEFAULT_PATHS['log_file'],
        'max_size': 10485760,
        'backup_count': 5
    }
}
