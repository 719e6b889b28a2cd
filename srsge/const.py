"""
Constants for the Soviet Republic save header editor.
"""

from pathlib import Path

# Workers & Resources: Soviet Republic Steam app ID
SOVIET_REPUBLIC_APP_ID = 784150

# Save folders live inside the game installation, one directory per save
SAVE_SUBDIR = Path('media_soviet') / 'save'
HEADER_FILENAME = 'header.bin'
BACKUP_SUFFIX = '.bak'

DEFAULT_WINDOWS_SAVE_ROOT = Path(r'C:\Program Files (x86)\Steam\steamapps\common\SovietRepublic\media_soviet\save')

# Limits of the year spin box in the original editor
YEAR_MIN = 0
YEAR_MAX = 9999
