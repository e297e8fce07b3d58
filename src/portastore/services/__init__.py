from .collision import map_creation_option, map_name_option
from .file import File
from .filesystem import FileSystem
from .folder import Folder
from .translation import translate


__all__ = [
    'File',
    'FileSystem',
    'Folder',
    'map_creation_option',
    'map_name_option',
    'translate',
]
