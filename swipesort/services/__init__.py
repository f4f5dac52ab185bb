# Services package
from .file_store import FileStore
from .storage import BaseStorage, MemStorage, DatabaseStorage, get_storage
from .bundling import NoLikedTracks, build_playlist, build_archive
