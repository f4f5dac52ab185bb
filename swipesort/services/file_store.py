import os
import shutil
import logging
import threading

logger = logging.getLogger(__name__)


class FileStore:
    """Uploaded audio bytes on disk, one directory per session token.

    Bytes are kept in an in-memory cache as well; the disk copy is what
    survives a restart, so a cache miss falls back to reading the file.
    """

    def __init__(self, root_dir):
        self.root_dir = os.path.abspath(root_dir)
        os.makedirs(self.root_dir, exist_ok=True)
        self._cache = {}
        self._lock = threading.Lock()

    def session_dir(self, session_id):
        return os.path.join(self.root_dir, session_id)

    def save_file(self, session_id, file_name, data):
        """Write bytes for a session and return the storage path"""
        session_dir = self.session_dir(session_id)
        os.makedirs(session_dir, exist_ok=True)

        file_path = os.path.join(session_dir, file_name)
        with open(file_path, 'wb') as f:
            f.write(data)

        with self._lock:
            self._cache[file_path] = data
        logger.debug("Saved %d bytes to %s", len(data), file_path)
        return file_path

    def get_file(self, file_path):
        """Return stored bytes, or None when neither cache nor disk has them"""
        with self._lock:
            data = self._cache.get(file_path)
        if data is not None:
            return data

        if not os.path.isfile(file_path):
            return None
        with open(file_path, 'rb') as f:
            data = f.read()
        with self._lock:
            self._cache[file_path] = data
        return data

    def delete_session_files(self, session_id):
        """Remove a session's directory and drop its cached entries"""
        session_dir = self.session_dir(session_id)
        if os.path.exists(session_dir):
            shutil.rmtree(session_dir)

        prefix = session_dir + os.sep
        with self._lock:
            stale = [path for path in self._cache if path.startswith(prefix)]
            for path in stale:
                del self._cache[path]
        logger.info("Deleted files for session %s (%d cached entries)", session_id, len(stale))
