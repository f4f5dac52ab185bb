import io
import os
import logging
import zipfile

logger = logging.getLogger(__name__)

PLAYLIST_NAME = 'playlist.txt'


def archive_name(original_name):
    """Flatten a client-supplied name to a bare file name inside the archive"""
    name = os.path.basename(original_name.replace('\\', '/'))
    return name if name not in ('', '.', '..') else 'track.mp3'


class NoLikedTracks(Exception):
    """Raised when an archive is requested for an empty liked set"""


def build_playlist(tracks):
    """One original filename per line, in the order given"""
    return '\n'.join(track.original_name for track in tracks)


def build_archive(tracks, file_store):
    """Zip the tracks' audio under their flattened original names plus playlist.txt"""
    if not tracks:
        raise NoLikedTracks()

    # Later tracks replace earlier ones with the same original name
    entries = {}
    for track in tracks:
        data = file_store.get_file(track.file_path)
        if data is None:
            logger.warning("Skipping track %s, audio missing at %s", track.id, track.file_path)
            continue
        entries[archive_name(track.original_name)] = data
    entries.pop(PLAYLIST_NAME, None)

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
        zf.writestr(PLAYLIST_NAME, build_playlist(tracks))
    return buffer.getvalue()
