import logging
import threading
from abc import ABC, abstractmethod

from flask import current_app

from swipesort import db
from swipesort.models import SortingSession, Track

logger = logging.getLogger(__name__)

TRACK_FIELDS = ('session_id', 'file_name', 'original_name', 'file_size', 'duration',
                'liked', 'processed', 'file_path')


def get_storage():
    """Repository registered on the current app by create_app"""
    return current_app.extensions['swipesort_storage']


class BaseStorage(ABC):
    """Session and track bookkeeping. Stored bytes live in ``self.files``."""

    def __init__(self, files):
        self.files = files

    @abstractmethod
    def create_session(self, session_id, created_at=None):
        pass

    @abstractmethod
    def get_session(self, session_id):
        pass

    @abstractmethod
    def create_track(self, **fields):
        pass

    @abstractmethod
    def get_tracks_by_session(self, session_id):
        pass

    @abstractmethod
    def get_track(self, track_id):
        pass

    @abstractmethod
    def update_track(self, track_id, updates):
        pass

    @abstractmethod
    def delete_track(self, track_id):
        pass


def _apply_updates(track, updates):
    for key, value in updates.items():
        if key in TRACK_FIELDS:
            setattr(track, key, value)
    return track


class MemStorage(BaseStorage):
    """In-process tables, lost on restart (the file mirror is not)"""

    def __init__(self, files):
        super().__init__(files)
        self._sessions = {}
        self._tracks = {}
        self._sessions_lock = threading.Lock()
        self._tracks_lock = threading.Lock()
        self._session_id_counter = 1
        self._track_id_counter = 1

    def create_session(self, session_id, created_at=None):
        with self._sessions_lock:
            session = SortingSession(session_id, created_at, id=self._session_id_counter)
            self._session_id_counter += 1
            self._sessions[session.session_id] = session
        return session

    def get_session(self, session_id):
        return self._sessions.get(session_id)

    def create_track(self, **fields):
        with self._tracks_lock:
            track = Track(id=self._track_id_counter, **fields)
            self._track_id_counter += 1
            self._tracks[track.id] = track
        return track

    def get_tracks_by_session(self, session_id):
        with self._tracks_lock:
            return [track for track in self._tracks.values() if track.session_id == session_id]

    def get_track(self, track_id):
        return self._tracks.get(track_id)

    def update_track(self, track_id, updates):
        with self._tracks_lock:
            track = self._tracks.get(track_id)
            if not track:
                return None
            return _apply_updates(track, updates)

    def delete_track(self, track_id):
        with self._tracks_lock:
            self._tracks.pop(track_id, None)


class DatabaseStorage(BaseStorage):
    """Same operations backed by the SQLAlchemy models; needs an app context"""

    def create_session(self, session_id, created_at=None):
        session = SortingSession(session_id, created_at)
        try:
            db.session.add(session)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return session

    def get_session(self, session_id):
        return SortingSession.query.filter_by(session_id=session_id).first()

    def create_track(self, **fields):
        track = Track(**fields)
        try:
            db.session.add(track)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return track

    def get_tracks_by_session(self, session_id):
        return Track.query.filter_by(session_id=session_id).order_by(Track.id.asc()).all()

    def get_track(self, track_id):
        return db.session.get(Track, track_id)

    def update_track(self, track_id, updates):
        track = db.session.get(Track, track_id)
        if not track:
            return None
        try:
            _apply_updates(track, updates)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return track

    def delete_track(self, track_id):
        track = db.session.get(Track, track_id)
        if not track:
            return
        try:
            db.session.delete(track)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.debug("Deleted track %s", track_id)
