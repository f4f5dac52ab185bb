from functools import wraps
from flask import current_app, jsonify

from swipesort.services import get_storage


def track_required(fn):
    """
    Decorator that resolves the ``track_id`` URL argument to a Track.
    Responds 404 when no track has that id; the view receives ``track``.

    Usage:
        @tracks_bp.route('/<int:track_id>/audio')
        @track_required
        def get_track_audio(track):
            ...
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            track_id = kwargs.pop('track_id')
            track = get_storage().get_track(track_id)
        except Exception:
            current_app.logger.exception("Error looking up track")
            return jsonify({'error': 'Internal server error'}), 500

        if not track:
            return jsonify({'error': 'Track not found'}), 404

        return fn(*args, track=track, **kwargs)

    return wrapper
