import uuid
from datetime import datetime, timezone

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from swipesort.services import get_storage, build_archive, build_playlist, NoLikedTracks
from swipesort.utils import is_audio_upload, generate_stored_name, get_liked_tracks, \
    compute_statistics, attachment_headers

sessions_bp = Blueprint('sessions', __name__)


@sessions_bp.route('', methods=['POST'])
def create_session():
    """Start a new sorting session"""
    try:
        session = get_storage().create_session(
            uuid.uuid4().hex,
            datetime.now(timezone.utc).isoformat()
        )
        current_app.logger.info("Created session %s", session.session_id)
        return jsonify({'session': session.to_dict()}), 200
    except Exception:
        current_app.logger.exception("Error creating session")
        return jsonify({'error': 'Failed to create session'}), 500


@sessions_bp.route('/<session_id>/tracks', methods=['POST'])
def upload_tracks(session_id):
    """Store uploaded MP3 files as tracks of the session"""
    try:
        storage = get_storage()
        files = [f for f in request.files.getlist('tracks') if f and f.filename]

        if not files:
            return jsonify({'error': 'No files uploaded'}), 400

        # Validate the whole batch before anything is stored
        max_size = current_app.config['MAX_TRACK_SIZE']
        uploads = []
        for file in files:
            if not is_audio_upload(file):
                return jsonify({'error': 'Only MP3 files are allowed'}), 400
            data = file.read(max_size + 1)
            if len(data) > max_size:
                return jsonify({'error': f'File {file.filename} exceeds the {max_size} byte limit'}), 400
            uploads.append((file.filename, data))

        session = storage.get_session(session_id)
        if not session:
            return jsonify({'error': 'Session not found'}), 404

        tracks = []
        for original_name, data in uploads:
            file_name = generate_stored_name(original_name)
            file_path = storage.files.save_file(session_id, file_name, data)
            track = storage.create_track(
                session_id=session_id,
                file_name=file_name,
                original_name=original_name,
                file_size=len(data),
                duration=None,
                liked=None,
                processed=False,
                file_path=file_path
            )
            tracks.append(track)

        current_app.logger.info("Uploaded %d tracks to session %s", len(tracks), session_id)
        return jsonify({'tracks': [track.to_dict() for track in tracks]}), 200
    except RequestEntityTooLarge:
        raise
    except Exception:
        current_app.logger.exception("Error uploading tracks")
        return jsonify({'error': 'Failed to upload tracks'}), 500


@sessions_bp.route('/<session_id>/tracks', methods=['GET'])
def get_session_tracks(session_id):
    try:
        tracks = get_storage().get_tracks_by_session(session_id)
        return jsonify({'tracks': [track.to_dict() for track in tracks]}), 200
    except Exception:
        current_app.logger.exception("Error fetching tracks")
        return jsonify({'error': 'Failed to fetch tracks'}), 500


@sessions_bp.route('/<session_id>/statistics', methods=['GET'])
def get_session_statistics(session_id):
    try:
        tracks = get_storage().get_tracks_by_session(session_id)
        statistics = compute_statistics(tracks)
        return jsonify({'statistics': statistics}), 200
    except Exception:
        current_app.logger.exception("Error fetching statistics")
        return jsonify({'error': 'Failed to fetch statistics'}), 500


@sessions_bp.route('/<session_id>/download', methods=['GET'])
def download_liked_tracks(session_id):
    """Liked tracks plus playlist.txt as a zip archive"""
    try:
        storage = get_storage()
        liked_tracks = get_liked_tracks(storage.get_tracks_by_session(session_id))
        archive = build_archive(liked_tracks, storage.files)

        headers = attachment_headers(f"liked-tracks-{session_id}.zip")
        headers['Content-Length'] = str(len(archive))
        return Response(archive, mimetype='application/zip', headers=headers)
    except NoLikedTracks:
        return jsonify({'error': 'No liked tracks to download'}), 404
    except Exception:
        current_app.logger.exception("Error creating download")
        return jsonify({'error': 'Failed to create download'}), 500


@sessions_bp.route('/<session_id>/playlist', methods=['GET'])
def download_playlist(session_id):
    try:
        tracks = get_storage().get_tracks_by_session(session_id)
        playlist = build_playlist(get_liked_tracks(tracks))
        return Response(playlist, mimetype='text/plain',
                        headers=attachment_headers(f"playlist-{session_id}.txt"))
    except Exception:
        current_app.logger.exception("Error creating playlist")
        return jsonify({'error': 'Failed to create playlist'}), 500
