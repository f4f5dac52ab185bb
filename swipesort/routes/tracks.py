from flask import Blueprint, Response, current_app, jsonify, request

from swipesort.services import get_storage
from swipesort.utils import track_required, cached_waveform, attachment_headers
from swipesort.utils.audio import AUDIO_MIMETYPE, WAVEFORM_SAMPLES

tracks_bp = Blueprint('tracks', __name__)

MAX_WAVEFORM_SAMPLES = 1000


@tracks_bp.route('/<int:track_id>/audio', methods=['GET'])
@track_required
def get_track_audio(track):
    """Serve the raw audio; the whole body is always sent"""
    try:
        data = get_storage().files.get_file(track.file_path)
        if data is None:
            return jsonify({'error': 'Audio file not found'}), 404

        return Response(data, mimetype=AUDIO_MIMETYPE, headers={
            'Content-Length': str(len(data)),
            'Accept-Ranges': 'bytes'
        })
    except Exception:
        current_app.logger.exception("Error serving audio")
        return jsonify({'error': 'Failed to serve audio file'}), 500


@tracks_bp.route('/<int:track_id>', methods=['PATCH'])
@track_required
def update_track(track):
    """Record a like (true) or dislike (false)"""
    try:
        data = request.get_json(silent=True) or {}
        liked = data.get('liked')
        if not isinstance(liked, bool):
            return jsonify({'error': 'liked must be true or false'}), 400

        updated_track = get_storage().update_track(track.id, {'liked': liked})
        if not updated_track:
            return jsonify({'error': 'Track not found'}), 404

        return jsonify({'track': updated_track.to_dict()}), 200
    except Exception:
        current_app.logger.exception("Error updating track")
        return jsonify({'error': 'Failed to update track'}), 500


@tracks_bp.route('/<int:track_id>/download', methods=['GET'])
@track_required
def download_track(track):
    try:
        data = get_storage().files.get_file(track.file_path)
        if data is None:
            return jsonify({'error': 'Audio file not found'}), 404

        headers = attachment_headers(track.original_name)
        headers['Content-Length'] = str(len(data))
        return Response(data, mimetype=AUDIO_MIMETYPE, headers=headers)
    except Exception:
        current_app.logger.exception("Error downloading track")
        return jsonify({'error': 'Failed to download track'}), 500


@tracks_bp.route('/<int:track_id>/waveform', methods=['GET'])
@track_required
def get_track_waveform(track):
    """Placeholder amplitudes for drawing the player's waveform bars"""
    samples = request.args.get('samples', WAVEFORM_SAMPLES, type=int)
    if not 1 <= samples <= MAX_WAVEFORM_SAMPLES:
        return jsonify({'error': f'samples must be between 1 and {MAX_WAVEFORM_SAMPLES}'}), 400
    return jsonify({'waveform': cached_waveform(track.id, samples)}), 200
