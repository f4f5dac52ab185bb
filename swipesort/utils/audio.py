import random
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

from swipesort import cache

AUDIO_MIMETYPE = 'audio/mpeg'
ALLOWED_EXTENSIONS = {'mp3'}
WAVEFORM_SAMPLES = 100

def allowed_file(filename):
    """Check if the file extension is allowed"""
    return '.' in filename and \
           filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS

def is_audio_upload(file):
    """Accept by declared content type or by .mp3 extension"""
    return file.mimetype == AUDIO_MIMETYPE or allowed_file(file.filename or '')

def generate_stored_name(original_name):
    """Disambiguated on-disk name: <random id>-<sanitised original name>"""
    safe_name = secure_filename(original_name) or 'track.mp3'
    return f"{uuid.uuid4().hex[:12]}-{safe_name}"

def generate_waveform(samples=WAVEFORM_SAMPLES):
    # Placeholder bars for the player; no signal analysis is done
    return [random.random() * 0.8 + 0.2 for _ in range(samples)]

def cached_waveform(track_id, samples=WAVEFORM_SAMPLES):
    """Same bars for a track across requests until the cache entry expires"""
    key = f"track_waveform:{track_id}:{samples}"
    waveform = cache.get(key)
    if waveform is None:
        waveform = generate_waveform(samples)
        cache.set(key, waveform, timeout=current_app.config['WAVEFORM_CACHE_TIMEOUT'])
    return waveform
