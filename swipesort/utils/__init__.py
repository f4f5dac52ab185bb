# Utils package 
from .audio import allowed_file, is_audio_upload, generate_stored_name, generate_waveform, cached_waveform
from .decorators import track_required
from .downloads import attachment_headers
from .statistics import get_liked_tracks, compute_statistics
