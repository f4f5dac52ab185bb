# Routes package 
from .sessions import sessions_bp
from .tracks import tracks_bp
