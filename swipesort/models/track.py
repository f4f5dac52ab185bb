from swipesort import db

class Track(db.Model):
    __tablename__ = 'tracks'

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.String(64), nullable=False, index=True)
    file_name = db.Column(db.String(500), nullable=False)
    original_name = db.Column(db.String(500), nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    duration = db.Column(db.Integer, nullable=True)  # seconds
    liked = db.Column(db.Boolean, nullable=True)
    processed = db.Column(db.Boolean, default=False)
    file_path = db.Column(db.String(1000), nullable=False)

    def __init__(self, session_id, file_name, original_name, file_size, file_path,
                 duration=None, liked=None, processed=False, id=None):
        if id is not None:
            self.id = id
        self.session_id = session_id
        self.file_name = file_name
        self.original_name = original_name
        self.file_size = file_size
        self.file_path = file_path
        self.duration = duration
        self.liked = liked
        self.processed = bool(processed)

    @property
    def is_judged(self):
        return self.liked is not None

    def format_duration(self):
        """Format duration in M:SS format"""
        if not self.duration:
            return None
        minutes = self.duration // 60
        seconds = self.duration % 60
        return f"{minutes}:{seconds:02d}"

    def format_file_size(self):
        """Format file size with a binary unit, e.g. 4.9 KB"""
        size = self.file_size or 0
        if size == 0:
            return "0 B"
        units = ["B", "KB", "MB", "GB"]
        index = 0
        value = float(size)
        while value >= 1024 and index < len(units) - 1:
            value /= 1024
            index += 1
        return f"{round(value, 1):g} {units[index]}"

    def to_dict(self):
        """Convert track to dictionary"""
        return {
            'id': self.id,
            'sessionId': self.session_id,
            'fileName': self.file_name,
            'originalName': self.original_name,
            'fileSize': self.file_size,
            'fileSizeFormatted': self.format_file_size(),
            'duration': self.duration,
            'durationFormatted': self.format_duration(),
            'liked': self.liked,
            'processed': self.processed,
            'filePath': self.file_path
        }

    def __repr__(self):
        return f'<Track {self.id} {self.original_name}>'
