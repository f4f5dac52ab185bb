from datetime import datetime, timezone

from swipesort import db

class SortingSession(db.Model):
    """One user's sorting run, addressed externally by its public token"""
    __tablename__ = 'sessions'

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.String(64), unique=True, nullable=False, index=True)
    created_at = db.Column(db.String(40), nullable=False)

    def __init__(self, session_id, created_at=None, id=None):
        if id is not None:
            self.id = id
        self.session_id = session_id
        self.created_at = created_at or datetime.now(timezone.utc).isoformat()

    def to_dict(self):
        """Convert session to dictionary"""
        return {
            'id': self.id,
            'sessionId': self.session_id,
            'createdAt': self.created_at
        }

    def __repr__(self):
        return f'<SortingSession {self.session_id}>'
