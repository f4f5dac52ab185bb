def get_liked_tracks(tracks):
    return [track for track in tracks if track.liked is True]

def compute_statistics(tracks):
    """Counts of judged tracks plus the liked ones, in upload order"""
    liked_tracks = get_liked_tracks(tracks)
    total_removed = len([track for track in tracks if track.liked is False])
    return {
        'totalListened': len(liked_tracks) + total_removed,
        'totalSaved': len(liked_tracks),
        'totalRemoved': total_removed,
        'likedTracks': [track.to_dict() for track in liked_tracks]
    }
