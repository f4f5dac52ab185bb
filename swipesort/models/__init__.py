# Models package 
from .session import SortingSession
from .track import Track
