from .kv_store import KeyValueStore
from .models import MoodEntry, Preferences, Sentiment, UserData
from .store import EntryStore

__all__ = ["EntryStore", "KeyValueStore", "MoodEntry", "Preferences", "Sentiment", "UserData"]
