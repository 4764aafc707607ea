import os
import json
import threading
from typing import Any, Optional
from .config import settings
from .logger import storage_logger as logger

class StorageService:
    """Centralized service for the workspace JSON collections (lists, saved searches, notes, custom companies)"""

    _lock = threading.Lock()

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = data_dir or settings.DATA_DIR
        os.makedirs(self.data_dir, exist_ok=True)

    def load_collection(self, name: str, default: Any) -> Any:
        """Load a collection, returning `default` when it has never been written"""
        filepath = self.get_file_path(name)
        if not os.path.exists(filepath):
            return default

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading file {filepath}: {str(e)}")
            return default

    def save_collection(self, name: str, data: Any) -> str:
        """Replace a collection on disk"""
        return self._save_json(data, self.get_file_path(name))

    def get_file_path(self, name: str) -> str:
        """Get the path of the data file for a collection name"""
        return os.path.join(self.data_dir, f"{self._clean_filename(name)}.json")

    def _clean_filename(self, name: str) -> str:
        """Clean a string to be used in a filename"""
        return ''.join(c for c in name if c.isalnum() or c in (' ', '-', '_')).strip().replace(' ', '_')

    def _save_json(self, data: Any, filepath: str) -> str:
        """Save JSON data to file via a temp file so readers never see a partial write"""
        tmp_path = f"{filepath}.tmp"
        with self._lock:
            try:
                with open(tmp_path, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, filepath)
                logger.debug(f"Saved data to {filepath}")
                return filepath
            except OSError as e:
                logger.error(f"Error saving to {filepath}: {str(e)}")
                raise
