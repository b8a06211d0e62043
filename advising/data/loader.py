"""
Data loading and caching.

This module handles loading student profile files with caching to prevent
repeated file I/O when several analyses run against the same student.
"""

import json
import logging
from pathlib import Path

from ..config import DATA_DIR

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches student profile JSON files.
    
    Profiles live in the data directory as one JSON document per student
    (see data/example_student.json for the layout). Paths outside the data
    directory are accepted too, so a caller can point at any export.
    
    Usage:
        loader = DataLoader()
        raw = loader.load_profile("example_student")
        raw = loader.load_profile("/tmp/export.json")
    """
    
    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)
        self._profile_cache = {}  # Keyed by resolved file path
    
    def resolve(self, name_or_path) -> Path:
        """
        Turn a profile name or path into a file path.
        
        "example_student" → <data_dir>/example_student.json
        """
        path = Path(name_or_path)
        if path.suffix != ".json":
            path = path.with_name(path.name + ".json")
        if not path.is_absolute() and not path.exists():
            path = self.data_dir / path
        return path
    
    def load_profile(self, name_or_path) -> dict:
        """
        Load raw profile JSON.
        
        Raises:
            FileNotFoundError: the profile file doesn't exist
        """
        path = self.resolve(name_or_path)
        key = str(path.resolve())
        
        if key not in self._profile_cache:
            if not path.exists():
                raise FileNotFoundError(f"No student profile found at: {path}")
            logger.info("Loading student profile from %s", path)
            with open(path, "r", encoding="utf-8") as f:
                self._profile_cache[key] = json.load(f)
        return self._profile_cache[key]
    
    def list_available_profiles(self) -> list:
        """List profile names (file stems) in the data directory."""
        if not self.data_dir.exists():
            return []
        return sorted(f.stem for f in self.data_dir.glob("*.json"))
