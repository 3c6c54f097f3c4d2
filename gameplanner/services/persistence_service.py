"""
Persistence service for the Game Planner application.

This module handles saving and loading squads (roster plus settings) and
rendered plans to/from local files.
"""
import datetime
import json
import logging
import os
import re
from typing import List, Optional, Sequence, Tuple

from ..models import MatchSettings, Player
from ..utils import now_ts

logger = logging.getLogger(__name__)


def squad_filename(name: str) -> str:
    """File name for a squad: lower-case, non-alphanumerics collapsed to '_'."""
    slug = re.sub(r"[^a-z0-9]+", "_", name.strip().lower()).strip("_")
    return f"{slug or 'squad'}.json"


class PersistenceService:
    """
    Service for persisting squads to JSON files.

    Only active players (non-empty name) are written; allocated minutes
    are not stored since they are recomputed for every plan.
    """

    @staticmethod
    def save_squad(name: str, players: Sequence[Player], settings: Optional[MatchSettings] = None,
                   squads_dir: str = "squads") -> str:
        """
        Save a squad to a JSON file.

        Args:
            name: Squad name
            players: Roster rows; unnamed rows are skipped
            settings: Optional settings saved with the squad
            squads_dir: Directory for squad files

        Returns:
            Path of the written file

        Raises:
            ValueError: If the squad name is empty
            OSError: If the file cannot be written
        """
        if not name or not name.strip():
            raise ValueError("Squad name cannot be empty")

        snapshot = {
            "name": name.strip(),
            "created_at": datetime.datetime.fromtimestamp(now_ts()).isoformat(timespec="seconds"),
            "players": [
                {**player.to_dict(), "minutes": None}
                for player in players if player.is_active
            ],
            "settings": settings.to_dict() if settings else None,
        }

        if squads_dir and not os.path.exists(squads_dir):
            os.makedirs(squads_dir)

        file_path = os.path.join(squads_dir, squad_filename(name))
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(snapshot, f, indent=2)
        logger.info("Saved squad '%s' (%d players) to %s", name, len(snapshot["players"]), file_path)
        return file_path

    @staticmethod
    def load_squad(file_path: str) -> Tuple[List[Player], Optional[MatchSettings]]:
        """
        Load a squad from a JSON file.

        Returns:
            Tuple of (players, settings); settings is None when not saved

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file contains invalid JSON
            ValueError: If JSON structure is invalid
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Squad file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict) or not isinstance(data.get("players"), list):
            raise ValueError(f"Invalid squad file: {file_path}")

        players = [Player.from_dict(entry) for entry in data["players"]]
        settings_data = data.get("settings")
        settings = MatchSettings.from_dict(settings_data) if settings_data else None
        return players, settings

    @staticmethod
    def list_squads(squads_dir: str = "squads", limit: int = 50) -> List[dict]:
        """
        List saved squads, newest first.

        Returns:
            Dictionaries with name, file name, player count and modification time
        """
        if not os.path.exists(squads_dir):
            return []

        squads = []
        for filename in os.listdir(squads_dir):
            if not filename.endswith(".json"):
                continue
            file_path = os.path.join(squads_dir, filename)
            if not os.path.isfile(file_path):
                continue
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("Skipping unreadable squad file %s: %s", file_path, e)
                continue
            squads.append({
                "name": data.get("name", filename[:-5]),
                "file": filename,
                "player_count": len(data.get("players") or []),
                "modified": os.path.getmtime(file_path),
            })

        squads.sort(key=lambda squad: squad["modified"], reverse=True)
        return squads[:limit]

    @staticmethod
    def delete_squad(file_path: str) -> bool:
        """Delete a squad file. Returns False if it did not exist."""
        if not os.path.isfile(file_path):
            return False
        os.remove(file_path)
        logger.info("Deleted squad file %s", file_path)
        return True

    @staticmethod
    def save_plan_text(plan_text: str, file_path: str) -> None:
        """
        Write a rendered plan to a text file.

        Raises:
            OSError: If the file cannot be written
        """
        directory = os.path.dirname(file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(plan_text)
