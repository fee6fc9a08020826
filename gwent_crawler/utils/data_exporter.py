"""
Data Export Utilities for Gwent Player Data
"""

import csv
import os
import logging
from typing import List, Sequence

from gwent_crawler.config.settings import DEFAULT_CSV_FIELDS, DEFAULT_OUTPUT_FILE, FACTION_CSV_FIELDS
from gwent_crawler.exceptions import OutputFileError
from gwent_crawler.models.player import PlayerRecord


class DataExporter:
    """Handles data export to CSV format"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def save_to_csv(self, players: Sequence[PlayerRecord], filepath: str = DEFAULT_OUTPUT_FILE) -> str:
        """
        Save the player table, one row per record in the given order.

        Args:
            players: Player records to write
            filepath: Output CSV path

        Returns:
            str: Path to saved file

        Raises:
            OutputFileError: If the file cannot be created or written
        """
        rows = [player.to_row() for player in players]
        self._write_rows(filepath, DEFAULT_CSV_FIELDS, rows)
        self.logger.info(f"Saved {len(rows)} players to {filepath}")
        return filepath

    def save_factions_to_csv(self, players: Sequence[PlayerRecord], filepath: str) -> str:
        """
        Save per-faction win counts in long format (id, season, faction, wins).

        Args:
            players: Player records to write
            filepath: Output CSV path

        Returns:
            str: Path to saved file

        Raises:
            OutputFileError: If the file cannot be created or written
        """
        rows = [row for player in players for row in player.faction_rows()]
        self._write_rows(filepath, FACTION_CSV_FIELDS, rows)
        self.logger.info(f"Saved {len(rows)} faction records to {filepath}")
        return filepath

    @staticmethod
    def _write_rows(filepath: str, header: List[str], rows: List[List[str]]):
        try:
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(header)
                writer.writerows(rows)

        except OSError as e:
            raise OutputFileError(f"Cannot write {filepath}: {e}") from e
