"""
Player List Loader
"""

import csv
import logging
from typing import List

from gwent_crawler.config.settings import DEFAULT_ID_FILE
from gwent_crawler.exceptions import InputFileError
from gwent_crawler.models.player import PlayerRecord


class PlayerListLoader:
    """Loads player identifiers from a CSV file"""

    def __init__(self, id_csv_path: str = DEFAULT_ID_FILE):
        """
        Initialize loader.

        Args:
            id_csv_path: Path to a CSV file whose first column holds player ids
        """
        self.id_csv_path = id_csv_path
        self.logger = logging.getLogger(__name__)

    def load_players(self) -> List[PlayerRecord]:
        """
        Load one default record per row of the id file.

        Every row is data; there is no header. Blank lines are skipped and all
        rows must have as many fields as the first one.

        Returns:
            List of PlayerRecord in file order

        Raises:
            InputFileError: If the file cannot be opened or parsed
        """
        players = []
        expected_fields = None

        try:
            with open(self.id_csv_path, 'r', newline='', encoding='utf-8') as f:
                reader = csv.reader(f, strict=True)

                for row in reader:
                    if not row:
                        continue
                    if expected_fields is None:
                        expected_fields = len(row)
                    elif len(row) != expected_fields:
                        raise InputFileError(
                            f"{self.id_csv_path}, line {reader.line_num}: "
                            f"expected {expected_fields} fields, got {len(row)}"
                        )
                    players.append(PlayerRecord(identifier=row[0]))

        except OSError as e:
            raise InputFileError(f"Cannot read player list {self.id_csv_path}: {e}") from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise InputFileError(f"Cannot parse player list {self.id_csv_path}: {e}") from e

        self.logger.info(f"Loaded {len(players)} players from {self.id_csv_path}")
        return players
