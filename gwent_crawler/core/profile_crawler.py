"""
Main Gwent Profile Crawler Class
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional

from gwent_crawler.config.settings import CrawlerConfig
from gwent_crawler.core.web_client import WebClient
from gwent_crawler.exceptions import RunAborted
from gwent_crawler.extractors.profile_extractor import ProfileExtractor
from gwent_crawler.models.player import PlayerRecord
from gwent_crawler.utils.data_exporter import DataExporter
from gwent_crawler.utils.player_loader import PlayerListLoader


class ProfileCrawler:
    """
    Crawls Gwent profiles for a list of players with bounded parallelism.

    At most ``config.concurrency`` profiles are in flight at once. A slot is
    taken before each player task is submitted and given back when the task
    ends. The first failing task aborts the run: no further players are
    started and ``RunAborted`` is raised once in-flight tasks have finished.
    """

    def __init__(self, config: Optional[CrawlerConfig] = None):
        """
        Initialize Profile Crawler.

        Args:
            config: Crawl settings, defaults to CrawlerConfig()
        """
        self.config = config or CrawlerConfig()
        self.web_client = WebClient(timeout=self.config.request_timeout)
        self.extractor = ProfileExtractor(gate_policy=self.config.gate_policy)
        self.exporter = DataExporter()
        self.slots = threading.BoundedSemaphore(self.config.concurrency)
        self.logger = logging.getLogger(__name__)

        self._abort = threading.Event()
        self._lock = threading.Lock()
        self._failure = None
        self.stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'total_processed': 0,
            'public': 0,
            'private': 0,
            'not_found': 0,
        }

    def load_players(self) -> List[PlayerRecord]:
        """Load the player records named in the configured id file"""
        return PlayerListLoader(self.config.id_file).load_players()

    def crawl_player(self, player: PlayerRecord) -> PlayerRecord:
        """
        Fetch and extract a single player's profile.

        Args:
            player: Record to fill, owned by the caller for the duration

        Returns:
            The filled record. Missing and private profiles keep defaults.

        Raises:
            FetchError: If the request fails at the transport level
            ExtractionError: If a matched field cannot be decoded
        """
        url = self.config.profile_url(player.identifier)
        self.logger.debug(f"Crawling profile {player.identifier} from {url}")

        html = self.web_client.get(url)
        if html is None:
            self._count('not_found')
            return player

        if self.extractor.is_private(html):
            self._count('private')
            self.logger.debug(f"{player.identifier}'s profile is private")
            return player

        self.extractor.extract(html, player)
        self._count('public')

        self.logger.debug(
            f"{player.identifier} : Rank: {player.rank} All: {player.total.overall} "
            f"Wins: {player.current.overall} Losses: {player.losses} "
            f"Draws: {player.draws} MMR: {player.mmr}"
        )
        return player

    def crawl_players(self, players: Iterable[PlayerRecord]) -> List[PlayerRecord]:
        """
        Crawl every player, at most ``concurrency`` at a time.

        Args:
            players: Records in output order

        Returns:
            Filled records in the same order

        Raises:
            RunAborted: If any player task failed
        """
        players = list(players)
        results: List[Optional[PlayerRecord]] = [None] * len(players)
        futures = []

        self._abort.clear()
        self._failure = None
        self.stats = self._empty_stats()

        self.logger.info(
            f"Crawling {len(players)} profiles with concurrency {self.config.concurrency}"
        )

        with ThreadPoolExecutor(max_workers=self.config.concurrency) as executor:
            for index, player in enumerate(players):
                self.slots.acquire()
                if self._abort.is_set():
                    self.slots.release()
                    break
                futures.append((index, executor.submit(self._run_task, player)))

        if self._failure is not None:
            identifier, error = self._failure
            raise RunAborted(identifier, error) from error

        for index, future in futures:
            results[index] = future.result()

        self.logger.info(
            f"Crawled {self.stats['total_processed']} profiles: {self.stats['public']} public, "
            f"{self.stats['private']} private, {self.stats['not_found']} not found"
        )
        return results

    def _run_task(self, player: PlayerRecord) -> Optional[PlayerRecord]:
        try:
            if self._abort.is_set():
                return None
            return self.crawl_player(player)
        except Exception as e:
            with self._lock:
                if self._failure is None:
                    self._failure = (player.identifier, e)
            self._abort.set()
            raise
        finally:
            self.slots.release()

    def _count(self, outcome: str):
        with self._lock:
            self.stats[outcome] += 1
            self.stats['total_processed'] += 1

    def run(self) -> str:
        """
        Load, crawl and export all configured players.

        Returns:
            str: Path to the player table

        Raises:
            CrawlerError: On any fatal error; nothing is written in that case
        """
        players = self.crawl_players(self.load_players())

        filepath = self.exporter.save_to_csv(players, self.config.output_file)
        if self.config.factions_file:
            self.exporter.save_factions_to_csv(players, self.config.factions_file)

        return filepath

    def close(self):
        """Close the crawler and cleanup resources"""
        self.web_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
