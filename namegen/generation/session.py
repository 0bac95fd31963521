"""Session state: one random stream plus one duplicate tracker."""

from config.logging_config import get_logger

from .duplicate_tracker import DuplicateTracker
from .random_source import SeededRandom

logger = get_logger(__name__)


class SessionState:
    """
    Mutable generation state owned by a single generator.

    ``reset()`` returns both the stream and the tracker to their initial
    condition, so replaying the same calls replays the same names.
    """

    def __init__(self, seed: int):
        self.random = SeededRandom(seed)
        self.tracker = DuplicateTracker()

    @property
    def seed(self) -> int:
        return self.random.seed

    def reset(self) -> None:
        self.tracker.clear()
        self.random = SeededRandom(self.random.seed)
        logger.debug("session_reset", seed=self.random.seed)
