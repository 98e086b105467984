import logging
from dataclasses import dataclass


@dataclass
class TrainingConfig:
    """Run settings for the command line trainer."""
    epochs: int = 1000
    learning_rate: float = 0.0001
    verbose: bool = False
    json_logs: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {self.epochs}")
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level {self.log_level!r}")
        self.log_level = self.log_level.upper()
