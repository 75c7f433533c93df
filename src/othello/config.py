"""
Configuration parameters for the Othello rules engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

# Capture policies
CAPTURE_UNION = "union"  # Flip every run that closes, in all 8 directions
CAPTURE_FIRST = "first"  # Flip only the first closing run in direction order
CAPTURE_POLICIES = (CAPTURE_UNION, CAPTURE_FIRST)


@dataclass
class RulesConfig:
    """Configuration for move resolution."""
    board_size: int = 8
    capture_policy: str = CAPTURE_UNION


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "othello"
    rules: RulesConfig = field(default_factory=RulesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'othello'),
            rules=RulesConfig(**config_dict.get('rules', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
