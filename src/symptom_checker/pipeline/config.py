"""
Checker Configuration

Configuration management for the symptom checker.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_COMMON_SYMPTOMS = [
    "Muscle weakness",
    "Progressive muscle degeneration",
    "Elevated creatinine phosphokinase",
    "Scoliosis",
    "Joint contractures",
    "Cardiac abnormalities",
    "Respiratory insufficiency",
    "Developmental delay",
]


@dataclass
class DatasetConfig:
    """Dataset source configuration."""

    prevalence_source: str = "prevalence.json"  # path or http(s) URL
    links_source: str | None = None  # optional condition -> URL lookup
    timeout_seconds: float = 30.0


@dataclass
class MatchingConfig:
    """Fuzzy matching configuration."""

    threshold: float = 0.6
    max_suggestions: int = 3

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {self.threshold}")
        if self.max_suggestions < 0:
            raise ValueError(
                f"max_suggestions must be non-negative, got {self.max_suggestions}"
            )


@dataclass
class OutputConfig:
    """Result presentation configuration."""

    indent: int = 2
    other_conditions: int = 3  # runners-up shown after the top recommendation
    common_symptoms: list[str] = field(default_factory=lambda: list(DEFAULT_COMMON_SYMPTOMS))


@dataclass
class CheckerConfig:
    """Complete symptom checker configuration."""

    name: str = "symptom-checker"
    version: str = "0.1.0"

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckerConfig":
        """Create config from dictionary."""
        config = cls()

        if "name" in data:
            config.name = data["name"]
        if "version" in data:
            config.version = data["version"]

        # Dataset config
        if "dataset" in data:
            ds = data["dataset"]
            config.dataset = DatasetConfig(
                prevalence_source=ds.get("prevalence_source", "prevalence.json"),
                links_source=ds.get("links_source"),
                timeout_seconds=float(ds.get("timeout_seconds", 30.0)),
            )

        # Matching config
        if "matching" in data:
            match = data["matching"]
            config.matching = MatchingConfig(
                threshold=float(match.get("threshold", 0.6)),
                max_suggestions=int(match.get("max_suggestions", 3)),
            )

        # Output config
        if "output" in data:
            out = data["output"]
            config.output = OutputConfig(
                indent=int(out.get("indent", 2)),
                other_conditions=int(out.get("other_conditions", 3)),
                common_symptoms=list(out.get("common_symptoms", DEFAULT_COMMON_SYMPTOMS)),
            )

        return config

    @classmethod
    def from_env(cls) -> "CheckerConfig":
        """Create configuration from environment variables."""
        config = cls()
        config.dataset.prevalence_source = os.environ.get(
            "SYMPTOM_CHECKER_DATA", config.dataset.prevalence_source
        )
        config.dataset.links_source = os.environ.get(
            "SYMPTOM_CHECKER_LINKS", config.dataset.links_source
        )
        config.dataset.timeout_seconds = float(
            os.environ.get("SYMPTOM_CHECKER_TIMEOUT", config.dataset.timeout_seconds)
        )
        config.matching = MatchingConfig(
            threshold=float(os.environ.get("SYMPTOM_CHECKER_THRESHOLD", config.matching.threshold)),
            max_suggestions=config.matching.max_suggestions,
        )
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "name": self.name,
            "version": self.version,
            "dataset": {
                "prevalence_source": self.dataset.prevalence_source,
                "links_source": self.dataset.links_source,
                "timeout_seconds": self.dataset.timeout_seconds,
            },
            "matching": {
                "threshold": self.matching.threshold,
                "max_suggestions": self.matching.max_suggestions,
            },
            "output": {
                "indent": self.output.indent,
                "other_conditions": self.output.other_conditions,
                "common_symptoms": list(self.output.common_symptoms),
            },
        }


def load_config(config_path: str | Path) -> CheckerConfig:
    """Load configuration from YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return CheckerConfig.from_dict(data or {})
