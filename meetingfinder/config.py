"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import List, Sequence

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .domain.exceptions import ConfigError
from .domain.models import END_OF_DAY


class DefaultsConfig(BaseModel):
    """Default settings for a meeting search."""
    duration_minutes: int = 30

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure meeting duration is positive and fits in a day."""
        if value <= 0:
            raise ValueError("duration_minutes must be greater than zero")
        if value > END_OF_DAY:
            raise ValueError(f"duration_minutes must not exceed {END_OF_DAY}")
        return value


class Person(BaseModel):
    """A participant that can be referred to by alias."""
    name: str  # Used as alias
    email: str

    def display_name(self) -> str:
        """Get display name."""
        return self.name


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    people: List[Person] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only the standard logging level names."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("people")
    @classmethod
    def validate_people(cls, value: List[Person]) -> List[Person]:
        """Ensure aliases and emails are unique."""
        seen_names: set[str] = set()
        seen_emails: set[str] = set()
        for person in value:
            name_key = person.name.lower()
            email_key = person.email.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate person name detected: {person.name}")
            if email_key in seen_emails:
                raise ValueError(f"Duplicate person email detected: {person.email}")
            seen_names.add(name_key)
            seen_emails.add(email_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {config_path}:\n{exc}") from exc

    def find_person_by_name(self, name: str) -> Person | None:
        """Find a person by their name (alias)."""
        for person in self.people:
            if person.name.lower() == name.lower():
                return person
        return None

    def resolve_participant(self, identifier: str) -> str:
        """
        Resolve a participant identifier to the id used in events.

        Emails are lower-cased and configured aliases map to their email.
        Anything else is kept unchanged as an opaque id.
        """
        identifier = identifier.strip()
        if "@" in identifier:
            return identifier.lower()

        person = self.find_person_by_name(identifier)
        if person:
            return person.email.lower()

        return identifier

    def resolve_participants(self, identifiers: Sequence[str]) -> List[str]:
        """
        Resolve multiple participant identifiers, ensuring uniqueness.

        Args:
            identifiers: Iterable of participant aliases, emails or ids.

        Returns:
            List of unique participant ids in input order, possibly empty.
        """
        resolved: List[str] = []
        for identifier in identifiers:
            participant = self.resolve_participant(identifier)
            if participant not in resolved:
                resolved.append(participant)
        return resolved


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    config_path = Path.cwd() / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
