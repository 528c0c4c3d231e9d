import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Optional

import yaml

COLOR_MODES = ('auto', 'always', 'never')


@dataclass(frozen=True)
class ListingConfig:
    """Listing options.

    Attributes
    ----------
    show_link_targets : bool, default=False
        Append ``-> target`` to symlink names.
    color : str, default='auto'
        Color mode, one of 'auto', 'always', 'never'.
    log_level : str, default='WARNING'
        Logging level name.
    """

    show_link_targets: bool = False
    color: str = 'auto'
    log_level: str = 'WARNING'

    def __post_init__(self) -> None:
        if not isinstance(self.show_link_targets, bool):
            raise ValueError(f"show_link_targets must be true or false: '{self.show_link_targets}'")
        if self.color not in COLOR_MODES:
            raise ValueError(f"invalid color mode: '{self.color}'")
        if (not isinstance(self.log_level, str)
                or not isinstance(logging.getLevelName(self.log_level.upper()), int)):
            raise ValueError(f"invalid log level: '{self.log_level}'")

    @classmethod
    def from_yaml(cls, path: str) -> 'ListingConfig':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        ListingConfig
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"configuration file must contain a mapping: '{path}'")
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"unknown configuration fields: {', '.join(map(str, unknown))}")
        return cls(**config)

    def override(self, **kwargs: Optional[Any]) -> 'ListingConfig':
        """Return copy with non-None values replaced."""
        changes = {key: value for key, value in kwargs.items() if value is not None}
        return dataclasses.replace(self, **changes)
