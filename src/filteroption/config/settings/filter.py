"""Config settings – FilterSettings consumed by list-query normalization."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from filteroption.config.settings.base import Settings
from filteroption.config.validation import InvalidSettingValueError

DEFAULT_PAGE_SIZE = 10


@dataclasses.dataclass
class FilterSettings(Settings):
    """Tunables read when a :class:`FilterOption` is normalized.

    ``default_page_size`` is applied to requests that did not set
    ``pageSize`` and are not in download mode.  Loaded from the
    ``FILTER_DEFAULT_PAGE_SIZE`` environment variable by
    :class:`EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "FILTER"

    default_page_size: int = DEFAULT_PAGE_SIZE

    def _validate(self) -> None:
        if self.default_page_size < 0:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must be >= 0"
            )


__all__ = ["DEFAULT_PAGE_SIZE", "FilterSettings"]
