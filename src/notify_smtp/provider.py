"""Generic notification provider contract."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import BaseModel

    from .result import NotificationResult


class NotificationProvider(ABC):
    """
    Base class for a named plugin that delivers messages over one channel.

    The dispatcher selects a provider by :attr:`name` and hands it the
    channel-specific parameter map; the provider returns a
    :class:`NotificationResult` or lets delivery exceptions propagate.
    """

    def __init__(self, options: BaseModel, logger: logging.Logger | None = None):
        self.options = options
        self.logger = logger or logging.getLogger(type(self).__module__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the provider is registered under."""

    @abstractmethod
    async def send(self, parameters: Mapping[str, str]) -> NotificationResult:
        """Send the message described by *parameters*."""
