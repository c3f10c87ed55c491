"""User-facing notification channel for evaluation outcomes."""

import logging
from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Notification(BaseModel):
    """A short, transient message meant for interactive display."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Headline")
    description: str = Field(default="", description="Detail line")
    variant: Literal["default", "destructive"] = Field(
        default="default", description="Destructive marks a failure"
    )


EVALUATION_FAILED = Notification(
    title="Evaluation Failed",
    description="There was an error during the evaluation process.",
    variant="destructive",
)

BATCH_EVALUATION_FAILED = Notification(
    title="Batch Evaluation Failed",
    description="There was an error during the batch evaluation process.",
    variant="destructive",
)

EVALUATION_COMPLETE = Notification(
    title="Evaluation Complete",
    description="The evaluation has been processed successfully.",
)


class Notifier(ABC):
    """Receives notifications; the presentation layer decides how to show them."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver a notification."""


class LoggingNotifier(Notifier):
    """Notifier that writes notifications to the log."""

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant == "destructive" else logging.INFO
        logger.log(level, f"{notification.title}: {notification.description}")
