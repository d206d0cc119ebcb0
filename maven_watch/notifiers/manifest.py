"""Notifier manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from maven_watch.notifiers.base import Notifier

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class NotifierManifest(Generic[ConfigT]):
    """Manifest describing a notifier plugin.

    The manifest contains references to the configuration class and the
    notifier factory function for lazy loading of notifiers based on their key.
    """

    config_cls: type[ConfigT]
    notifier_factory: Callable[[ConfigT], AbstractAsyncContextManager[Notifier]]
