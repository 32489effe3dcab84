from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.enums import MarkState
from ..input_collector import ExtendedInputCollector
from ..model import Mark


class MarkTransition(ABC):
    """Strategy Pattern: encapsulate how a mark enters one state.

    `enter` returns the new mark, or None when the collaborator abandoned the
    input request. It must not touch anything else.
    """

    target: MarkState

    @abstractmethod
    def enter(self, current: Mark, collector: ExtendedInputCollector, *, default_hours: float) -> Optional[Mark]:
        raise NotImplementedError
