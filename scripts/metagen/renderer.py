"""
Renderer base module

A renderer turns a ScanResult and its TypeRegistry into source text for one
target dialect. The parser never depends on a renderer.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ir import ScanResult
    from .registry import TypeRegistry


class Renderer(ABC):
    """Base class for output dialects"""

    @abstractmethod
    def render(self, result: 'ScanResult', registry: 'TypeRegistry') -> str:
        """Render the whole companion source file"""
        pass
