"""Base class for section builders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from refigma.canvas import SceneNode

from .primitives import LayoutKit


class SectionBuilder(ABC):
    """Assembles one structural region of the landing page.

    A builder owns no state between builds: every call to build() creates a
    new subtree with the same topology and anchor names.
    """

    section_name: str = ""

    def __init__(self, kit: LayoutKit):
        self.kit = kit

    @abstractmethod
    async def build(self) -> SceneNode:
        """Create the section subtree (not yet attached to any parent)."""
