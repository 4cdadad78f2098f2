"""In-memory engineer repository."""

from typing import Dict, List, Optional

from ooh_tracker.application.interfaces.repositories import EngineerRepositoryInterface
from ooh_tracker.domain.entities.engineer import Engineer


class InMemoryEngineerRepository(EngineerRepositoryInterface):
    """Engineer directory held in memory, keyed by name."""

    def __init__(self):
        self.engineers: Dict[str, Engineer] = {}

    async def add(self, engineer: Engineer) -> Engineer:
        if engineer.name in self.engineers:
            raise ValueError(f"Engineer '{engineer.name}' already exists")
        self.engineers[engineer.name] = engineer
        return engineer

    async def get_by_name(self, name: str) -> Optional[Engineer]:
        """Get engineer by exact name."""
        return self.engineers.get(name)

    async def list_all(self) -> List[Engineer]:
        return list(self.engineers.values())
