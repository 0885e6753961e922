from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..domain.models import Machine
from ..data.sample_data import COFFEE_MACHINES


class MachineRepository(ABC):
    """
    The list of machines a user can pick before troubleshooting.
    """

    @abstractmethod
    def list_machines(self) -> List[Machine]:
        pass

    @abstractmethod
    def get_machine(self, machine_id: str) -> Optional[Machine]:
        pass

    def models_for_brand(self, brand: Optional[str] = None) -> List[str]:
        """Distinct models, in list order, of one brand (or of every brand)."""
        models: List[str] = []
        for machine in self.list_machines():
            if brand and machine.brand != brand:
                continue
            if machine.model not in models:
                models.append(machine.model)
        return models


class StaticMachineRepository(MachineRepository):
    def __init__(self, machines: Optional[Iterable[Machine]] = None):
        machines = COFFEE_MACHINES if machines is None else machines
        self._index: Dict[str, Machine] = {m.id: m for m in machines}

    def list_machines(self) -> List[Machine]:
        return list(self._index.values())

    def get_machine(self, machine_id: str) -> Optional[Machine]:
        return self._index.get(machine_id)
