"""
Identifier generation for business records.

Record ids and Udyam numbers both come from here so tests can swap in a
seeded ``random.Random`` and a predictable id factory.
"""
import random
import uuid
from typing import Callable, Container, Optional

from business_registry.core.exceptions import IdentifierExhaustedError


MAX_ATTEMPTS = 100


class IdentifierGenerator:
    """Produces record ids and Udyam registration numbers"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.rng = rng or random.Random()
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def new_id(self, taken: Container[str] = ()) -> str:
        """Fresh record id not present in ``taken``"""
        for _ in range(MAX_ATTEMPTS):
            candidate = self.id_factory()
            if candidate not in taken:
                return candidate
        raise IdentifierExhaustedError("Could not allocate a unique business id")

    @staticmethod
    def state_code(state: Optional[str]) -> str:
        """First two letters of the state, upper-cased; XX when unknown"""
        letters = [ch for ch in (state or "").upper() if "A" <= ch <= "Z"]
        return ("".join(letters[:2]) + "XX")[:2]

    def udyam_number(self, state: Optional[str] = None, taken: Container[str] = ()) -> str:
        """UDYAM-<state>-<district>-<serial>, avoiding numbers already in ``taken``"""
        state_code = self.state_code(state)
        for _ in range(MAX_ATTEMPTS):
            district_code = f"{self.rng.randrange(100):02d}"
            serial = f"{self.rng.randrange(10_000_000):07d}"
            candidate = f"UDYAM-{state_code}-{district_code}-{serial}"
            if candidate not in taken:
                return candidate
        raise IdentifierExhaustedError("Could not allocate a unique Udyam number")
