"""
Card records

Immutable card records that filters evaluate, plus the illustrative sample
dataset used by the CLI when no cards are configured.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from cardfilter.core.exceptions import ValidationError


@dataclass(frozen=True)
class Card:
    """
    A single filterable card.

    Attributes:
        id: Card identifier
        name: Display name
        cost: Card cost
        version: Card version
        leader_id: Category (leader) identifier
    """
    id: int
    name: str
    cost: float
    version: int
    leader_id: int

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} ({self.cost:g}) [{self.version}, {self.leader_id}]"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Card':
        """
        Build a card from a mapping of field values.

        Raises:
            ValidationError: If a field is missing
        """
        missing = [name for name in ('id', 'name', 'cost', 'version', 'leader_id') if name not in data]
        if missing:
            raise ValidationError(
                f"Card definition missing field(s): {', '.join(missing)}",
                field_name=missing[0]
            )
        return cls(
            id=int(data['id']),
            name=str(data['name']),
            cost=float(data['cost']),
            version=int(data['version']),
            leader_id=int(data['leader_id']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'cost': self.cost,
            'version': self.version,
            'leader_id': self.leader_id,
        }


CardList = List[Card]


def sample_cards() -> CardList:
    """Return the five-card illustrative dataset."""
    return [
        #     ID   NAME     COST   VER.  LEADER
        Card(0, "Card1", 30.0, 1, 0),
        Card(1, "Card2", 10.0, 1, 0),
        Card(2, "Card3", 12.5, 1, 1),
        Card(3, "Card4", 100.0, 1, 1),
        Card(4, "Card5", 45.0, 2, 1),
    ]
