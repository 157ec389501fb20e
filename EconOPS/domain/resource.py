"""
Ressources brutes et quantités de ressources (stock d'un joueur, coût d'une
recette, contrepartie d'un échange sur le marché).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Tuple


class Resource(Enum):
    # value = (nom affiché, index fixe dans les vecteurs de quantités)
    IRON = ("Iron", 0)
    COPPER = ("Copper", 1)
    STONE = ("Stone", 2)

    def __new__(cls, label: str, index: int):
        obj = object.__new__(cls)
        obj._value_ = label
        obj.index = index
        return obj

    def __str__(self) -> str:
        return self.value  # "Iron", etc.

    @classmethod
    def names(cls) -> List[str]:
        """Noms affichés, dans l'ordre de l'énumération."""
        return [str(resource) for resource in cls]


def _zeros() -> List[int]:
    return [0] * len(Resource)


@dataclass
class ResourceAmount:
    """
    Vecteur de compteurs entiers, un par `Resource`, indexé par l'énumération.

    Les compteurs ne sont jamais négatifs :
      - `add` ne fait qu'incrémenter (récolte des ouvriers),
      - `consume` est tout-ou-rien (production, vente).
    """

    counts: List[int] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        if len(self.counts) != len(Resource):
            raise ValueError(
                f"Expected {len(Resource)} counters, got {len(self.counts)}"
            )
        if any(count < 0 for count in self.counts):
            raise ValueError(f"Resource counters must be >= 0: {self.counts}")
        self.counts = [int(count) for count in self.counts]

    @classmethod
    def of(cls, amounts: Mapping[Resource, int]) -> "ResourceAmount":
        """Construit une quantité à partir d'un mapping partiel {Resource: n}."""
        counts = _zeros()
        for resource, count in amounts.items():
            counts[resource.index] = int(count)
        return cls(counts=counts)

    def copy(self) -> "ResourceAmount":
        return ResourceAmount(counts=list(self.counts))

    def get(self, resource: Resource) -> int:
        return self.counts[resource.index]

    def add(self, resource: Resource, amount: int = 1) -> None:
        """Incrémente directement un compteur (pas de contrôle de stock)."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount: {amount}")
        self.counts[resource.index] += int(amount)

    def has_available(self, required: "ResourceAmount") -> bool:
        """True si chaque compteur couvre la quantité demandée."""
        return all(required.get(r) <= self.get(r) for r in Resource)

    def consume(self, required: "ResourceAmount") -> bool:
        """
        Retire `required` du stock, tout ou rien.

        Si une seule ressource manque, rien n'est retiré et on renvoie False.
        Sinon tous les compteurs sont décrémentés et on renvoie True.
        """
        if not self.has_available(required):
            return False
        for resource in Resource:
            self.counts[resource.index] -= required.get(resource)
        return True

    def items(self) -> Iterator[Tuple[Resource, int]]:
        for resource in Resource:
            yield resource, self.get(resource)

    def to_dict(self) -> Dict[Resource, int]:
        return dict(self.items())

    def __iter__(self) -> Iterator[int]:
        return iter(list(self.counts))

    def __str__(self) -> str:
        return "".join(f"{resource}: {count}\t" for resource, count in self.items())
