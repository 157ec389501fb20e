"""
Moteur du marché (secteur consommateur) pour EconOPS.

Règles implémentées :
- Un prix affiché (Trade) par SellItem, initialisé depuis le catalogue.
- Une vente consomme `give` dans le stock du joueur (tout ou rien) et paie le
  prix affiché AVANT dérive.
- Après chaque vente réussie, le prix dérive : receive' = floor(receive * exp(x))
  avec x ~ N(drift_mean, drift_std) (marche log-normale légèrement baissière :
  saturation de la demande).
- Une vente refusée (stock insuffisant) ne fait pas dériver le prix.

Le générateur aléatoire est injectable (numpy.random.Generator) pour des tests
déterministes.
"""

import logging
from typing import Dict, Mapping, Optional

import numpy as np

from EconOPS.data.settings import DEFAULT_SETTINGS
from EconOPS.domain.market import SELL_CATALOG, SellEntry, SellItem, Trade
from EconOPS.domain.resource import ResourceAmount

logger = logging.getLogger(__name__)


def drift(trade: Trade, sample: float) -> Trade:
    """Applique une dérive multiplicative au prix d'un échange.

    Args:
        trade: Échange affiché avant la vente
        sample: Tirage x de la loi normale

    Returns:
        Nouvel échange, même `give`, `receive` = floor(receive * exp(x)) borné à 0.
    """
    new_receive = int(np.floor(trade.receive * np.exp(sample)))
    return Trade(give=trade.give.copy(), receive=max(0, new_receive))


class ConsumerSector:
    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        drift_mean: float = DEFAULT_SETTINGS.drift_mean,
        drift_std: float = DEFAULT_SETTINGS.drift_std,
        catalog: Optional[Mapping[SellItem, SellEntry]] = None,
    ):
        """Secteur consommateur : un prix vivant par SellItem.

        Args:
            rng: Générateur numpy injecté (prioritaire sur `seed`)
            seed: Graine pour créer un générateur si `rng` est absent
            drift_mean: Moyenne du tirage de dérive
            drift_std: Écart-type du tirage de dérive
            catalog: Prix de départ (par défaut `SELL_CATALOG`)
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.drift_mean = drift_mean
        self.drift_std = drift_std
        entries = catalog if catalog is not None else SELL_CATALOG
        self.trades: Dict[SellItem, Trade] = {
            item: entries[item].to_trade() for item in SellItem
        }

    def get_trade(self, item: SellItem) -> Trade:
        return self.trades[item].copy()

    def prices(self) -> Dict[SellItem, Trade]:
        """Table complète des prix affichés (copies)."""
        return {item: self.get_trade(item) for item in SellItem}

    def draw_sample(self) -> float:
        return float(self.rng.normal(self.drift_mean, self.drift_std))

    def trade(
        self,
        stockpile: ResourceAmount,
        item: SellItem,
        sample: Optional[float] = None,
    ) -> Optional[int]:
        """Tente de vendre `item` depuis `stockpile`.

        Args:
            stockpile: Stock du vendeur (débité en cas de succès)
            item: Item vendu
            sample: Tirage de dérive pré-calculé ; sinon tiré via `self.rng`

        Returns:
            Le prix payé (avant dérive), ou None si le stock est insuffisant.
        """
        current = self.trades[item]
        if not stockpile.consume(current.give):
            logger.debug("Sale of %s declined: insufficient stock", item)
            return None

        x = self.draw_sample() if sample is None else float(sample)
        self.trades[item] = drift(current, x)
        logger.info(
            "Sold %s for %d, price drifts to %d",
            item,
            current.receive,
            self.trades[item].receive,
        )
        return current.receive
