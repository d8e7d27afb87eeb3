from travel_rec.models.destination import Destination

__all__ = [
    "Destination",
]
