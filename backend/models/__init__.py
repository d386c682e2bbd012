from models.event import Event
from models.activity import ActivitySummary
from models.pet import Evolution, PetState

__all__ = ["Event", "ActivitySummary", "Evolution", "PetState"]
