"""Type hints used in League Night."""

from typing import Dict, List, Tuple

# Seeds of the four slots on one court
CourtSeeds = List[int]
# Seeds for every court of a round, court 1 first
SeedLayoutTable = List[CourtSeeds]
# Slot indices of one doubles team on a court
TeamSlots = Tuple[int, int]
# Final court -> points by finishing position
PointsTable = Dict[int, List[int]]

#  LocalWords:  CourtSeeds SeedLayoutTable
