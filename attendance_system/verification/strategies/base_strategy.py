"""Base class for attendance verification strategies.

Each strategy looks at one kind of evidence and scores a single student's
presence confidence in [0.0, 1.0]:
- NeighborVerificationStrategy: directional reciprocity from adjacent seats
- SeatOccupancyStrategy: structural signal (placed? has claims?)
- ConsensusScoreStrategy: any-direction mentions from adjacent students

Strategies are pure: they read the classroom and claim lists, never mutate
them, and return NEUTRAL_SCORE (0.5) when evidence is structurally absent.
"""

from abc import ABC, abstractmethod

from attendance_system.data_management.classroom import Classroom
from attendance_system.data_management.schemas import LocatedStudent


class VerificationStrategy(ABC):
    """
    Abstract base for verification strategies.

    Subclasses set ``name``, the stable key used to look up the strategy's
    weight in the aggregator configuration, and implement score().
    """

    name: str = ""

    @abstractmethod
    def score(self, student: LocatedStudent, classroom: Classroom) -> float:
        """
        Score the presence confidence of one student.

        Args:
            student: The student to score.
            classroom: Classroom holding all placed students.

        Returns:
            Confidence between 0.0 and 1.0.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
