"""Database model exports."""

from .hackathon import Hackathon, HackathonBase, HackathonRead, HackathonStatus
from .leaderboard import LeaderboardEntry, ParticipantRecord
from .participant import HackathonParticipant, Profile

__all__ = [
    "Hackathon",
    "HackathonBase",
    "HackathonParticipant",
    "HackathonRead",
    "HackathonStatus",
    "LeaderboardEntry",
    "ParticipantRecord",
    "Profile",
]
