from typing import List

from tourney_store.core.security import CredentialVerifier
from tourney_store.models import AppSettings, MatchType, Role, StoreState, Tournament, User

DEFAULT_PASSWORD = "123"

def default_tournaments() -> List[Tournament]:
    return [
        Tournament(
            id="t1",
            title="Bermuda Solo Showdown",
            game_type="BR MATCH",
            map_name="Bermuda",
            match_type=MatchType.SOLO,
            entry_fee=20,
            prize_pool=500,
            per_kill=10,
            start_time="10:00 PM",
        ),
        Tournament(
            id="t2",
            title="Purgatory Duo Cup",
            game_type="BR MATCH",
            map_name="Purgatory",
            match_type=MatchType.DUO,
            entry_fee=40,
            prize_pool=1000,
            per_kill=15,
            start_time="9:00 PM",
        ),
        Tournament(
            id="t3",
            title="Clash Squad Night",
            game_type="CLASH SQUAD",
            map_name="Kalahari",
            match_type=MatchType.SQUAD,
            entry_fee=100,
            prize_pool=2000,
            per_kill=0,
            start_time="11:00 PM",
        ),
    ]

def build_default_state(verifier: CredentialVerifier) -> StoreState:
    """State used when nothing has been saved yet: one admin, one funded player."""
    users = [
        User(
            id="admin-1",
            name="Admin",
            phone="01700000000",
            email="admin",
            password_hash=verifier.hash(DEFAULT_PASSWORD),
            balance=0,
            role=Role.ADMIN,
        ),
        User(
            id="user-1",
            name="Player One",
            phone="01800000000",
            email="player1",
            password_hash=verifier.hash(DEFAULT_PASSWORD),
            balance=500,
            role=Role.PLAYER,
        ),
    ]
    return StoreState(
        current_user=None,
        users=users,
        tournaments=default_tournaments(),
        payments=[],
        settings=AppSettings(),
        messages=[],
    )
