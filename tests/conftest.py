import pytest

from leaguenight.models.court import Court


def make_courts(n, prefix="p"):
    """``n`` courts of four named players with no scores, e.g. "p1-1"."""
    return [
        Court(
            player_names=[f"{prefix}{i + 1}-{j + 1}" for j in range(4)],
            court_number=i + 1,
        )
        for i in range(n)
    ]


@pytest.fixture
def court_factory():
    return make_courts
