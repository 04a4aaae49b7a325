from __future__ import annotations
import pytest
from batting_board.errors import ValidationError
from batting_board.services.player_votes import PlayerVoteRepository


@pytest.mark.asyncio
async def test_tally_counts_per_player(store):
    repo = PlayerVoteRepository(store)
    assert await repo.tally() == {}
    await repo.record(3, "up")
    await repo.record(3, "up")
    await repo.record(3, "down")
    votes = await repo.record(7, "down")
    assert votes["3"].upvotes == 2 and votes["3"].downvotes == 1
    assert votes["7"].upvotes == 0 and votes["7"].downvotes == 1
    assert (await repo.tally())["3"].upvotes == 2


@pytest.mark.asyncio
async def test_unknown_vote_type(store):
    with pytest.raises(ValidationError):
        await PlayerVoteRepository(store).record(1, "meh")
