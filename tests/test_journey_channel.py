"""Tests for the bounded journey channel."""

import asyncio

import pytest

from sncf_departures.application.services import JourneyChannel
from sncf_departures.domain.errors import ChannelClosedError
from tests.fakes import make_journey


@pytest.mark.asyncio
async def test_drain_returns_batches_in_send_order() -> None:
    """Given three sent batches, when draining, then they come out oldest first."""
    channel = JourneyChannel(capacity=5)
    batches = [[make_journey(8)], [], [make_journey(9), make_journey(10)]]
    for batch in batches:
        await channel.send(batch)

    assert channel.drain() == batches
    assert channel.drain() == []


@pytest.mark.asyncio
async def test_full_channel_applies_backpressure() -> None:
    """Given a full channel, when sending, then the sender waits until the receiver drains."""
    channel = JourneyChannel(capacity=1)
    await channel.send([make_journey(8)])

    pending = asyncio.create_task(channel.send([make_journey(9)]))
    await asyncio.sleep(0.01)
    assert not pending.done()

    first = channel.drain()
    await asyncio.wait_for(pending, timeout=1)

    assert first == [[make_journey(8)]]
    assert channel.drain() == [[make_journey(9)]]


@pytest.mark.asyncio
async def test_send_after_close_fails() -> None:
    """Given a closed channel, when sending, then ChannelClosedError is raised."""
    channel = JourneyChannel()
    channel.close()

    assert channel.closed
    with pytest.raises(ChannelClosedError):
        await channel.send([])


@pytest.mark.asyncio
async def test_close_releases_blocked_sender() -> None:
    """Given a sender blocked on a full channel, when the receiver closes, then the sender fails."""
    channel = JourneyChannel(capacity=1)
    await channel.send([])
    pending = asyncio.create_task(channel.send([make_journey(8)]))
    await asyncio.sleep(0.01)

    channel.close()

    with pytest.raises(ChannelClosedError):
        await asyncio.wait_for(pending, timeout=1)


def test_capacity_must_be_positive() -> None:
    """Given a zero capacity, when creating a channel, then ValueError is raised."""
    with pytest.raises(ValueError, match="capacity"):
        JourneyChannel(capacity=0)
