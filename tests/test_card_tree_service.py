"""Tests for CardTreeService: per-card tree registry and sync logging."""

import logging

import pytest

from app.domains.cards.services import CardTreeService
from tests.helpers import FakeBlockSource, make_block


def test_get_tree_reuses_tree_per_card():
    service = CardTreeService(FakeBlockSource())

    tree = service.get_tree("card-1")

    assert service.get_tree("card-1") is tree
    assert service.get_tree("card-2") is not tree
    assert len(service) == 2


def test_trees_inherit_sync_policy():
    service = CardTreeService(FakeBlockSource(), serialize_syncs=False)

    assert service.get_tree("card-1").serializes_syncs is False


def test_forget_drops_tree():
    service = CardTreeService(FakeBlockSource())
    service.get_tree("card-1")

    assert service.forget("card-1") is True
    assert service.forget("card-1") is False
    assert service.find_tree("card-1") is None


async def test_sync_card_returns_snapshot(scenario_a_blocks, caplog):
    source = FakeBlockSource(scenario_a_blocks)
    service = CardTreeService(source)

    with caplog.at_level(logging.INFO, logger="app.domains.cards.services"):
        snapshot = await service.sync_card("root")

    assert snapshot.is_ready is True
    assert [block.id for block in snapshot.comments] == ["c2", "c1"]
    assert service.find_tree("root").snapshot is snapshot
    assert "Synced card tree root: 2 comments, 2 contents" in caplog.text


async def test_sync_card_warns_about_missing_root(caplog):
    service = CardTreeService(FakeBlockSource([make_block("c1", "comment", create_at=1)]))

    with caplog.at_level(logging.WARNING, logger="app.domains.cards.services"):
        snapshot = await service.sync_card("root")

    assert snapshot.root is None
    assert "has no root block" in caplog.text


async def test_sync_card_logs_and_reraises_source_errors(scenario_a_blocks, caplog):
    error = TimeoutError("slow store")
    service = CardTreeService(FakeBlockSource(scenario_a_blocks, error))
    first = await service.sync_card("root")

    with caplog.at_level(logging.ERROR, logger="app.domains.cards.services"):
        with pytest.raises(TimeoutError) as exc_info:
            await service.sync_card("root")

    assert exc_info.value is error
    assert service.find_tree("root").snapshot is first
    assert "Error syncing card tree root" in caplog.text


async def test_sync_card_drops_tree_without_root():
    service = CardTreeService(FakeBlockSource([make_block("c1", "comment", create_at=1)]))

    for i in range(10):
        await service.sync_card(f"missing-{i}")

    assert len(service) == 0


async def test_sync_card_drops_tree_that_never_synced():
    service = CardTreeService(FakeBlockSource(ConnectionError("store down")))

    with pytest.raises(ConnectionError):
        await service.sync_card("card-1")

    assert service.find_tree("card-1") is None
    assert len(service) == 0


async def test_sync_card_keeps_tree_when_root_disappears_then_returns(scenario_a_blocks):
    source = FakeBlockSource(scenario_a_blocks, [], scenario_a_blocks)
    service = CardTreeService(source)

    await service.sync_card("root")
    assert len(service) == 1

    snapshot = await service.sync_card("root")
    assert snapshot.root is None
    assert len(service) == 0

    snapshot = await service.sync_card("root")
    assert snapshot.root.id == "root"
    assert len(service) == 1
