"""Integration tests for idea submission, voting and leaderboard workflow."""

import asyncio

import pytest
from httpx import AsyncClient


class TestIdeaWorkflow:
    """Test the full submit, vote and rank workflow."""

    @pytest.mark.asyncio
    async def test_submit_vote_and_rank(self, test_client: AsyncClient):
        """Walk through two ideas from submission to leaderboard."""
        first = await test_client.post(
            "/ideas",
            json={
                "name": "EcoDelivery",
                "tagline": "Green logistics",
                "description": "A service that...",
            },
        )
        assert first.status_code == 201
        first_data = first.json()
        assert first_data["id"] == 1
        assert first_data["votes"] == 0
        assert 0 <= first_data["rating"] <= 100

        second = await test_client.post(
            "/ideas",
            json={
                "name": "MealMatch",
                "tagline": "Dinner with neighbours",
                "description": "Share home-cooked meals nearby.",
            },
        )
        assert second.status_code == 201
        assert second.json()["id"] == 2

        for _ in range(3):
            response = await test_client.put("/ideas/1/vote")
        assert response.json()["votes"] == 3

        response = await test_client.put("/ideas/2/downvote")
        assert response.json()["votes"] == 0

        board = (await test_client.get("/leaderboard")).json()
        assert [(i["id"], i["votes"]) for i in board] == [(1, 3), (2, 0)]

        rejected = await test_client.post(
            "/ideas",
            json={"name": "Empty", "tagline": "Nothing here", "description": ""},
        )
        assert rejected.status_code == 400

        ideas = (await test_client.get("/ideas")).json()
        assert len(ideas) == 2

        third = await test_client.post(
            "/ideas",
            json={"name": "Third", "tagline": "Still counting", "description": "Next id."},
        )
        assert third.json()["id"] == 3

    @pytest.mark.asyncio
    async def test_independent_devices_downvote(self, test_client: AsyncClient, sample_idea):
        """Any caller may downvote; the counter only floors at zero."""
        await test_client.post("/ideas", json=sample_idea)

        await test_client.put("/ideas/1/vote")
        await test_client.put("/ideas/1/vote")
        for _ in range(3):
            response = await test_client.put("/ideas/1/downvote")

        assert response.json()["votes"] == 0

    @pytest.mark.asyncio
    async def test_concurrent_upvotes(self, test_client: AsyncClient, sample_idea):
        """Concurrent upvote requests are each counted once."""
        await test_client.post("/ideas", json=sample_idea)
        n = 50

        responses = await asyncio.gather(
            *[test_client.put("/ideas/1/vote") for _ in range(n)]
        )

        assert all(r.status_code == 200 for r in responses)
        assert sorted(r.json()["votes"] for r in responses) == list(range(1, n + 1))
        idea = (await test_client.get("/ideas/1")).json()
        assert idea["votes"] == n

    @pytest.mark.asyncio
    async def test_concurrent_submissions(self, test_client: AsyncClient, sample_idea):
        """Concurrent submissions receive distinct sequential IDs."""
        responses = await asyncio.gather(
            *[test_client.post("/ideas", json=sample_idea) for _ in range(20)]
        )

        ids = sorted(r.json()["id"] for r in responses)
        assert ids == list(range(1, 21))
