"""Shared test data and an in-memory trivia data source."""

import asyncio
from typing import Dict, List, Optional

from jeopardy.model.board import NUM_QUESTIONS_PER_CAT, Category, Clue
from jeopardy.model.errors import NetworkFailure


def make_category(cat_idx: int, num_clues: int = NUM_QUESTIONS_PER_CAT) -> Category:
    return Category(
        title=f"Category {cat_idx}",
        clues=[Clue(question=f"Q{cat_idx}-{i}", answer=f"A{cat_idx}-{i}", value=(i + 1) * 200)
               for i in range(num_clues)],
        id=cat_idx,
    )


class FakeDataSource:
    """In-memory data source that records every request it receives."""

    def __init__(
        self,
        categories: Dict[int, Category],
        fail_on_call: Optional[int] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.categories = categories
        self.fail_on_call = fail_on_call
        self.gate = gate
        self.id_requests: List[int] = []
        self.category_requests: List[int] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def get_category_ids(self, count: int) -> List[int]:
        self.id_requests.append(count)
        if self.gate is not None:
            await self.gate.wait()
        return list(self.categories)[:count]

    async def get_category(self, category_id: int) -> Category:
        self.category_requests.append(category_id)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            # Yield so that overlapping fetches would show up in peak_in_flight
            await asyncio.sleep(0)
            if self.fail_on_call is not None and len(self.category_requests) == self.fail_on_call:
                raise NetworkFailure(f"Connection reset fetching category {category_id}")
            return self.categories[category_id]
        finally:
            self.in_flight -= 1
