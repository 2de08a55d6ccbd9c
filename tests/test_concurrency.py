from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from storymock.api import StoryMock


def test_concurrent_callers_each_consume_exactly_one_step() -> None:
    mock = StoryMock().event("tick")
    step_count = 200
    for index in range(step_count):
        mock.expect("tick").ok(index)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: mock.outcome_of("tick"), range(step_count)))

    assert sorted(results) == list(range(step_count))
    mock.assert_story_done()
