import asyncio
import json
from unittest.mock import AsyncMock

import aiohttp
import pytest

from fakes import BrokenStorage, ScriptedFetcher
from jobfeed.core.retrieval.components.source.remote_job_source import RemoteJobSource
from jobfeed.core.retrieval.components.storage.job_cache_store import JobCacheStore
from jobfeed.core.retrieval.components.storage.storage import InMemoryStorage
from jobfeed.core.retrieval.job_retriever import JobRetriever, RetrieverState
from jobfeed.models.job import JobPosting
from jobfeed.models.results import Origin

URL = 'https://jobs.example.com/jobs'

ACME = [{'id': 1, 'title': 'Engineer', 'company': 'Acme'}]
GLOBEX = [{'id': 2, 'title': 'Designer', 'company': 'Globex'}, {'title': 'Intern'}]


def offline():
    return aiohttp.ClientConnectionError("network unreachable")


def build(fetcher, storage=None):
    cache = JobCacheStore(storage if storage is not None else InMemoryStorage())
    return JobRetriever(RemoteJobSource(fetcher, URL), cache), cache


@pytest.mark.asyncio
async def test_fresh_result_is_written_through():
    retriever, cache = build(ScriptedFetcher(json.dumps(GLOBEX)))

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.FRESH
    assert result.jobs == (JobPosting(id=2, title='Designer', company='Globex'), JobPosting(title='Intern'))
    assert await cache.load() == result.jobs
    assert retriever.state is RetrieverState.SUCCEEDED


@pytest.mark.asyncio
async def test_fresh_then_offline_serves_cached():
    fetcher = ScriptedFetcher(json.dumps(ACME)).then(offline())
    retriever, _ = build(fetcher)

    first = await retriever.fetch_jobs()
    assert first.origin is Origin.FRESH
    assert first.jobs == (JobPosting(id=1, title='Engineer', company='Acme'),)

    second = await retriever.fetch_jobs()
    assert second.origin is Origin.CACHED
    assert second.jobs == first.jobs
    assert retriever.state is RetrieverState.FAILED


@pytest.mark.asyncio
async def test_cached_result_is_most_recent_success():
    fetcher = ScriptedFetcher(json.dumps(ACME)).then(json.dumps(GLOBEX)).then(offline())
    retriever, _ = build(fetcher)

    await retriever.fetch_jobs()
    latest = await retriever.fetch_jobs()
    fallback = await retriever.fetch_jobs()

    assert fallback.origin is Origin.CACHED
    assert fallback.jobs == latest.jobs


@pytest.mark.asyncio
async def test_offline_without_cache_is_empty():
    retriever, _ = build(ScriptedFetcher(offline()))

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.EMPTY
    assert result.jobs == ()


@pytest.mark.asyncio
@pytest.mark.parametrize('body', ['{}', 'not json', '[1, 2]'])
async def test_malformed_response_falls_back_like_network_error(body):
    storage = InMemoryStorage()
    fetcher = ScriptedFetcher(json.dumps(ACME)).then(body)
    retriever, cache = build(fetcher, storage)

    fresh = await retriever.fetch_jobs()
    result = await retriever.fetch_jobs()

    assert result.origin is Origin.CACHED
    assert result.jobs == fresh.jobs
    # the malformed body never reaches the cache
    assert await cache.load() == fresh.jobs


@pytest.mark.asyncio
async def test_malformed_response_without_cache_is_empty():
    retriever, _ = build(ScriptedFetcher('{}'))

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.EMPTY


@pytest.mark.asyncio
async def test_repeated_failures_keep_same_origin():
    retriever, _ = build(ScriptedFetcher(offline()))

    origins = [(await retriever.fetch_jobs()).origin for _ in range(3)]

    assert origins == [Origin.EMPTY] * 3


@pytest.mark.asyncio
async def test_corrupt_cache_after_failure_is_empty():
    storage = InMemoryStorage()
    await storage.set('jobs', '{broken')
    retriever, _ = build(ScriptedFetcher(offline()), storage)

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.EMPTY


@pytest.mark.asyncio
async def test_unreadable_cache_after_failure_is_empty():
    retriever, _ = build(ScriptedFetcher(offline()), BrokenStorage(fail_get=True))

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.EMPTY


@pytest.mark.asyncio
async def test_failed_cache_write_still_returns_fresh():
    retriever, _ = build(ScriptedFetcher(json.dumps(ACME)), BrokenStorage(fail_set=True))

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.FRESH
    assert len(result.jobs) == 1


@pytest.mark.asyncio
async def test_unexpected_source_error_is_absorbed():
    source = AsyncMock(spec=RemoteJobSource)
    source.fetch_remote.side_effect = RuntimeError("bug")
    retriever = JobRetriever(source, JobCacheStore(InMemoryStorage()))

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.EMPTY


@pytest.mark.asyncio
async def test_cache_write_happens_before_return():
    order = []
    source = AsyncMock(spec=RemoteJobSource)
    source.fetch_remote.return_value = (JobPosting(id=1),)
    cache = AsyncMock(spec=JobCacheStore)
    cache.save.side_effect = lambda jobs: order.append('save')

    retriever = JobRetriever(source, cache)
    await retriever.fetch_jobs()
    order.append('returned')

    assert order == ['save', 'returned']
    cache.save.assert_awaited_once_with((JobPosting(id=1),))
    cache.load.assert_not_awaited()


@pytest.mark.asyncio
async def test_cancellation_is_propagated():
    source = AsyncMock(spec=RemoteJobSource)
    source.fetch_remote.side_effect = asyncio.CancelledError()
    retriever = JobRetriever(source, JobCacheStore(InMemoryStorage()))

    with pytest.raises(asyncio.CancelledError):
        await retriever.fetch_jobs()

    assert retriever.state is RetrieverState.IDLE


@pytest.mark.asyncio
async def test_deeply_nested_cache_after_failure_is_empty():
    storage = InMemoryStorage()
    await storage.set('jobs', '[' * 100000)
    retriever, _ = build(ScriptedFetcher(offline()), storage)

    result = await retriever.fetch_jobs()

    assert result.origin is Origin.EMPTY
    assert result.jobs == ()


@pytest.mark.asyncio
async def test_deeply_nested_body_falls_back_to_cache():
    fetcher = ScriptedFetcher(json.dumps(ACME)).then('[' * 100000)
    retriever, _ = build(fetcher)

    fresh = await retriever.fetch_jobs()
    result = await retriever.fetch_jobs()

    assert result.origin is Origin.CACHED
    assert result.jobs == fresh.jobs
