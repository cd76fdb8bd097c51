import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from seedbed.database import (
    Evidence, GitHubEvidence, GitHubRepo, HackerNewsEvidence, Idea,
    IdeaRepository, NpmEvidence, SaturationLevel, SearchQueries
)
from seedbed.processors.pipeline import RealityCheckPipeline
from seedbed.reasoning import PivotSuggester, QueryExtractor
from seedbed.utils import IdeaNotFoundError, InvalidIdeaError, SeedbedError
from conftest import FakeStore, make_llm

QUERIES = SearchQueries(github="task manager", hn="task management", npm="task")


def repo(name: str, stars: int) -> GitHubRepo:
    return GitHubRepo(name=name, url=f"https://github.com/x/{name}", stars=stars)


def fake_registry(evidence: Evidence) -> MagicMock:
    registry = MagicMock()
    registry.search_all = AsyncMock(return_value=evidence)
    return registry


def fake_extractor() -> MagicMock:
    extractor = MagicMock()
    extractor.extract = AsyncMock(return_value=QUERIES)
    return extractor


def fake_suggester(pivots=None) -> MagicMock:
    suggester = MagicMock()
    suggester.suggest = AsyncMock(return_value=pivots or [])
    return suggester


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["", "   ", None])
async def test_blank_title_is_rejected_before_any_calls(title):
    """
    WHY: An invalid idea must fail fast without touching any provider.
    """
    registry = fake_registry(Evidence())
    extractor = fake_extractor()
    suggester = fake_suggester()
    pipeline = RealityCheckPipeline(registry, extractor, suggester)

    with pytest.raises(InvalidIdeaError, match="Title is required"):
        await pipeline.run(title, "anything")

    extractor.extract.assert_not_called()
    registry.search_all.assert_not_called()
    suggester.suggest.assert_not_called()


@pytest.mark.asyncio
async def test_run_assembles_a_full_report():
    """
    HOW: 99 repositories with a handful of sampled ones, nothing else.
    EXPECTED: score 85 (low saturation), top three by stars, pivots attached.
    """
    repos = [repo("a", 10), repo("b", 300), repo("c", 40), repo("d", 2000)]
    evidence = Evidence(github=GitHubEvidence(total_count=99, max_stars=0, repos=repos))
    suggester = fake_suggester(["Focus on teachers"])
    pipeline = RealityCheckPipeline(fake_registry(evidence), fake_extractor(), suggester)

    report = await pipeline.run("  Task manager  ", None, idea_id="idea-1")

    assert report.idea_id == "idea-1"
    assert report.score == 85
    assert report.saturation == SaturationLevel.LOW
    assert [p.name for p in report.top_projects] == ["d", "b", "c"]
    assert report.pivot_suggestions == ["Focus on teachers"]
    assert report.queries == QUERIES
    assert report.evidence == evidence

    suggester.suggest.assert_awaited_once()
    title, description, top = suggester.suggest.call_args.args
    assert title == "Task manager"
    assert description == ""
    assert [p.name for p in top] == ["d", "b", "c"]


@pytest.mark.asyncio
async def test_run_with_all_providers_failed_scores_100():
    pipeline = RealityCheckPipeline(fake_registry(Evidence()), fake_extractor(), fake_suggester())
    report = await pipeline.run("Something brand new")

    assert report.score == 100
    assert report.saturation == SaturationLevel.LOW
    assert report.top_projects == []


@pytest.mark.asyncio
async def test_run_without_llm_uses_keyword_queries():
    """
    WHY: With no LLM configured the scan still runs on fallback keywords
    and returns no pivots.
    """
    llm = make_llm(available=False)
    evidence = Evidence(
        github=GitHubEvidence(total_count=10_000, max_stars=50_000),
        hacker_news=HackerNewsEvidence(total_hits=5_000),
        npm=NpmEvidence(total_count=500)
    )
    registry = fake_registry(evidence)
    pipeline = RealityCheckPipeline(registry, QueryExtractor(llm=llm), PivotSuggester(llm=llm))

    report = await pipeline.run("Carbon footprint tracking app")

    queries = registry.search_all.call_args.args[0]
    assert queries.github == "carbon footprint tracking"
    assert report.score == 0
    assert report.saturation == SaturationLevel.HIGH
    assert report.pivot_suggestions == []


@pytest.mark.asyncio
async def test_run_for_idea_saves_the_report():
    idea = Idea(title="Recipe sharing", description="for families")
    store = FakeStore([idea])
    repository = IdeaRepository(store=store)
    extractor = fake_extractor()
    pipeline = RealityCheckPipeline(fake_registry(Evidence()), extractor, fake_suggester())

    report = await pipeline.run_for_idea(repository, idea.id)

    assert report.idea_id == str(idea.id)
    extractor.extract.assert_awaited_once_with("Recipe sharing", "for families")
    assert store.rows[idea.id].reality_check is not None
    assert store.rows[idea.id].reality_check.id == report.id


@pytest.mark.asyncio
async def test_run_for_idea_unknown_id():
    pipeline = RealityCheckPipeline(fake_registry(Evidence()), fake_extractor(), fake_suggester())
    with pytest.raises(IdeaNotFoundError):
        await pipeline.run_for_idea(IdeaRepository(store=FakeStore()), uuid4())


@pytest.mark.asyncio
async def test_run_for_idea_save_failure():
    idea = Idea(title="Recipe sharing")
    store = FakeStore([idea])
    repository = IdeaRepository(store=store)
    await repository.list()

    store.fail = True
    pipeline = RealityCheckPipeline(fake_registry(Evidence()), fake_extractor(), fake_suggester())

    with pytest.raises(SeedbedError, match="Failed to save reality check"):
        await pipeline.run_for_idea(repository, idea.id)


@pytest.mark.asyncio
async def test_run_for_idea_deleted_remotely_is_not_found():
    """
    WHY: A stale snapshot must not make a deleted idea look scannable.
    HOW: Cache the idea, delete it from the store, then scan it.
    EXPECTED: IdeaNotFoundError and no provider calls.
    """
    idea = Idea(title="Recipe sharing")
    store = FakeStore([idea])
    repository = IdeaRepository(store=store)
    await repository.list()
    del store.rows[idea.id]

    registry = fake_registry(Evidence())
    pipeline = RealityCheckPipeline(registry, fake_extractor(), fake_suggester())

    with pytest.raises(IdeaNotFoundError):
        await pipeline.run_for_idea(repository, idea.id)
    registry.search_all.assert_not_called()


@pytest.mark.asyncio
async def test_run_for_idea_deleted_during_scan_is_not_found():
    idea = Idea(title="Recipe sharing")
    store = FakeStore([idea])
    store.update_idea = AsyncMock(return_value=None)
    pipeline = RealityCheckPipeline(fake_registry(Evidence()), fake_extractor(), fake_suggester())

    with pytest.raises(IdeaNotFoundError):
        await pipeline.run_for_idea(IdeaRepository(store=store), idea.id)
