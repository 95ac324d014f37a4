import asyncio
import sys
import unittest
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from application.movies import FetchPhase, QuerySearchController
from domain.movies import CatalogUnavailableError, MovieNotFoundError, SearchResult

MATRIX = SearchResult(imdb_id="tt0133093", title="The Matrix", year="1999")
INCEPTION = SearchResult(imdb_id="tt1375666", title="Inception", year="2010")


class _ControlledCatalog:
    """Catalog whose searches stay pending until the test settles them."""

    def __init__(self) -> None:
        self.search_calls: list[str] = []
        self._pending: dict[str, asyncio.Future] = {}

    def _future(self, query: str) -> asyncio.Future:
        fut = self._pending.get(query)
        if fut is None:
            fut = asyncio.get_running_loop().create_future()
            self._pending[query] = fut
        return fut

    async def search_movies(self, query: str):
        self.search_calls.append(query)
        # shield: the "response" still arrives after the caller gave up.
        return await asyncio.shield(self._future(query))

    async def get_movie(self, imdb_id: str):
        raise NotImplementedError

    async def close(self) -> None:
        return None

    def resolve(self, query: str, results) -> None:
        self._future(query).set_result(results)

    def fail(self, query: str, exc: BaseException) -> None:
        self._future(query).set_exception(exc)


class _StubbornCatalog(_ControlledCatalog):
    """An adapter that swallows cancellation and returns data anyway."""

    async def search_movies(self, query: str):
        self.search_calls.append(query)
        try:
            return await self._future(query)
        except asyncio.CancelledError:
            return [SearchResult(imdb_id="tt-stale", title="Stale")]


async def _drain() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


class TestQuerySearchController(unittest.IsolatedAsyncioTestCase):
    async def test_short_query_never_hits_the_network(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)

        c.set_query("ab")
        await _drain()

        self.assertEqual(catalog.search_calls, [])
        self.assertFalse(c.is_loading)
        self.assertEqual(c.results, [])
        self.assertEqual(c.error, "")
        self.assertFalse(c.in_flight)

    async def test_short_query_is_measured_after_trimming(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)

        c.set_query("  ab   ")
        await _drain()

        self.assertEqual(catalog.search_calls, [])
        self.assertFalse(c.is_loading)

    async def test_successful_search_replaces_results(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)

        c.set_query("matrix")
        self.assertTrue(c.is_loading)
        self.assertEqual(c.phase, FetchPhase.LOADING)
        await _drain()
        self.assertEqual(catalog.search_calls, ["matrix"])

        catalog.resolve("matrix", [MATRIX])
        await c.wait_settled()

        self.assertEqual(c.results, [MATRIX])
        self.assertEqual(c.results[0].imdb_id, "tt0133093")
        self.assertEqual(c.error, "")
        self.assertFalse(c.is_loading)
        self.assertEqual(c.phase, FetchPhase.SUCCESS)

    async def test_not_found_sets_error_and_keeps_results(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("matrix")
        catalog.resolve("matrix", [MATRIX])
        await c.wait_settled()

        c.set_query("zzzzznotreal")
        self.assertEqual(c.error, "")
        await _drain()
        catalog.fail("zzzzznotreal", MovieNotFoundError())
        await c.wait_settled()

        self.assertEqual(c.error, "movie not found")
        self.assertEqual(c.results, [MATRIX])
        self.assertFalse(c.is_loading)
        self.assertEqual(c.phase, FetchPhase.ERROR)

    async def test_short_query_after_results_leaves_them_in_place(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("matrix")
        catalog.resolve("matrix", [MATRIX])
        await c.wait_settled()

        c.set_query("ma")

        self.assertEqual(c.results, [MATRIX])
        self.assertFalse(c.is_loading)
        self.assertEqual(catalog.search_calls, ["matrix"])

    async def test_new_query_clears_previous_error(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("zzzzznotreal")
        catalog.fail("zzzzznotreal", MovieNotFoundError())
        await c.wait_settled()
        self.assertEqual(c.error, "movie not found")

        c.set_query("zz")
        self.assertEqual(c.error, "")

    async def test_superseded_query_is_never_observed(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)

        c.set_query("matrix")
        await _drain()
        c.set_query("inception")
        await _drain()

        # The stale response lands after the newer query took over.
        catalog.resolve("matrix", [MATRIX])
        await _drain()
        self.assertEqual(c.results, [])
        self.assertTrue(c.is_loading)

        catalog.resolve("inception", [INCEPTION])
        await c.wait_settled()
        self.assertEqual(c.results, [INCEPTION])
        self.assertEqual(c.query, "inception")

    async def test_superseded_failure_is_never_observed(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)

        c.set_query("zzzzznotreal")
        await _drain()
        c.set_query("inception")
        await _drain()
        catalog.fail("zzzzznotreal", MovieNotFoundError())
        catalog.resolve("inception", [INCEPTION])
        await c.wait_settled()

        self.assertEqual(c.error, "")
        self.assertEqual(c.results, [INCEPTION])

    async def test_cancelled_run_does_not_clear_loading(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)

        c.set_query("matrix")
        await _drain()
        c.set_query("inception")
        await _drain()

        self.assertTrue(c.is_loading)
        self.assertTrue(c.in_flight)

    async def test_stale_result_from_adapter_ignoring_cancel_is_dropped(self) -> None:
        catalog = _StubbornCatalog()
        c = QuerySearchController(catalog)

        c.set_query("matrix")
        await _drain()
        c.set_query("inception")
        await _drain()
        self.assertEqual(c.results, [])

        catalog.resolve("inception", [INCEPTION])
        await c.wait_settled()
        self.assertEqual(c.results, [INCEPTION])

    async def test_transport_failure_surfaces_message(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("matrix")
        await _drain()
        catalog.fail("matrix", CatalogUnavailableError())
        await c.wait_settled()

        self.assertEqual(c.error, "failed to fetch movies")
        self.assertFalse(c.is_loading)

    async def test_unexpected_exception_does_not_escape(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("matrix")
        await _drain()
        with self.assertLogs("application.movies.query_search_controller", level="ERROR"):
            catalog.fail("matrix", RuntimeError("boom"))
            await c.wait_settled()

        self.assertEqual(c.error, "failed to fetch movies")
        self.assertFalse(c.is_loading)

    async def test_same_query_does_not_rerun(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("matrix")
        await _drain()
        c.set_query("matrix")
        await _drain()

        self.assertEqual(catalog.search_calls, ["matrix"])

    async def test_listeners_are_notified(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        seen: list[tuple[bool, int]] = []
        unsubscribe = c.subscribe(lambda: seen.append((c.is_loading, len(c.results))))

        c.set_query("matrix")
        await _drain()
        catalog.resolve("matrix", [MATRIX])
        await c.wait_settled()
        self.assertEqual(seen, [(True, 0), (False, 1)])

        unsubscribe()
        c.set_query("ab")
        self.assertEqual(len(seen), 2)

    async def test_close_cancels_in_flight_search(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog)
        c.set_query("matrix")
        await _drain()

        c.close()
        catalog.resolve("matrix", [MATRIX])
        await _drain()

        self.assertEqual(c.results, [])
        self.assertFalse(c.in_flight)

    async def test_custom_min_query_length(self) -> None:
        catalog = _ControlledCatalog()
        c = QuerySearchController(catalog, min_query_length=1)
        c.set_query("x")
        await _drain()
        self.assertEqual(catalog.search_calls, ["x"])


if __name__ == "__main__":
    unittest.main()
