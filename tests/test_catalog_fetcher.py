import pytest

from storefront.core.errors import (
    DocumentNotFoundError,
    OrderingUnsupportedError,
    RemoteUnavailableError,
)
from storefront.database.documents import Document, InMemoryDocumentSource
from storefront.database.fallback import FallbackCatalog
from storefront.models.product import ProductCategory
from storefront.services.catalog_fetcher import CatalogFetcher


def doc(doc_id, name="Remote", category="seeds", **extra):
    return Document(
        id=doc_id,
        data={"name": name, "price": 10, "category": category, **extra},
    )


@pytest.mark.asyncio
async def test_fetch_all_uses_ordered_remote_result(scripted_source):
    source = scripted_source(ordered=[doc("r2"), doc("r1")])
    products = await CatalogFetcher(source).fetch_all()

    assert [p.id for p in products] == ["r2", "r1"]
    assert source.calls == [("list", None, True)]


@pytest.mark.asyncio
async def test_ordering_unsupported_degrades_to_unordered_query_once(scripted_source):
    source = scripted_source(
        ordered=OrderingUnsupportedError("missing index"),
        unordered=[doc("r1", category="fertilizers")],
    )
    products = await CatalogFetcher(source).fetch_by_category(ProductCategory.FERTILIZERS)

    assert [p.id for p in products] == ["r1"]
    assert source.calls == [
        ("query", ("category", "fertilizers"), True),
        ("query", ("category", "fertilizers"), False),
    ]


@pytest.mark.asyncio
async def test_unordered_query_also_unsupported_falls_back(scripted_source):
    source = scripted_source(
        ordered=OrderingUnsupportedError("missing index"),
        unordered=OrderingUnsupportedError("still missing"),
    )
    products = await CatalogFetcher(source).fetch_all()

    assert [p.id for p in products] == [p.id for p in FallbackCatalog().by_category(None)]
    assert len(source.calls) == 2


@pytest.mark.asyncio
async def test_empty_remote_result_falls_back(scripted_source):
    products = await CatalogFetcher(scripted_source(ordered=[])).fetch_all()
    assert [p.id for p in products] == ["1", "2", "3", "4", "5", "6"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [RemoteUnavailableError("permission denied"), ConnectionError("reset"), RuntimeError("boom")],
)
async def test_remote_failure_never_raises(scripted_source, error):
    products = await CatalogFetcher(scripted_source(ordered=error)).fetch_by_category(
        ProductCategory.PESTICIDES
    )
    assert [p.id for p in products] == ["5", "6"]


@pytest.mark.asyncio
async def test_fallback_without_match_returns_empty(scripted_source, make_product):
    fallback = FallbackCatalog((make_product("a", category="seeds"),))
    fetcher = CatalogFetcher(scripted_source(ordered=[]), fallback)

    assert await fetcher.fetch_by_category(ProductCategory.PESTICIDES) == []


@pytest.mark.asyncio
async def test_malformed_documents_are_skipped(scripted_source):
    source = scripted_source(ordered=[doc("bad", price=-5), doc("good")])
    products = await CatalogFetcher(source).fetch_all()

    assert [p.id for p in products] == ["good"]


@pytest.mark.asyncio
async def test_fetch_by_id_remote_hit(scripted_source):
    source = scripted_source(document=doc("r1", name="Remote Wheat"))
    product = await CatalogFetcher(source).fetch_by_id("r1")

    assert product.name == "Remote Wheat"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [DocumentNotFoundError("3"), RemoteUnavailableError("offline")],
)
async def test_fetch_by_id_degrades_to_fallback(scripted_source, error):
    product = await CatalogFetcher(scripted_source(document=error)).fetch_by_id("3")
    assert product.name == "NPK Fertilizer"


@pytest.mark.asyncio
async def test_fetch_by_id_unknown_everywhere_is_none(scripted_source):
    fetcher = CatalogFetcher(scripted_source(document=DocumentNotFoundError("nope")))
    assert await fetcher.fetch_by_id("nope") is None


@pytest.mark.asyncio
async def test_in_memory_source_without_index(make_product):
    source = InMemoryDocumentSource(supports_ordering=False)
    source.seed([make_product("m1", name="Maize Seeds")])

    products = await CatalogFetcher(source).fetch_all()
    assert [p.id for p in products] == ["m1"]
