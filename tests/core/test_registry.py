from fptree.core.registry import IndexRegistry, RenderContext


def test_index_of_appends_on_first_sight_and_reuses_position() -> None:
    registry: IndexRegistry[str] = IndexRegistry()
    assert registry.index_of("NOERROR") == 0
    assert registry.index_of("REFUSED") == 1
    assert registry.index_of("NOERROR") == 0
    assert registry.index_of("SERVFAIL") == 2
    assert registry.values == ["NOERROR", "REFUSED", "SERVFAIL"]
    assert len(registry) == 3
    assert "REFUSED" in registry
    assert "FORMERR" not in registry


def test_index_of_is_injective() -> None:
    registry: IndexRegistry[int] = IndexRegistry()
    queries = [7, 3, 7, 9, 3, 1, 9]
    indices = {query: registry.index_of(query) for query in queries}
    assert sorted(indices.values()) == list(range(len(set(queries))))
    assert indices == {7: 0, 3: 1, 9: 2, 1: 3}


def test_render_contexts_do_not_share_registries() -> None:
    first = RenderContext()
    second = RenderContext()
    first.query_index(5)
    first.response_index("a")
    assert second.query_index(9) == 0
    assert second.response_index("b") == 0
    assert first.summary() == {"nodes": 0, "queries": 1, "responses": 1}
