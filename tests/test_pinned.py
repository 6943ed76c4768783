import json

from inkmark.core.document import parse_html
from inkmark.core.pinned import (
    PinnedSearch,
    PinnedSearches,
    PinnedSearchManager,
    PinnedSearchPersistence,
)
from inkmark.core.search import HighlightColor, HighlightEngine


def test_new_ids_are_prefixed_and_unique():
    first, second = PinnedSearch("a"), PinnedSearch("b")
    assert first.id.startswith("ps_")
    assert first.id != second.id


def test_colors_are_spread_over_the_palette():
    searches = PinnedSearches()
    colors = [searches.add(f"p{i}").color for i in range(6)]
    assert colors[:5] == list(HighlightColor)
    assert colors[5] == HighlightColor.GREEN


def test_next_color_prefers_least_used():
    searches = PinnedSearches()
    first = searches.add("one")
    searches.add("two")
    searches.set_color(first.id, HighlightColor.BLUE)
    assert searches.next_color() == HighlightColor.GREEN


def test_remove_toggle_and_contains():
    searches = PinnedSearches()
    pinned = searches.add("needle")

    assert searches.contains_pattern("needle")
    assert searches.toggle_disabled(pinned.id)
    assert searches.get(pinned.id).disabled
    assert searches.to_defs()[0].disabled

    assert searches.remove(pinned.id)
    assert not searches.remove(pinned.id)
    assert not searches.toggle_disabled(pinned.id)
    assert not searches.set_color(pinned.id, HighlightColor.PINK)
    assert len(searches) == 0


def test_dict_round_trip_uses_camel_case():
    searches = PinnedSearches()
    pinned = searches.add("Needle")
    pinned.case_sensitive = True

    data = searches.to_dict()
    assert data["version"] == 1
    entry = data["pinnedSearches"][0]
    assert entry["caseSensitive"] is True
    assert "createdAt" in entry

    restored = PinnedSearches.from_dict(data)
    assert restored.pinned_searches[0].id == pinned.id
    assert restored.pinned_searches[0].created_at == pinned.created_at


def test_persistence_save_and_load(tmp_path):
    persistence = PinnedSearchPersistence(tmp_path / "pinned.json")
    searches = PinnedSearches()
    searches.add("alpha")
    searches.add("beta")

    assert persistence.save(searches)
    loaded = persistence.load()

    assert [p.pattern for p in loaded.pinned_searches] == ["alpha", "beta"]
    assert [p.color for p in loaded.pinned_searches] == [HighlightColor.GREEN, HighlightColor.BLUE]


def test_saving_empty_list_removes_file(tmp_path):
    path = tmp_path / "pinned.json"
    persistence = PinnedSearchPersistence(path)
    searches = PinnedSearches()
    searches.add("alpha")
    persistence.save(searches)
    assert path.exists()

    assert persistence.save(PinnedSearches())
    assert not path.exists()


def test_missing_or_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "pinned.json"
    persistence = PinnedSearchPersistence(path)
    assert len(persistence.load()) == 0

    path.write_text("{not json", encoding="utf-8")
    assert len(persistence.load()) == 0

    path.write_text(json.dumps({"pinnedSearches": [{"pattern": "no id"}]}), encoding="utf-8")
    assert len(persistence.load()) == 0


def test_default_location_is_app_data_dir(data_dir):
    persistence = PinnedSearchPersistence()
    assert persistence.file_path == data_dir / "pinned-searches.json"


def test_manager_saves_and_notifies(tmp_path):
    manager = PinnedSearchManager(PinnedSearchPersistence(tmp_path / "pinned.json"))
    received = []
    manager.pinned_changed.connect(received.append)

    pinned_id = manager.add("needle")

    assert pinned_id is not None
    assert [d.id for d in received[-1]] == [pinned_id]
    assert manager.add("") is None
    assert len(received) == 1

    assert manager.toggle_disabled(pinned_id)
    assert received[-1][0].disabled
    assert not manager.remove("ps_missing")

    reloaded = PinnedSearchManager(PinnedSearchPersistence(tmp_path / "pinned.json"))
    reloaded.load()
    assert reloaded.get_all()[0].disabled


def test_manager_drives_engine(tmp_path):
    engine = HighlightEngine(parse_html("<p>red fish blue fish</p>"))
    manager = PinnedSearchManager(PinnedSearchPersistence(tmp_path / "pinned.json"))
    manager.pinned_changed.connect(engine.set_pinned)

    pinned_id = manager.add("fish")
    assert engine.get_pinned_count(pinned_id) == 2

    manager.set_color(pinned_id, HighlightColor.ORANGE)
    assert engine.pinned_results[pinned_id][0].color == HighlightColor.ORANGE

    manager.remove(pinned_id)
    assert engine.get_pinned_count(pinned_id) == 0
