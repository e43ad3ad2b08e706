"""Basic workflow integration tests."""

import sys

sys.path.insert(0, "src")

from storebridge import ComponentOptions, LocalStore, bridge, define_component


def _tab_bridge(**kwargs):
    setting = bridge(
        key=lambda vm: vm.props["tab"],
        initial_state={"scroll": 0, "draft": ""},
        **kwargs,
    )
    return setting, define_component(setting(ComponentOptions(name="Tab")))


def test_state_survives_instance_recreation():
    """Tab switching: a recreated instance finds its previous state."""
    store = LocalStore()
    _, Tab = _tab_bridge()

    inbox = Tab(store=store, tab="inbox")
    inbox.scroll = 120
    inbox.destroy()

    archive = Tab(store=store, tab="archive")
    assert archive.scroll == 0

    inbox_again = Tab(store=store, tab="inbox")
    assert inbox_again.scroll == 120
    assert inbox_again.draft == ""


def test_removed_state_starts_fresh():
    store = LocalStore()
    _, Tab = _tab_bridge(remove_on_destroy=True)

    inbox = Tab(store=store, tab="inbox")
    inbox.scroll = 120
    inbox.destroy()

    assert Tab(store=store, tab="inbox").scroll == 0


def test_rehydrated_store_feeds_instances():
    """A snapshot restored into a new store is picked up on first construction."""
    server = LocalStore()
    _, Tab = _tab_bridge()
    Tab(store=server, tab="inbox").draft = "hello"

    client = LocalStore(state=server.state)
    _, ClientTab = _tab_bridge()
    vm = ClientTab(store=client, tab="inbox")

    assert vm.draft == "hello"
    assert client.getters["bridge/installed"] is True


def test_snapshot_and_restore():
    store = LocalStore()
    _, Tab = _tab_bridge()
    vm = Tab(store=store, tab="inbox")
    vm.scroll = 10
    data = store.snapshot()

    vm.scroll = 99
    store.restore(data)

    assert vm.scroll == 10
    vm.scroll = 11
    assert store.state["bridge"]["Tab"]["inbox"]["scroll"] == 11


def test_child_inherits_parent_store():
    store = LocalStore()
    _, Tab = _tab_bridge()
    panel_bridge = bridge(namespace="panels", initial_state={"open": False})
    Panel = define_component(panel_bridge(ComponentOptions(name="Panel")))

    panel = Panel(store=store)
    tab = Tab(parent=panel, tab="inbox")
    panel.open = True
    tab.scroll = 5

    assert store.state["panels"] == {"Panel": {"default": {"open": True}}}
    assert store.state["bridge"] == {"Tab": {"inbox": {"scroll": 5, "draft": ""}}}
