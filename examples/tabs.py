"""Tab switching with cached per-tab state.

Each tab instance keeps its own scroll position and draft in the shared
store. Destroying a tab keeps its slice, so reopening it restores the state.
Settings shared by every tab live in a singleton slice opened via get_store.

Run:
    python examples/tabs.py
"""

import logging

from storebridge import ComponentOptions, LocalStore, MutationHistory, bridge, define_component

logging.basicConfig(level=logging.DEBUG)

tabs = bridge(
    key=lambda vm: vm.props["tab"],
    initial_state={"scroll": 0, "draft": ""},
)
Tab = define_component(tabs(ComponentOptions(name="Tab")))

toolbar = bridge(initial_state={"theme": "light", "compact": False})
Toolbar = define_component(toolbar(ComponentOptions(name="Toolbar")))


def main() -> None:
    store = LocalStore()
    history = MutationHistory()
    store.subscribe(history)

    # Pre-populate the shared toolbar before any instance mounts
    toolbar.get_store(store).assign({"theme": "dark"})

    inbox = Tab(store=store, tab="inbox")
    inbox.scroll = 120
    inbox.draft = "Hello"
    inbox.destroy()

    reopened = Tab(store=store, tab="inbox")
    print(f"inbox scroll={reopened.scroll} draft={reopened.draft!r}")
    print(f"toolbar theme={Toolbar(parent=reopened).theme}")
    print(f"store: {store.state['bridge']}")
    for record in history.records():
        print(record.to_dict())


if __name__ == "__main__":
    main()
