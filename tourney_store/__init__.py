from tourney_store.store import Store
