"""
task_demo: an in-memory to-do list with a small console front-end.

Subpackages:
- tasks: Task record, statistics, filtering, mutations and JSON codec
- credentials: injectable secret stores (get/set/delete)
- core: ports (Protocols) and AppState
- cli / connectors: composition root, slash commands and the console loop
"""
