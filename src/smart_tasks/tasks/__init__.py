"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft, status/priority/category enums)
- classifier.py: keyword heuristic for default priority/category
- task_store.py: in-memory store with create/update/delete helpers
- task_filter.py: search + categorical filters over a task list
- task_api.py: high-level handlers (validation, classification, notifications)
- seed.py: demo tasks loaded at startup
"""
