"""
Task subsystem.

Components:
- task_models.py: data structures (Project, Task, TaskDraft, TaskStatus)
- task_store.py: in-memory project registry
- task_events.py: publish/subscribe bus for task notifications
- task_queries.py: read-only views (summary, ordering, deadline risk)
- task_remote.py: simulated remote calls (project detail, status updates)
"""
