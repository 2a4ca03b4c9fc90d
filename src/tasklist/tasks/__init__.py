"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: TaskList, the ordered collection plus JSON file persistence
"""
