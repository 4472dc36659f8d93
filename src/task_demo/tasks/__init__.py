"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_stats.py: completion counts and percentage
- task_list.py: filtering, mutations and the TaskList owner
- task_codec.py: JSON encoding/decoding of Task records
"""
