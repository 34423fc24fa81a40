"""
Task subsystem.

Components:
- task_models.py: data structures (Task, BucketSet)
- task_source.py: Todoist REST adapter
- classifier.py: buckets tasks relative to an anchor day
"""
