"""
Digest subsystem.

Components:
- notification.py: Notification / MessageRef and Block Kit builders
- composer.py: renders a BucketSet into a Notification
- pipeline.py: fetch -> classify -> compose -> publish
- digest_scheduler.py: polling loop that runs the pipeline periodically
"""
