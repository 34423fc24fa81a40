"""
Core types shared by every component.

- outcome.py: tagged success/failure returned by I/O boundaries
- ports.py: Protocols for the task source and the messaging platform
- state.py: AppState wiring concrete implementations together
"""
